import logging
import sys
import json
import argparse
from dataclasses import asdict

from pydantic import ValidationError

from core.app_context import AppContext
from core.config_loader import load_config
from core.errors import InvalidActor, MatchingError, NotFound
from database.init_db import init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _print(payload) -> None:
    print(json.dumps(payload, indent=2, default=str))


def cmd_init_db(ctx: AppContext, args) -> None:
    init_db(ctx.engine)


def cmd_score(ctx: AppContext, args) -> None:
    result = ctx.ranker.compatibility_between(args.user_a, args.user_b)
    _print(result.to_dict())


def cmd_rank(ctx: AppContext, args) -> None:
    ranked = ctx.ranker.rank(args.requester, args.candidates, args.limit)
    _print([
        {"user_id": r.user_id, "score": r.result.composite_score, "level": r.result.level}
        for r in ranked
    ])


def cmd_discover(ctx: AppContext, args) -> None:
    ranked = ctx.discovery.discover(args.user, args.limit)
    _print([
        {"user_id": r.user_id, "score": r.result.composite_score, "level": r.result.level}
        for r in ranked
    ])


def cmd_like(ctx: AppContext, args) -> None:
    result = ctx.coordinator.record_like(args.actor, args.target)
    if result.created:
        logger.info(f"It's a match! {args.actor} <-> {args.target}")
    _print(asdict(result))


def cmd_pass(ctx: AppContext, args) -> None:
    _print(asdict(ctx.coordinator.record_pass(args.actor, args.target)))


def cmd_state(ctx: AppContext, args) -> None:
    status = ctx.coordinator.pair_state(args.user_a, args.user_b)
    _print({
        "state": status.state.value,
        "liked_by": sorted(status.liked_by),
        "match_id": status.match_id,
    })


def cmd_matches(ctx: AppContext, args) -> None:
    matches = ctx.coordinator.list_matches(args.user, active_only=not args.include_inactive)
    _print([
        {
            "match_id": m.match_id,
            "user_id": m.other_user(args.user),
            "matched_at": m.matched_at,
            "is_active": m.is_active,
        }
        for m in matches
    ])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roommate Matching Driver")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('init-db', help='Create matching tables')
    p.set_defaults(func=cmd_init_db)

    p = sub.add_parser('score', help='Compatibility between two users')
    p.add_argument('user_a')
    p.add_argument('user_b')
    p.set_defaults(func=cmd_score)

    p = sub.add_parser('rank', help='Rank a candidate pool for a requester')
    p.add_argument('requester')
    p.add_argument('candidates', nargs='+')
    p.add_argument('--limit', type=int, default=None)
    p.set_defaults(func=cmd_rank)

    p = sub.add_parser('discover', help='Ranked feed of profiles not yet swiped on')
    p.add_argument('user')
    p.add_argument('--limit', type=int, default=None)
    p.set_defaults(func=cmd_discover)

    p = sub.add_parser('like', help='Record a Like')
    p.add_argument('actor')
    p.add_argument('target')
    p.set_defaults(func=cmd_like)

    p = sub.add_parser('pass', help='Record a Pass')
    p.add_argument('actor')
    p.add_argument('target')
    p.set_defaults(func=cmd_pass)

    p = sub.add_parser('state', help='Swipe state of a pair')
    p.add_argument('user_a')
    p.add_argument('user_b')
    p.set_defaults(func=cmd_state)

    p = sub.add_parser('matches', help="List a user's matches, newest first")
    p.add_argument('user')
    p.add_argument('--include-inactive', action='store_true')
    p.set_defaults(func=cmd_matches)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    ctx = None

    try:
        config = load_config(args.config)
        ctx = AppContext.build(config)
        args.func(ctx, args)
    except ValidationError as e:
        logger.error(f"Invalid configuration in {args.config}: {e}")
        return 2
    except (NotFound, InvalidActor, ValueError) as e:
        logger.error(str(e))
        return 2
    except MatchingError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1
    finally:
        if ctx is not None:
            ctx.engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
