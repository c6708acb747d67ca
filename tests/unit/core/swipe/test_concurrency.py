"""
Concurrency tests for mutual-like detection.

Both users of a pair Like each other at (nearly) the same instant; exactly
one call per pair may report created=True and both must see the same match.
"""
import threading

import pytest

from core.swipe import InMemorySwipeStore, SwipeCoordinator, SwipeDecision

PAIRS = 1000
BATCH = 50


def _race(coordinator, pair_ids):
    """Start both Likes of every pair behind a shared barrier; return results per pair."""
    results = {pair: [] for pair in pair_ids}
    errors = []
    barrier = threading.Barrier(2 * len(pair_ids))

    def like(actor, target, pair):
        try:
            barrier.wait(timeout=10)
            results[pair].append(coordinator.record_like(actor, target))
        except Exception as e:
            errors.append(e)

    threads = []
    for pair in pair_ids:
        a, b = f"u{pair}-a", f"u{pair}-b"
        threads.append(threading.Thread(target=like, args=(a, b, pair)))
        threads.append(threading.Thread(target=like, args=(b, a, pair)))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    return results


def test_simultaneous_likes_create_exactly_one_match():
    store = InMemorySwipeStore()
    matches = []
    coordinator = SwipeCoordinator(store, on_match=matches.append)

    for start in range(0, PAIRS, BATCH):
        results = _race(coordinator, range(start, start + BATCH))
        for pair, outcome in results.items():
            assert len(outcome) == 2
            assert sum(r.created for r in outcome) == 1, f"pair {pair}"
            match_ids = {r.match_id for r in outcome if r.match_id is not None}
            assert len(match_ids) == 1

    assert len(matches) == PAIRS
    assert len({m.match_id for m in matches}) == PAIRS


class InterleavingStore(InMemorySwipeStore):
    """Holds every writer until the opposite side has also written its Like."""

    def __init__(self):
        super().__init__()
        self.barrier = threading.Barrier(2)

    def record_action(self, actor_id, target_id, decision):
        changed = super().record_action(actor_id, target_id, decision)
        self.barrier.wait(timeout=10)
        return changed


def test_both_sides_observe_each_other():
    store = InterleavingStore()
    coordinator = SwipeCoordinator(store)
    outcomes = []

    threads = [
        threading.Thread(target=lambda: outcomes.append(coordinator.record_like("A", "B"))),
        threading.Thread(target=lambda: outcomes.append(coordinator.record_like("B", "A"))),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get_action("A", "B") is SwipeDecision.LIKE
    assert store.get_action("B", "A") is SwipeDecision.LIKE
    assert sorted(r.created for r in outcomes) == [False, True]
    assert outcomes[0].match_id == outcomes[1].match_id
    assert len(store.list_matches("A")) == 1


@pytest.mark.db
def test_simultaneous_likes_on_postgres(postgres_session_factory):
    from database.swipe_store import SqlSwipeStore

    coordinator = SwipeCoordinator(SqlSwipeStore(postgres_session_factory))

    results = _race(coordinator, range(BATCH))

    for outcome in results.values():
        assert sum(r.created for r in outcome) == 1
        assert len({r.match_id for r in outcome if r.match_id is not None}) == 1
