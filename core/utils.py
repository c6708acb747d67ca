import hashlib
import json
from typing import Any, Tuple


def canonical_pair(user_id_a: Any, user_id_b: Any) -> Tuple[str, str]:
    """Order two user identifiers so an unordered pair has one storage key.

    Args:
        user_id_a: First user identifier
        user_id_b: Second user identifier

    Returns:
        (low, high) tuple of string identifiers
    """
    a, b = str(user_id_a), str(user_id_b)
    return (a, b) if a <= b else (b, a)


def stable_hash(payload: Any, length: int = 32) -> str:
    """Deterministic SHA256 of a JSON-serializable payload."""
    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(raw.encode('utf-8')).hexdigest()[:length]
