"""Logic for recognizing abbreviated or full commit hashes."""

import re

COMMIT_HASH_RE = re.compile(r"[0-9a-f]{6,40}")


def is_commit_hash(spec: str) -> bool:
    """Return True if the spec could be a (possibly abbreviated) commit id."""
    return COMMIT_HASH_RE.fullmatch(spec) is not None
