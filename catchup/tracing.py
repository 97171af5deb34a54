"""Signature of the diagnostic trace callback threaded through resolution."""

from collections.abc import Callable

# logging-style: trace("Found %s on %s", sha1, ref)
Trace = Callable[..., None]


def no_trace(fmt: str, *args: object) -> None:
    """Discard a trace line."""
    return None
