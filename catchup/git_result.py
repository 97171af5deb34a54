"""Data model for the outcome of a Git query."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class GitQueryResult:
    """Outcome of a rev-parse or rev-list query.

    A ref or object that does not exist is an expected outcome, reported as
    ``found=False`` rather than raised.
    """

    found: bool
    commits: list[str] = field(default_factory=list)
    detail: str = ""

    @classmethod
    def ok(cls, commits: list[str]) -> "GitQueryResult":
        """Build a successful result."""
        return cls(found=True, commits=list(commits))

    @classmethod
    def not_found(cls, detail: str = "") -> "GitQueryResult":
        """Build a result for a missing ref or object."""
        return cls(found=False, detail=detail)


class GitLayer(Protocol):
    """The Git queries the resolver depends on."""

    def rev_parse(self, ref: str) -> GitQueryResult: ...

    def rev_list(self, range_expr: str) -> GitQueryResult: ...
