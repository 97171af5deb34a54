"""Shared fixtures: an in-memory stand-in for the Git execution layer."""

from unittest.mock import MagicMock

import pytest

from catchup.git_result import GitQueryResult


def make_git(refs: dict[str, list[str]]) -> MagicMock:
    """Build a Git layer mock from ref -> history (newest first)."""
    known = {sha1 for history in refs.values() for sha1 in history}

    def rev_parse(ref: str) -> GitQueryResult:
        if ref in refs:
            return GitQueryResult.ok([refs[ref][0]])
        matches = [sha1 for sha1 in known if sha1.startswith(ref)]
        if len(matches) == 1:
            return GitQueryResult.ok(matches)
        return GitQueryResult.not_found(f"unknown revision {ref}")

    def rev_list(range_expr: str) -> GitQueryResult:
        since, _, ref = range_expr.partition("..")
        if ref not in refs or since not in known:
            return GitQueryResult.not_found(f"bad revision '{range_expr}'")
        # everything reachable from ``since`` on any ref is excluded
        excluded = set()
        for history in refs.values():
            if since in history:
                excluded.update(history[history.index(since) :])
        return GitQueryResult.ok([c for c in refs[ref] if c not in excluded])

    git = MagicMock()
    git.rev_parse.side_effect = rev_parse
    git.rev_list.side_effect = rev_list
    return git


@pytest.fixture
def git_factory():
    """Fixture returning the Git layer mock factory."""
    return make_git
