"""Git execution layer backed by the git command line."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from catchup.git_result import GitQueryResult

logger = logging.getLogger(__name__)

# stderr fragments git prints when a ref or object simply does not exist
NOT_FOUND_MARKERS = (
    "unknown revision",
    "bad revision",
    "ambiguous argument",
    "needed a single revision",
    "invalid object name",
    "not a valid object name",
    "is ambiguous",
)


class GitError(Exception):
    """Raised when git fails for a reason other than a missing ref."""


class GitClient:
    """Runs rev-parse and rev-list against a local repository."""

    def __init__(self, repo_path: Path | str, git_executable: str = "git") -> None:
        """Initialize the client for the repository at ``repo_path``."""
        self.repo_path = Path(repo_path)
        self.git_executable = git_executable

    def rev_parse(self, ref: str) -> GitQueryResult:
        """Resolve a ref or commit id to the commit it names."""
        if ref.startswith("-"):
            return GitQueryResult.not_found(f"refusing option-like ref {ref!r}")

        result = self._run(["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"])
        if result.returncode != 0 and (
            not result.stderr.strip() or _is_not_found(result.stderr, [ref])
        ):
            # --verify --quiet exits silently when the name does not resolve
            return GitQueryResult.not_found(f"{ref} does not name a commit")
        self._check(result, ["rev-parse", ref])

        sha1 = result.stdout.strip()
        return GitQueryResult.ok([sha1])

    def rev_list(self, range_expr: str) -> GitQueryResult:
        """List commits in ``range_expr``, newest first."""
        if range_expr.startswith("-"):
            msg = f"refusing option-like range {range_expr!r}"
            return GitQueryResult.not_found(msg)

        result = self._run(["rev-list", range_expr, "--"])
        if result.returncode != 0 and _is_not_found(
            result.stderr, range_expr.split("..")
        ):
            return GitQueryResult.not_found(result.stderr.strip())
        self._check(result, ["rev-list", range_expr])

        return GitQueryResult.ok(result.stdout.split())

    def _run(self, args: Sequence[str]) -> subprocess.CompletedProcess[str]:
        cmd = [self.git_executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            msg = f"Could not run {self.git_executable}: {e}"
            raise GitError(msg) from e

    def _check(
        self, result: subprocess.CompletedProcess[str], args: Sequence[str]
    ) -> None:
        if result.returncode != 0:
            msg = (
                f"git {' '.join(args)} failed in {self.repo_path} "
                f"(rc={result.returncode}): {result.stderr.strip()}"
            )
            raise GitError(msg)


def _is_not_found(stderr: str, operands: Sequence[str]) -> bool:
    text = stderr.lower()
    if any(marker in text for marker in NOT_FOUND_MARKERS):
        return True
    # "bad object" also reports corruption; only a missing operand is not-found
    return any(f"bad object {op.lower()}" in text for op in operands if op)
