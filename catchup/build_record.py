"""Data model for the build history of a single job."""

from dataclasses import dataclass, field


@dataclass
class BuildRecord:
    """Last built commit and every commit built so far for one job."""

    last_built_commit: str | None = None
    built_commits: set[str] = field(default_factory=set)

    def has_been_built(self, sha1: str) -> bool:
        """Return True if the commit was built by a previous run."""
        return sha1 in self.built_commits
