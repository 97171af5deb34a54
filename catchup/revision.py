"""Data models for resolved commits and the refs they were reached through."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Branch:
    """Associates a ref name with the commit it pointed at."""

    name: str
    sha1: str


@dataclass
class Revision:
    """Represents one commit plus every ref it was reached through."""

    sha1: str
    branches: set[Branch] = field(default_factory=set)

    def branch_names(self) -> list[str]:
        """Return the associated ref names, sorted for stable output."""
        return sorted(b.name for b in self.branches)
