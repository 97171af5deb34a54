"""Data model for a configured upstream remote."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Remote:
    """Represents a named remote whose refs live under refs/remotes/<name>/."""

    name: str
