"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from catchup.deep_merge import deep_merge
from catchup.remote import Remote

DEFAULT_CONFIG: dict[str, Any] = {
    "repository": ".",
    "remotes": ["origin"],
    "verbose": False,
    "history": {
        "path": ".catchup/build_history.json",
        "job": "default",
    },
    "git": {
        "executable": "git",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config


def remotes_from_config(config: dict[str, Any]) -> list[Remote]:
    """Build the ordered remote list from the ``remotes`` setting.

    Entries may be plain names or mappings with a ``name`` key.
    """
    remotes = []
    for entry in config.get("remotes") or []:
        name = entry["name"] if isinstance(entry, dict) else str(entry)
        remotes.append(Remote(name))
    return remotes
