"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from catchup.deep_merge import deep_merge
from catchup.load_config import DEFAULT_CONFIG, load_config, remotes_from_config
from catchup.remote import Remote


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_remote_list_replaces() -> None:
    """Verify a configured remote list replaces the default."""
    merged = deep_merge({"remotes": ["origin"]}, {"remotes": ["upstream", "fork"]})
    assert merged["remotes"] == ["upstream", "fork"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["remotes"] == ["origin"]
    assert config["verbose"] is False
    assert config["git"]["executable"] == "git"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Verify callers can modify the returned config freely."""
    config = load_config(None)
    config["history"]["path"] = str(tmp_path / "other.json")
    assert DEFAULT_CONFIG["history"]["path"] == ".catchup/build_history.json"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "catchup.yml"
    config_data = {
        "repository": "/srv/mirror",
        "remotes": ["origin", {"name": "upstream"}],
        "history": {"job": "nightly"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))

    assert loaded["repository"] == "/srv/mirror"
    assert loaded["history"]["job"] == "nightly"
    assert loaded["history"]["path"] == ".catchup/build_history.json"  # Default
    assert remotes_from_config(loaded) == [Remote("origin"), Remote("upstream")]


def test_empty_config_file(tmp_path: Path) -> None:
    """Verify an empty YAML document keeps the defaults."""
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_remotes_from_config_empty() -> None:
    """Verify a null remote list gives no remotes."""
    assert remotes_from_config({"remotes": None}) == []
