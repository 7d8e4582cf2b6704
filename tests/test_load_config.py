"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from src.deep_merge import deep_merge
from src.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["cache"]["use_cache"] is True
    assert config["headers"]["expires_minutes"] == 7 * 24 * 60


def test_load_config_returns_independent_copy() -> None:
    """Verify that mutating a loaded config leaves the defaults intact."""
    config = load_config(None)
    config["resources"]["root"] = "/elsewhere"
    assert DEFAULT_CONFIG["resources"]["root"] == "."


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    """Verify that a non-existent path falls back to the defaults."""
    config = load_config(str(tmp_path / "absent.yml"))
    assert config == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "resources": {"context_path": "/myapp"},
        "cache": {"use_cache": False},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["resources"]["context_path"] == "/myapp"
    assert loaded["resources"]["root"] == "."
    assert loaded["cache"]["use_cache"] is False


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Verify that malformed YAML stops with a message."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("cache: [unterminated\n")
    with pytest.raises(SystemExit):
        load_config(str(config_file))


def test_load_config_requires_mapping(tmp_path: Path) -> None:
    """Verify that a non-mapping document is rejected."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(SystemExit):
        load_config(str(config_file))
