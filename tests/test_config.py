import tomllib
from pathlib import Path

import pytest

from list_skills.config import DEFAULT_CONFIG, default_config_path, load_config, resolve_root


def test_defaults():
    assert DEFAULT_CONFIG["descriptor"] == "SKILL.md"
    assert DEFAULT_CONFIG["format"] == "json"
    assert DEFAULT_CONFIG["follow_symlinks"] is True


def test_load_config_returns_defaults_when_no_file(tmp_path):
    config = load_config(config_path=tmp_path / "nonexistent.toml")
    assert config == DEFAULT_CONFIG


def test_load_config_without_path():
    assert load_config(None) == DEFAULT_CONFIG


def test_load_config_merges_with_defaults(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text('format = "yaml"\nunknown = 1\n')
    config = load_config(config_path=config_file)
    assert config["format"] == "yaml"
    assert config["descriptor"] == "SKILL.md"
    assert "unknown" not in config


def test_load_config_does_not_mutate_defaults(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("follow_symlinks = false\n")
    assert load_config(config_path=config_file)["follow_symlinks"] is False
    assert DEFAULT_CONFIG["follow_symlinks"] is True


def test_default_config_path():
    assert default_config_path("/home/me") == Path("/home/me/.config/list-skills/config.toml")
    assert default_config_path(None) is None


def test_resolve_root_expands_leading_tilde():
    assert resolve_root("~/skills", "/home/me") == Path("/home/me/skills")
    assert resolve_root("~", "/home/me") == Path("/home/me")


def test_resolve_root_only_replaces_the_tilde_character():
    assert resolve_root("~other/skills", "/home/me") == Path("/home/meother/skills")


def test_resolve_root_leaves_other_paths_alone():
    assert resolve_root("/abs/~/x", "/home/me") == Path("/abs/~/x")
    assert resolve_root("$HOME/x", "/home/me") == Path("$HOME/x")
    assert resolve_root("rel/dir", "/home/me") == Path("rel/dir")


def test_resolve_root_without_home():
    assert resolve_root("~/skills", None) == Path("~/skills")


def test_load_config_rejects_wrong_types(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text('follow_symlinks = "no"\n')
    with pytest.raises(ValueError):
        load_config(config_path=config_file)
    config_file.write_text("descriptor = 3\n")
    with pytest.raises(ValueError):
        load_config(config_path=config_file)


def test_load_config_invalid_toml(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("format = \n")
    with pytest.raises(tomllib.TOMLDecodeError):
        load_config(config_path=config_file)
