"""Configuration loading for list-skills."""
import tomllib
from pathlib import Path

DEFAULT_CONFIG = {
    "descriptor": "SKILL.md",
    "format": "json",
    "follow_symlinks": True,
}

CONFIG_TYPES = {
    "descriptor": str,
    "format": str,
    "follow_symlinks": bool,
}


def default_config_path(home: str | None) -> Path | None:
    if not home:
        return None
    return Path(home) / ".config" / "list-skills" / "config.toml"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from TOML file, falling back to defaults.

    Raises OSError if the file cannot be read and ValueError (including
    tomllib.TOMLDecodeError) if it is not valid TOML or a known key has the
    wrong type.
    """
    config = dict(DEFAULT_CONFIG)

    if config_path is not None and config_path.exists():
        with open(config_path, "rb") as f:
            user_config = tomllib.load(f)
        for key, expected in CONFIG_TYPES.items():
            if key not in user_config:
                continue
            value = user_config[key]
            if not isinstance(value, expected):
                raise ValueError(f"{key} must be a {expected.__name__}, got {value!r}")
            config[key] = value

    return config


def resolve_root(raw: str, home: str | None) -> Path:
    """Expand a leading ``~`` to ``home``. Nothing else is expanded."""
    if home is not None and raw.startswith("~"):
        raw = home + raw[1:]
    return Path(raw)
