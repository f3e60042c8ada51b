"""Configuration utilities for Costar.

Provides XDG-compliant config path handling and configuration loading.
All configuration is stored in ~/.config/costar/ by default, respecting
the XDG_CONFIG_HOME environment variable when set.
"""

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from costar.core.constants import (
    DEFAULT_ACTORS_FILE,
    DEFAULT_BEST_CENTERS_LIMIT,
    DEFAULT_CENTER,
    DEFAULT_DATA_DIRNAME,
    DEFAULT_MOVIE_ACTORS_FILE,
    DEFAULT_MOVIES_FILE,
)
from costar.core.exceptions import ConfigError

__all__ = [
    "CostarConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_TOML",
    "ConfigError",
    "CONFIG_KEYS",
    "get_xdg_config_home",
    "get_config_path",
    "ensure_config_directory",
    "load_config",
    "write_default_config",
    "resolve_data_dir",
    "get_config_display",
    "get_setting_value",
]

# Valid configuration keys with descriptions
CONFIG_KEYS: dict[str, str] = {
    "data_dir": "Directory holding the dataset files (default: ./inputs)",
    "actors_file": "Actor file name, one 'actorID|name' per line",
    "movies_file": "Movie file name, one 'movieID|title' per line",
    "movie_actors_file": "Cast file name, one 'movieID|actorID' per line",
    "default_center": "Actor used as the initial center of the universe",
    "best_centers_limit": "Default number of rows for `costar centers`",
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory for Costar.

    Returns ~/.config/costar/ by default.
    Respects XDG_CONFIG_HOME environment variable when set.

    Returns:
        Path to Costar's config directory.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "costar"


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to config.toml file within Costar's config directory.
    """
    return get_xdg_config_home() / "config.toml"


def ensure_config_directory() -> Path:
    """Ensure config directory exists.

    Returns:
        Path to the created/existing config directory.
    """
    config_dir = get_xdg_config_home()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@dataclass(frozen=True)
class CostarConfig:
    """Costar configuration settings.

    All fields have sensible defaults. Config file can be partial.
    """

    # Dataset location; empty means ./inputs relative to the working directory
    data_dir: str = ""
    actors_file: str = DEFAULT_ACTORS_FILE
    movies_file: str = DEFAULT_MOVIES_FILE
    movie_actors_file: str = DEFAULT_MOVIE_ACTORS_FILE

    # Query settings
    default_center: str = DEFAULT_CENTER
    best_centers_limit: int = DEFAULT_BEST_CENTERS_LIMIT


DEFAULT_CONFIG = CostarConfig()


def _validate_config_values(data: dict[str, object]) -> None:
    """Validate config value types against the CostarConfig fields.

    Args:
        data: Raw config data from TOML file.

    Raises:
        ConfigError: If any known key has a value of the wrong type.
    """
    for f in fields(CostarConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        expected = type(getattr(DEFAULT_CONFIG, f.name))
        # bool is an int subclass; reject it for integer settings
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"Invalid {f.name} {value!r}. Must be a {expected.__name__}."
            )

    limit = data.get("best_centers_limit")
    if isinstance(limit, int) and limit < 1:
        raise ConfigError(f"Invalid best_centers_limit {limit}. Must be at least 1.")


# Default config TOML template with documentation comments
DEFAULT_CONFIG_TOML = """\
# Costar Configuration
# Location: ~/.config/costar/config.toml

# Directory holding the dataset files (empty: ./inputs)
data_dir = ""

# Dataset file names inside data_dir
actors_file = "actors.txt"
movies_file = "movies.txt"
movie_actors_file = "movie-actors.txt"

# Initial center of the acting universe
default_center = "Kevin Bacon"

# Default number of rows for `costar centers`
best_centers_limit = 10
"""


def load_config(config_path: Path | None = None) -> CostarConfig:
    """Load configuration from TOML file.

    Args:
        config_path: Optional path override. Defaults to XDG config path.

    Returns:
        CostarConfig with loaded values merged with defaults.

    Raises:
        ConfigError: If TOML parsing fails or a value has the wrong type.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return DEFAULT_CONFIG

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Configuration file is invalid: {e}") from e

    _validate_config_values(data)

    # Merge with defaults - only use keys that are valid CostarConfig fields
    valid_fields = {f.name for f in fields(CostarConfig)}
    filtered_data = {k: v for k, v in data.items() if k in valid_fields}

    return CostarConfig(**{**DEFAULT_CONFIG.__dict__, **filtered_data})


def write_default_config(config_path: Path | None = None) -> Path:
    """Write default configuration file with documented settings.

    Creates the config directory if needed. Uses atomic write pattern
    (temp file + rename) to prevent corruption.

    Args:
        config_path: Optional path override. Defaults to XDG config path.

    Returns:
        Path of the written file.
    """
    if config_path is None:
        config_path = get_config_path()
        ensure_config_directory()
    else:
        config_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = config_path.with_suffix(".tmp")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_TOML)
        temp_path.replace(config_path)
    finally:
        # Clean up temp file if it still exists
        try:
            if temp_path.exists():
                temp_path.unlink()
        except OSError:
            pass
    return config_path


def resolve_data_dir(config: CostarConfig) -> Path:
    """Return the dataset directory a configuration points to."""
    if config.data_dir:
        return Path(config.data_dir).expanduser()
    return Path.cwd() / DEFAULT_DATA_DIRNAME


def get_config_display(config: CostarConfig) -> str:
    """Format all configuration for display with section headers.

    Args:
        config: The CostarConfig to format.

    Returns:
        Human-readable string with all settings grouped by category.
    """
    lines = []

    lines.append("# Dataset")
    lines.append(f"data_dir: {get_setting_value(config, 'data_dir')}")
    lines.append(f"actors_file: {config.actors_file}")
    lines.append(f"movies_file: {config.movies_file}")
    lines.append(f"movie_actors_file: {config.movie_actors_file}")
    lines.append("")

    lines.append("# Queries")
    lines.append(f"default_center: {config.default_center}")
    lines.append(f"best_centers_limit: {config.best_centers_limit}")

    return "\n".join(lines)


def get_setting_value(config: CostarConfig, key: str) -> str:
    """Get a single setting value for display.

    Args:
        config: The CostarConfig to read from.
        key: Configuration key to retrieve.

    Returns:
        String representation of the setting value.

    Raises:
        ConfigError: If key is not a valid configuration key.
    """
    if key not in CONFIG_KEYS:
        valid_keys = ", ".join(sorted(CONFIG_KEYS.keys()))
        raise ConfigError(f"Unknown configuration key '{key}'. Valid keys: {valid_keys}")

    value = getattr(config, key)

    if key == "data_dir" and not value:
        return f"(not set, using ./{DEFAULT_DATA_DIRNAME})"

    return str(value)
