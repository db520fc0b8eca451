"""Configuration file loading for cmdwrap."""

import logging
import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from cmdwrap.errors import ConfigError
from cmdwrap.models import LaunchConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".cmdwrap"
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_ENV_VAR = "CMDWRAP_CONFIG"


def get_config_path() -> Path:
    """Return the config file path from env or default."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def load_config(path: Path | str | None = None) -> LaunchConfig:
    """Load the ``[launch]`` table of a TOML file into a LaunchConfig.

    A missing file yields the default configuration.
    """
    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.is_file():
        log.debug("no config file at %s, using defaults", config_path)
        return LaunchConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    launch = data.get("launch", {})
    if not isinstance(launch, dict):
        raise ConfigError(f"{config_path}: [launch] must be a table")
    if "password" in launch:
        raise ConfigError(f"{config_path}: passwords cannot be stored in the config file")

    try:
        config = LaunchConfig.model_validate(launch)
    except ValidationError as e:
        raise ConfigError(f"{config_path}: {e}") from e
    log.debug("loaded config from %s", config_path)
    return config
