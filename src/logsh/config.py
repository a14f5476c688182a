"""Configuration management for logsh."""
import json
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError

from .models import Configuration

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".logsh.json"
HOME_ENV_VARS = ("HOME", "HOMEPATH")


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


def resolve_home_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Home directory from HOME, falling back to HOMEPATH."""
    env = os.environ if environ is None else environ
    for var in HOME_ENV_VARS:
        value = env.get(var)
        if value:
            return Path(value)
    return Path.home()


def get_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    return resolve_home_dir(environ) / CONFIG_FILENAME


def dump_configuration(config: Configuration) -> str:
    return config.model_dump_json(indent=2)


def parse_configuration(text: str, path: Optional[Path] = None) -> Configuration:
    """Parse configuration JSON. Raises ConfigError on bad content."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON: {e}", path) from e
    except RecursionError as e:
        raise ConfigError("Invalid JSON: nested too deeply", path) from e
    try:
        return Configuration.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e.error_count()} error(s)\n{e}", path) from e


def read_configuration(path: Path) -> Configuration:
    """
    Strictly read a configuration file.
    Missing file returns the default; unreadable or invalid files raise ConfigError.
    """
    if not path.exists():
        return Configuration()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Unable to read configuration: {e}", path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Invalid encoding: {e}", path) from e
    return parse_configuration(text, path)


class ConfigurationStore:
    """
    Owns the process's Configuration.

    Loaded lazily on first get_current() and cached for the lifetime of the
    store. Saving writes to disk and replaces the cached value.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else get_config_path()
        self._current: Optional[Configuration] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._current is not None

    def get_current(self) -> Configuration:
        if self._current is None:
            self._current = self._load()
        return self._current

    def _load(self) -> Configuration:
        try:
            config = read_configuration(self._path)
        except (ConfigError, OSError) as e:
            logger.debug(f"Using default configuration, {self._path} unusable: {e}")
            return Configuration()
        logger.debug(f"Loaded {len(config.connections)} connection(s) from {self._path}")
        return config

    def save(self, config: Configuration) -> bool:
        """Write config to disk. Returns False (after logging) if the write fails."""
        serialized = dump_configuration(config)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(serialized, encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot write configuration to {self._path}: {e}")
            return False

        logger.debug(f"Saved configuration to {self._path}")
        self._current = config
        return True
