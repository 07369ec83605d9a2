"""Configuration helpers for inputid.

* :func:`load_config` returns the raw mapping loaded from ``inputid.yml``
  (or ``inputid.yaml``) when one is found.
* :class:`Config` wraps that mapping with accessors for the generation
  defaults and the logging section. Environment variables (also read from a
  ``.env`` file) take precedence over the file.

Example ``inputid.yml``::

    ids:
      separator: "-"
      fallback: field
      force_uniqueness: true
    logging:
      level: DEBUG
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from inputid.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("inputid.yml", "inputid.yaml")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def find_config_file() -> Optional[Path]:
    """Return the configuration file to use, if any."""

    env_path = os.getenv("INPUTID_CONFIG_PATH")
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate
        logger.warning("INPUTID_CONFIG_PATH points to a missing file: %s", candidate)

    for filename in CONFIG_FILENAMES:
        candidate = Path.cwd() / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load the raw configuration mapping; empty when there is no file."""

    path = Path(config_path) if config_path else find_config_file()
    if path is None:
        return {}

    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Configuration file {path} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return data


def _parse_bool(value: Any, source: str) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    logger.warning("Ignoring non-boolean %s value '%s'", source, value)
    return None


@dataclass(slots=True)
class Config:
    """Accessor for generation defaults and logging settings."""

    data: Dict[str, Any] = field(default_factory=load_config)

    @classmethod
    def from_file(cls, config_path: str | Path) -> "Config":
        """Load ``config_path`` and the ``.env`` file next to it."""

        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file {path} does not exist.")
        load_dotenv(path.parent / ".env")
        return cls(data=load_config(path))

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    @property
    def _ids(self) -> Dict[str, Any]:
        section = self.data.get("ids") or {}
        return section if isinstance(section, dict) else {}

    @property
    def separator(self) -> Optional[str]:
        """Separator joining identifier parts and uniqueness suffixes."""

        env_value = os.getenv("INPUTID_SEPARATOR")
        if env_value is not None:
            return env_value
        value = self._ids.get("separator")
        return None if value is None else str(value)

    @property
    def fallback(self) -> Optional[str]:
        """Token used when a candidate sanitizes to nothing."""

        env_value = os.getenv("INPUTID_FALLBACK")
        if env_value and env_value.strip():
            return env_value.strip()
        value = self._ids.get("fallback")
        return None if value is None else str(value)

    @property
    def force_uniqueness(self) -> Optional[bool]:
        env_value = os.getenv("INPUTID_FORCE_UNIQUENESS")
        if env_value is not None:
            parsed = _parse_bool(env_value, "INPUTID_FORCE_UNIQUENESS")
            if parsed is not None:
                return parsed
        return _parse_bool(self._ids.get("force_uniqueness"), "ids.force_uniqueness")

    @property
    def logging(self) -> Dict[str, Any]:
        section = self.data.get("logging") or {}
        settings = dict(section) if isinstance(section, dict) else {}
        env_level = os.getenv("INPUTID_LOG_LEVEL")
        if env_level and env_level.strip():
            settings["level"] = env_level.strip()
        return settings


__all__ = ["CONFIG_FILENAMES", "Config", "find_config_file", "load_config"]
