"""
Runtime settings for voltakit.

Two values can be configured:

- ``home``: root directory of the installation (``VOLTA_HOME``)
- ``shim``: shim executable override (``VOLTA_SHIM``, mainly for tests)

Values come from an optional YAML settings file and from the environment;
environment variables win over the file.

Example settings file:

    home: ~/tools/volta
    shim: /opt/volta/shim
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from voltakit.core.exceptions import SettingsError

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "VOLTA_HOME"
SHIM_ENV_VAR = "VOLTA_SHIM"

_KNOWN_KEYS = {"home", "shim"}


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML settings file.

    Args:
        config_file: Path to YAML file
        required: If True, raise error if file doesn't exist

    Returns:
        Settings dictionary (empty dict if file doesn't exist and not required)

    Raises:
        SettingsError: If the file is required but missing, is not valid YAML,
            or does not contain a mapping
    """
    config_file = Path(config_file)
    if not config_file.exists():
        if required:
            raise SettingsError(f"Settings file not found: {config_file}")
        logger.debug(f"Settings file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading settings from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise SettingsError(
            f"Settings file {config_file} must contain a mapping, "
            f"got {type(config).__name__}"
        )

    unknown = set(config) - _KNOWN_KEYS
    if unknown:
        logger.warning(
            f"Ignoring unknown settings in {config_file}: {', '.join(sorted(unknown))}"
        )

    return config


def _path_value(value: Any, source: str) -> Optional[Path]:
    if value is None or value == "":
        return None
    if not isinstance(value, (str, os.PathLike)):
        raise SettingsError(f"Expected a path for {source}, got {value!r}")
    return Path(value).expanduser()


@dataclass
class Settings:
    """
    voltakit runtime settings.

    Attributes:
        home: Root directory override, or None for the platform default
        shim_override: Shim executable used without any existence check
    """

    home: Optional[Path] = None
    shim_override: Optional[Path] = None

    @classmethod
    def from_environment(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from environment variables.

        Empty variables are treated as unset.

        Args:
            env: Environment mapping (defaults to os.environ)
        """
        if env is None:
            env = os.environ
        return cls(
            home=_path_value(env.get(HOME_ENV_VAR), HOME_ENV_VAR),
            shim_override=_path_value(env.get(SHIM_ENV_VAR), SHIM_ENV_VAR),
        )

    @classmethod
    def load(
        cls,
        config_file: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """
        Load settings from a YAML file and the environment.

        Args:
            config_file: Optional settings file; must exist when given
            env: Environment mapping (defaults to os.environ)

        Returns:
            Merged settings, environment taking precedence

        Raises:
            SettingsError: If the settings file is missing or invalid
        """
        file_values: Dict[str, Any] = {}
        if config_file is not None:
            file_values = load_yaml_config(config_file, required=True)

        from_env = cls.from_environment(env)
        home = from_env.home or _path_value(file_values.get("home"), "home")
        shim = from_env.shim_override or _path_value(file_values.get("shim"), "shim")
        return cls(home=home, shim_override=shim)


__all__ = [
    "HOME_ENV_VAR",
    "SHIM_ENV_VAR",
    "Settings",
    "load_yaml_config",
]
