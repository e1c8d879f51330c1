"""
Configuration for voltakit.
"""

from .settings import HOME_ENV_VAR, SHIM_ENV_VAR, Settings, load_yaml_config

__all__ = ["HOME_ENV_VAR", "SHIM_ENV_VAR", "Settings", "load_yaml_config"]
