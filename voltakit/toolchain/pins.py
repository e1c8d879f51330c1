"""
Pinned toolchain configuration.

Pins record which installed versions a command resolves to. They live under
``<root>/tools/user`` and ``<root>/hooks.json``:

- ``platform.json``: the user's default Node / npm / Yarn versions
- ``packages/<name>.json``: a globally installed package and its platform
- ``bins/<tool>.json``: an executable provided by an installed package
- ``hooks.json``: custom download/lookup hooks per tool

A missing file means nothing is pinned and is never an error. A file that
exists but cannot be parsed raises PinFileError.

Example:
    >>> store = PinStore(VoltaLayout.from_environment())
    >>> store.save_platform(PlatformSpec(node_runtime="10.13.0", npm="6.4.0"))
    >>> store.load_platform().node_runtime
    '10.13.0'
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from voltakit.core.exceptions import PinFileError
from voltakit.core.filesystem import atomic_write
from voltakit.core.layout import VoltaLayout

logger = logging.getLogger(__name__)

HOOK_KINDS = ("prefix", "template", "bin")
HOOK_TOOLS = ("node", "npm", "yarn")
HOOK_ACTIONS = ("distro", "latest", "index")


# ============================================================================
# Models
# ============================================================================


@dataclass
class PlatformSpec:
    """
    A pinned Node runtime, optionally with npm and Yarn versions.

    Serialized as ``{"node": {"runtime": ..., "npm": ...}, "yarn": ...}``.
    """

    node_runtime: str
    npm: Optional[str] = None
    yarn: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        node: Dict[str, str] = {"runtime": self.node_runtime}
        if self.npm:
            node["npm"] = self.npm
        data: Dict[str, Any] = {"node": node}
        if self.yarn:
            data["yarn"] = self.yarn
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "PlatformSpec":
        node = data["node"]
        return cls(
            node_runtime=_require_str(node, "runtime"),
            npm=_optional_str(node, "npm"),
            yarn=_optional_str(data, "yarn"),
        )


@dataclass
class PackageConfig:
    """A package installed into the user toolchain."""

    name: str
    version: str
    platform: PlatformSpec
    bins: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "version": self.version,
            "platform": self.platform.to_dict(),
            "bins": list(self.bins),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PackageConfig":
        return cls(
            name=_require_str(data, "name"),
            version=_require_str(data, "version"),
            platform=PlatformSpec.from_dict(data["platform"]),
            bins=_str_list(data, "bins"),
        )


@dataclass
class BinConfig:
    """An executable provided by an installed package."""

    name: str
    package: str
    version: str
    path: str
    platform: PlatformSpec

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "package": self.package,
            "version": self.version,
            "path": self.path,
            "platform": self.platform.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BinConfig":
        return cls(
            name=_require_str(data, "name"),
            package=_require_str(data, "package"),
            version=_require_str(data, "version"),
            path=_require_str(data, "path"),
            platform=PlatformSpec.from_dict(data["platform"]),
        )


@dataclass
class HookSpec:
    """
    A single hook: a URL prefix, a URL template, or a command to run.

    Attributes:
        kind: One of 'prefix', 'template' or 'bin'
        value: URL prefix, template string or command
    """

    kind: str
    value: str

    def to_dict(self) -> dict:
        return {self.kind: self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "HookSpec":
        kinds = [kind for kind in HOOK_KINDS if kind in data]
        if len(kinds) != 1:
            raise ValueError(
                f"hook must define exactly one of {', '.join(HOOK_KINDS)}"
            )
        return cls(kind=kinds[0], value=_require_str(data, kinds[0]))


@dataclass
class ToolHooks:
    """Hooks configured for one tool."""

    distro: Optional[HookSpec] = None
    latest: Optional[HookSpec] = None
    index: Optional[HookSpec] = None

    def to_dict(self) -> dict:
        data = {}
        for action in HOOK_ACTIONS:
            hook = getattr(self, action)
            if hook is not None:
                data[action] = hook.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ToolHooks":
        hooks = {
            action: HookSpec.from_dict(data[action])
            for action in HOOK_ACTIONS
            if action in data
        }
        return cls(**hooks)


@dataclass
class HooksConfig:
    """Contents of hooks.json."""

    node: Optional[ToolHooks] = None
    npm: Optional[ToolHooks] = None
    yarn: Optional[ToolHooks] = None

    def to_dict(self) -> dict:
        data = {}
        for tool in HOOK_TOOLS:
            hooks = getattr(self, tool)
            if hooks is not None:
                data[tool] = hooks.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "HooksConfig":
        tools = {
            tool: ToolHooks.from_dict(data[tool]) for tool in HOOK_TOOLS if tool in data
        }
        return cls(**tools)


def _require_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _str_list(data: dict, key: str) -> List[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"'{key}' must be a list of strings")
    return list(value)


# ============================================================================
# Store
# ============================================================================


class PinStore:
    """
    Reads and writes pin files for a layout.

    Attributes:
        layout: Layout naming the pin files
    """

    def __init__(self, layout: VoltaLayout):
        self.layout = layout

    def _read(self, path, model):
        path = Path(path)
        if not path.exists():
            logger.debug(f"No pin file at {path}")
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            return model.from_dict(data)
        except json.JSONDecodeError as e:
            raise PinFileError(path, f"invalid JSON: {e}") from e
        except KeyError as e:
            raise PinFileError(path, f"missing key {e}") from e
        except (TypeError, ValueError) as e:
            raise PinFileError(path, str(e)) from e

    def _write(self, path, data: dict) -> None:
        atomic_write(Path(path), json.dumps(data, indent=2) + "\n")
        logger.debug(f"Saved pin file {path}")

    def _remove(self, path) -> bool:
        path = Path(path)
        if not path.exists():
            return False
        path.unlink()
        logger.debug(f"Removed pin file {path}")
        return True

    @staticmethod
    def _list_names(directory) -> List[str]:
        directory = Path(directory)
        if not directory.is_dir():
            return []
        # scoped names ("@scope/pkg") live one directory deeper
        return sorted(
            p.relative_to(directory).with_suffix("").as_posix()
            for p in directory.rglob("*.json")
            if not p.name.startswith(".")
        )

    # ------------------------------------------------------------------
    # Platform
    # ------------------------------------------------------------------

    def load_platform(self) -> Optional[PlatformSpec]:
        """
        Load the user's default platform.

        Returns:
            The pinned platform, or None if no platform is pinned

        Raises:
            PinFileError: If platform.json exists but is invalid
        """
        return self._read(self.layout.user_platform_file(), PlatformSpec)

    def save_platform(self, platform: PlatformSpec) -> None:
        self._write(self.layout.user_platform_file(), platform.to_dict())

    # ------------------------------------------------------------------
    # Packages
    # ------------------------------------------------------------------

    def load_package(self, name: str) -> Optional[PackageConfig]:
        return self._read(self.layout.user_package_config_file(name), PackageConfig)

    def save_package(self, config: PackageConfig) -> None:
        self._write(self.layout.user_package_config_file(config.name), config.to_dict())

    def remove_package(self, name: str) -> bool:
        """
        Remove a package pin.

        Returns:
            True if a pin file was removed, False if none existed
        """
        return self._remove(self.layout.user_package_config_file(name))

    def list_packages(self) -> List[str]:
        return self._list_names(self.layout.user_package_dir())

    # ------------------------------------------------------------------
    # Tool binaries
    # ------------------------------------------------------------------

    def load_tool_bin(self, bin_name: str) -> Optional[BinConfig]:
        return self._read(self.layout.user_tool_bin_config(bin_name), BinConfig)

    def save_tool_bin(self, config: BinConfig) -> None:
        self._write(self.layout.user_tool_bin_config(config.name), config.to_dict())

    def remove_tool_bin(self, bin_name: str) -> bool:
        return self._remove(self.layout.user_tool_bin_config(bin_name))

    def list_tool_bins(self) -> List[str]:
        return self._list_names(self.layout.user_tool_bin_dir())

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def load_hooks(self) -> Optional[HooksConfig]:
        return self._read(self.layout.user_hooks_file(), HooksConfig)

    def save_hooks(self, hooks: HooksConfig) -> None:
        self._write(self.layout.user_hooks_file(), hooks.to_dict())


__all__ = [
    "PlatformSpec",
    "PackageConfig",
    "BinConfig",
    "HookSpec",
    "ToolHooks",
    "HooksConfig",
    "PinStore",
]
