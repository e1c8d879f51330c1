"""
User toolchain state: pinned versions and per-command shims.
"""

from .pins import (
    PlatformSpec,
    PackageConfig,
    BinConfig,
    HookSpec,
    ToolHooks,
    HooksConfig,
    PinStore,
)
from .shims import BUILTIN_SHIMS, ShimResult, ShimManager

__all__ = [
    "PlatformSpec",
    "PackageConfig",
    "BinConfig",
    "HookSpec",
    "ToolHooks",
    "HooksConfig",
    "PinStore",
    "BUILTIN_SHIMS",
    "ShimResult",
    "ShimManager",
]
