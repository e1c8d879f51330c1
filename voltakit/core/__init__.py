"""
Core functionality for voltakit.

This package contains the layout, resolution and link primitives that the
rest of voltakit (and any installer built on it) depends on.
"""

from .exceptions import (
    ExitCode,
    VoltaError,
    EnvironmentSetupError,
    NoHomeDirectoryError,
    UnsupportedPlatformError,
    ShimExecutableNotFoundError,
    ConfigurationError,
    SettingsError,
    PinFileError,
    FilesystemError,
    DirectoryCreationError,
    ShimError,
    BuiltinShimRemovalError,
    exit_code_for,
)

from .platform import (
    OperatingSystem,
    Architecture,
    PlatformInfo,
    detect_platform,
    get_supported_platforms,
    clear_platform_cache,
)

from .layout import (
    VoltaLayout,
    default_volta_home,
)

from .shim_resolver import ShimResolver

from .filesystem import (
    create_symlink,
    remove_link,
    atomic_write,
)

from .directory import (
    ensure_volta_home,
    verify_directory_writable,
)

__all__ = [
    "ExitCode",
    "VoltaError",
    "EnvironmentSetupError",
    "NoHomeDirectoryError",
    "UnsupportedPlatformError",
    "ShimExecutableNotFoundError",
    "ConfigurationError",
    "SettingsError",
    "PinFileError",
    "FilesystemError",
    "DirectoryCreationError",
    "ShimError",
    "BuiltinShimRemovalError",
    "exit_code_for",
    "OperatingSystem",
    "Architecture",
    "PlatformInfo",
    "detect_platform",
    "get_supported_platforms",
    "clear_platform_cache",
    "VoltaLayout",
    "default_volta_home",
    "ShimResolver",
    "create_symlink",
    "remove_link",
    "atomic_write",
    "ensure_volta_home",
    "verify_directory_writable",
]
