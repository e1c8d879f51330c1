"""
Centralized exception hierarchy for voltakit.

Every error raised by voltakit derives from VoltaError and carries the
process exit code the front end should terminate with. Filesystem mutation
failures are not wrapped: they surface as the original OSError and are mapped
by exit_code_for().
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes reported by voltakit front ends."""

    SUCCESS = 0
    UNKNOWN_ERROR = 1
    INVALID_ARGUMENTS = 3
    NO_VERSION_MATCH = 4
    NETWORK_ERROR = 5
    ENVIRONMENT_ERROR = 6
    FILE_SYSTEM_ERROR = 7
    CONFIGURATION_ERROR = 8
    NOT_YET_IMPLEMENTED = 9
    EXECUTION_FAILURE = 126
    EXECUTABLE_NOT_FOUND = 127


# ============================================================================
# Base Exceptions
# ============================================================================


class VoltaError(Exception):
    """Base exception for all voltakit errors."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR


# ============================================================================
# Environment Exceptions
# ============================================================================


class EnvironmentSetupError(VoltaError):
    """Base exception for problems with the host environment."""

    exit_code = ExitCode.ENVIRONMENT_ERROR


class NoHomeDirectoryError(EnvironmentSetupError):
    """Raised when the user's home (or local data) directory cannot be found."""

    def __init__(self, variable: str = "HOME"):
        self.variable = variable
        super().__init__(
            "Could not determine home directory. "
            f"Please ensure the environment variable '{variable}' is set."
        )


class UnsupportedPlatformError(EnvironmentSetupError):
    """Raised when the host OS or CPU architecture has no node distribution."""

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f"Unsupported {kind}: '{value}'")


# ============================================================================
# Shim Resolution Exceptions
# ============================================================================


class ShimExecutableNotFoundError(VoltaError):
    """Raised when the shared shim executable is missing from every location."""

    exit_code = ExitCode.CONFIGURATION_ERROR

    def __init__(self, candidates=()):
        self.candidates = list(candidates)
        msg = "Could not find the Volta shim executable."
        if self.candidates:
            searched = ", ".join(str(c) for c in self.candidates)
            msg += f" Searched: {searched}."
        msg += " Please reinstall or repair your Volta installation."
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(VoltaError):
    """Base exception for unreadable or invalid configuration."""

    exit_code = ExitCode.CONFIGURATION_ERROR


class SettingsError(ConfigurationError):
    """Invalid voltakit settings file."""

    pass


class PinFileError(ConfigurationError):
    """Raised when a pin file exists but cannot be parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse pin file {path}: {reason}")


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class FilesystemError(VoltaError):
    """Base exception for filesystem operations."""

    exit_code = ExitCode.FILE_SYSTEM_ERROR


class DirectoryCreationError(FilesystemError):
    """Raised when directory creation fails."""

    pass


# ============================================================================
# Shim Provisioning Exceptions
# ============================================================================


class ShimError(VoltaError):
    """Base exception for shim provisioning errors."""

    exit_code = ExitCode.FILE_SYSTEM_ERROR


class BuiltinShimRemovalError(ShimError):
    """Raised when attempting to delete one of the built-in shims."""

    exit_code = ExitCode.INVALID_ARGUMENTS

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot remove built-in shim for '{name}'")


def exit_code_for(error: BaseException) -> ExitCode:
    """
    Map an exception to the exit code a front end should report.

    Args:
        error: Exception raised while handling a command

    Returns:
        The error's own exit code for VoltaError, FILE_SYSTEM_ERROR for
        OSError, UNKNOWN_ERROR otherwise
    """
    if isinstance(error, VoltaError):
        return error.exit_code
    if isinstance(error, OSError):
        return ExitCode.FILE_SYSTEM_ERROR
    return ExitCode.UNKNOWN_ERROR


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
]
