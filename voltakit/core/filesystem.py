"""
Cross-platform file system utilities for voltakit.

This module provides:
- Link creation (symbolic links on Unix, junctions for directories on Windows)
- Link removal, so callers can replace stale links
- Atomic file writes for configuration files

Link operations never retry, clean up or overwrite. Failures surface as the
OSError raised by the operating system, so callers can tell a permission
problem from an existing destination.
"""

import errno
import os
import sys
import tempfile
from pathlib import Path
from typing import Union

# Platform detection
IS_WINDOWS = os.name == "nt"

if sys.platform == "win32":
    import _winapi

# Reparse tag carried by NTFS junctions
_IO_REPARSE_TAG_MOUNT_POINT = 0xA0000003


def _missing(path: Path) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))


def is_junction(path: Union[str, Path]) -> bool:
    """
    Check whether a path is an NTFS junction.

    Always False on Unix.
    """
    if not IS_WINDOWS:
        return False
    try:
        st = os.lstat(path)
    except OSError:
        return False
    return getattr(st, "st_reparse_tag", 0) == _IO_REPARSE_TAG_MOUNT_POINT


# ============================================================================
# Link Creation
# ============================================================================


def create_symlink(source: Union[str, Path], destination: Union[str, Path]) -> None:
    """
    Create ``destination`` as a link resolving to ``source``.

    - On Unix: a symbolic link.
    - On Windows: a junction when ``source`` is a directory (no privilege
      required), a file symbolic link otherwise.

    Args:
        source: Existing file or directory the link points at. A relative
            path is taken relative to the current directory and the link
            stores its absolute form.
        destination: Path of the link to create; its parent must exist

    Raises:
        FileNotFoundError: If ``source`` does not exist. This is checked
            first, so a missing source wins over an occupied destination.
        FileExistsError: If anything, including a stale link, is at ``destination``
        OSError: Any other failure reported by the operating system

    Example:
        >>> create_symlink(layout.default_shim_executable(), layout.shim_file("node"))
    """
    # relative targets would otherwise resolve against the link directory
    source = Path(os.path.abspath(source))
    destination = Path(destination)

    if not source.exists():
        raise _missing(source)

    if IS_WINDOWS and source.is_dir():
        _winapi.CreateJunction(str(source), str(destination))
    else:
        os.symlink(source, destination)


def remove_link(path: Union[str, Path]) -> None:
    """
    Remove a link created by create_symlink().

    The link target is left untouched.

    Args:
        path: Link to remove

    Raises:
        FileNotFoundError: If nothing exists at ``path``
        ValueError: If ``path`` exists but is not a link
    """
    path = Path(path)

    if not os.path.lexists(path):
        raise _missing(path)

    if is_junction(path) or (IS_WINDOWS and path.is_symlink() and path.is_dir()):
        # directory links on Windows are removed like directories
        os.rmdir(path)
    elif path.is_symlink():
        path.unlink()
    else:
        raise ValueError(f"Path is not a symbolic link: {path}")


# ============================================================================
# Safe File Operations
# ============================================================================


def atomic_write(
    file_path: Union[str, Path], content: Union[str, bytes], encoding: str = "utf-8"
) -> None:
    """
    Write file atomically using temp file + rename.

    This ensures the file is never in a partially-written state.
    If the write fails, the original file (if any) remains unchanged.

    Args:
        file_path: Path to write to
        content: Content to write (string or bytes)
        encoding: Text encoding (used only for string content)

    Example:
        >>> atomic_write('platform.json', '{"node": {"runtime": "10.13.0"}}')
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Create temp file in same directory (ensures same filesystem)
    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        if isinstance(content, str):
            with open(temp_fd, "w", encoding=encoding) as f:
                f.write(content)
        else:
            with open(temp_fd, "wb") as f:
                f.write(content)

        temp_path.replace(file_path)

    except Exception:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise


__all__ = [
    "IS_WINDOWS",
    "is_junction",
    "create_symlink",
    "remove_link",
    "atomic_write",
]
