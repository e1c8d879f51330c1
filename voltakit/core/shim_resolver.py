"""
Location of the shared shim executable.

Every per-command shim in ``<root>/bin`` points at one dispatch program. The
resolver finds that program on each invocation, checking in order:

1. an explicit override (``VOLTA_SHIM``), trusted without checking the disk;
2. the default location inside the root (``<root>/shim``);
3. the fallback location used by system-wide installs.

Usage:
    from voltakit.core.layout import VoltaLayout
    from voltakit.core.shim_resolver import ShimResolver

    resolver = ShimResolver(VoltaLayout.from_environment())
    shim = resolver.resolve()
"""

import logging
import os
from pathlib import Path, PurePath
from typing import Optional, Union

from voltakit.core.exceptions import ShimExecutableNotFoundError
from voltakit.core.layout import VoltaLayout

logger = logging.getLogger(__name__)


class ShimResolver:
    """
    Resolves the shim executable for a layout.

    The resolver keeps no state between calls; resolve() performs at most two
    existence checks and never touches the filesystem otherwise.

    Attributes:
        layout: Layout providing the default and fallback locations
        override: Path used verbatim when set
        fallback: Location checked after the default one
    """

    def __init__(
        self,
        layout: VoltaLayout,
        override: Optional[Union[str, PurePath]] = None,
        fallback: Optional[Union[str, PurePath]] = None,
    ):
        self.layout = layout
        self.override = Path(override) if override else None
        if fallback is None:
            fallback = layout.fallback_shim_executable()
        self.fallback = fallback

    @classmethod
    def from_settings(cls, layout: VoltaLayout, settings) -> "ShimResolver":
        """Create a resolver using the override carried by a Settings object."""
        return cls(layout, override=getattr(settings, "shim_override", None))

    def resolve(self) -> PurePath:
        """
        Find the shim executable.

        Returns:
            Path of the shim executable

        Raises:
            ShimExecutableNotFoundError: If no candidate location exists
        """
        if self.override is not None:
            logger.debug(f"Using shim executable override: {self.override}")
            return self.override

        default = self.layout.default_shim_executable()
        if os.path.exists(default):
            logger.debug(f"Using shim executable at {default}")
            return default

        if os.path.exists(self.fallback):
            logger.debug(f"Using system shim executable at {self.fallback}")
            return self.fallback

        raise ShimExecutableNotFoundError([default, self.fallback])


__all__ = ["ShimResolver"]
