"""
Shared utilities for CLI commands.

Builds the settings, layout and resolver every command works with, so all
commands agree on the root directory and the shim override.
"""

import logging
from dataclasses import dataclass

from voltakit.config.settings import Settings
from voltakit.core.layout import VoltaLayout
from voltakit.core.shim_resolver import ShimResolver

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """Objects shared by CLI commands."""

    settings: Settings
    layout: VoltaLayout
    resolver: ShimResolver


def load_context(args) -> CommandContext:
    """
    Build the command context from parsed arguments.

    Args:
        args: Parsed arguments (uses ``args.config`` when present)

    Returns:
        CommandContext for the current host

    Raises:
        SettingsError: If the settings file is invalid
        UnsupportedPlatformError: If the host platform is not supported
        NoHomeDirectoryError: If the root directory cannot be determined
    """
    settings = Settings.load(getattr(args, "config", None))
    layout = VoltaLayout.from_environment(settings)
    logger.debug(f"Using {layout!r}")
    return CommandContext(
        settings=settings,
        layout=layout,
        resolver=ShimResolver.from_settings(layout, settings),
    )
