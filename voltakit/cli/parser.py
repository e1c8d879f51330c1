"""
voltakit CLI argument parser.

This module implements the command-line interface for voltakit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from voltakit.core.exceptions import ExitCode, exit_code_for

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("voltakit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """voltakit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="voltakit",
            description="voltakit - Volta directory layout and shim resolution",
            epilog='Use "voltakit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"voltakit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to a YAML settings file",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_paths_command(subparsers)
        self._add_env_command(subparsers)
        self._add_which_shim_command(subparsers)
        self._add_setup_command(subparsers)
        self._add_shim_command(subparsers)
        self._add_pin_command(subparsers)

        return parser

    def _add_paths_command(self, subparsers):
        """Add 'paths' subcommand."""
        parser = subparsers.add_parser(
            "paths",
            help="Show the directory layout",
            description="Show where every Volta artifact lives",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json", "yaml"],
            default="text",
            help="Output format (default: text)",
        )

    def _add_env_command(self, subparsers):
        """Add 'env' subcommand."""
        subparsers.add_parser(
            "env",
            help="Show directories to prepend to PATH",
            description="Print the directories that must precede PATH so shims take priority",
        )

    def _add_which_shim_command(self, subparsers):
        """Add 'which-shim' subcommand."""
        subparsers.add_parser(
            "which-shim",
            help="Show the shim executable",
            description="Print the shim executable that per-command shims point to",
        )

    def _add_setup_command(self, subparsers):
        """Add 'setup' subcommand."""
        subparsers.add_parser(
            "setup",
            help="Create the directory structure and built-in shims",
            description="Create the Volta directory structure and the node/npm/npx/yarn shims",
        )

    def _add_shim_command(self, subparsers):
        """Add 'shim' subcommand with sub-subcommands."""
        parser = subparsers.add_parser(
            "shim",
            help="Manage per-command shims",
            description="Create, delete or list per-command shims",
        )

        shim_subparsers = parser.add_subparsers(
            dest="shim_command", help="Shim management commands", metavar="COMMAND"
        )

        create_parser = shim_subparsers.add_parser("create", help="Create a shim")
        create_parser.add_argument("name", help="Command name")

        delete_parser = shim_subparsers.add_parser("delete", help="Delete a shim")
        delete_parser.add_argument("name", help="Command name")

        shim_subparsers.add_parser("list", help="List shims")

    def _add_pin_command(self, subparsers):
        """Add 'pin' subcommand."""
        subparsers.add_parser(
            "pin",
            help="Show pinned versions",
            description="Show the pinned platform and pinned packages",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return int(ExitCode.INVALID_ARGUMENTS)

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(str(e))
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return int(exit_code_for(e))

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "paths": "voltakit.cli.commands.paths",
            "env": "voltakit.cli.commands.env",
            "which-shim": "voltakit.cli.commands.which_shim",
            "setup": "voltakit.cli.commands.setup",
            "shim": "voltakit.cli.commands.shim",
            "pin": "voltakit.cli.commands.pin",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return int(ExitCode.INVALID_ARGUMENTS)

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
