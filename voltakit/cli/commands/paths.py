"""
Paths command implementation.

Prints the location of every fixed artifact in the layout.
"""

import json
import logging

import yaml

from voltakit.cli.utils import load_context

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the paths command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    context = load_context(args)
    locations = {name: str(path) for name, path in context.layout.as_dict().items()}

    if args.format == "json":
        print(json.dumps(locations, indent=2))
    elif args.format == "yaml":
        print(yaml.safe_dump(locations, sort_keys=False), end="")
    else:
        width = max(len(name) for name in locations)
        for name, path in locations.items():
            print(f"{name:<{width}}  {path}")

    return 0
