"""
Env command implementation.

Prints the directories that must precede PATH, joined with the platform path
separator, ready to be spliced into a shell profile.
"""

import os

from voltakit.cli.utils import load_context


def run(args) -> int:
    context = load_context(args)
    print(os.pathsep.join(str(path) for path in context.layout.env_paths()))
    return 0
