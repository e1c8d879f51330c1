"""
Entry point for running voltakit CLI as a module.

Usage: python -m voltakit [command] [options]
"""

from voltakit.cli.parser import main

if __name__ == "__main__":
    main()
