"""
Entry point for running the CLI as a module.

Usage: python -m liquibase_setup.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
