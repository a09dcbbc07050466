"""
Entry point for running liquibase-setup as a module.

Usage: python -m liquibase_setup [command] [options]
"""

from liquibase_setup.cli.parser import main

if __name__ == "__main__":
    main()
