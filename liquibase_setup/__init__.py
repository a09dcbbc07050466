"""
liquibase-setup - install Liquibase into CI runners.

Downloads the requested Liquibase edition and version (or reuses a cached
copy), configures the Pro license, validates the installation and adds it to
the runner's PATH.
"""

__version__ = "0.1.0"
