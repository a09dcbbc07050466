"""
Command-line interface for liquibase-setup.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
