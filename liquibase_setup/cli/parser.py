"""
liquibase-setup CLI argument parser.

This module implements the command-line interface using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from liquibase_setup import __version__
from liquibase_setup.core.runner import RunnerEnvironment

logger = logging.getLogger(__name__)


class CLI:
    """liquibase-setup command-line interface."""

    def __init__(self, environment: Optional[RunnerEnvironment] = None):
        """
        Initialize CLI with argument parser.

        Args:
            environment: Runner environment (default: the process environment)
        """
        self.environment = environment or RunnerEnvironment()
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="liquibase-setup",
            description="Install Liquibase into a CI runner",
            epilog='Use "liquibase-setup COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"liquibase-setup {__version__}"
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
            help="Path to configuration file (default: ./liquibase-setup.yaml)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_verify_command(subparsers)

        return parser

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install Liquibase and add it to PATH",
            description=(
                "Download (or reuse from cache) a Liquibase release, configure "
                "the Pro license from LIQUIBASE_LICENSE_KEY, and add it to PATH"
            ),
        )
        parser.add_argument(
            "--liquibase-version",
            dest="liquibase_version",
            metavar="VERSION",
            help="Exact Liquibase version to install (4.32.0 or later)",
        )
        parser.add_argument(
            "--edition",
            choices=["oss", "pro"],
            metavar="EDITION",
            help="Edition to install (oss|pro) [default: oss]",
        )
        cache_group = parser.add_mutually_exclusive_group()
        cache_group.add_argument(
            "--cache",
            dest="cache",
            action="store_true",
            default=None,
            help="Reuse and populate the tool cache (default)",
        )
        cache_group.add_argument(
            "--no-cache",
            dest="cache",
            action="store_false",
            help="Always download and do not write to the tool cache",
        )

    def _add_verify_command(self, subparsers):
        """Add 'verify' subcommand."""
        parser = subparsers.add_parser(
            "verify",
            help="Verify an existing installation",
            description="Run 'liquibase --version' from an installation directory",
        )
        parser.add_argument("path", type=Path, help="Installation directory")

    def parse_args(self, args: Optional[List[str]] = None):
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except Exception as e:
            logger.error(str(e))
            self.environment.report_error(str(e))
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """Configure logging based on verbose/quiet flags."""
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
        from liquibase_setup.cli.commands import install, verify

        command_map = {
            "install": install.run,
            "verify": verify.run,
        }

        handler = command_map.get(args.command)
        if not handler:
            logger.error(f"Unknown command: {args.command}")
            return 1

        return handler(args, self.environment)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
