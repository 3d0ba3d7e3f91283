"""
Command-line entry point for pathshell.
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from . import __version__
from .control_flow import ExitShell
from .shell import Shell

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pathshell",
        description="Minimal interactive shell: builtins plus executables from PATH",
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="Execute a single command line and exit with its status",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=os.getenv("PATHSHELL_LOG_LEVEL", "ERROR").upper(),
        help="Diagnostic log level, written to stderr (env: PATHSHELL_LOG_LEVEL)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.ERROR),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the shell.

    Returns:
        Exit status for the shell process
    """
    args = build_cli_parser().parse_args(argv)
    configure_logging(args.log_level)

    shell = Shell()
    if args.command is not None:
        try:
            return shell.execute(args.command)
        except ExitShell as e:
            return e.exit_code

    return shell.repl()


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
