"""Standalone "open PowerShell here" CLI."""

import argparse
import logging
import os
import sys

from pydantic import ValidationError

from pshere import __version__
from pshere.config import load_config
from pshere.errors import PshereError
from pshere.launcher import candidate_shell_paths, launch_shell_in
from pshere.selection import FileSystemSelectionProvider, resolve_folder

log = logging.getLogger("pshere")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pshere",
        description="Open a PowerShell window in the folder of a file or directory",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the folder and shell candidates instead of launching",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="File or folder to open a shell in (default: current directory)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.debug or config.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    provider = FileSystemSelectionProvider(args.paths, solution_path=os.getcwd())
    candidates = candidate_shell_paths(config)
    log.debug("candidates=%s", candidates)

    try:
        folder = resolve_folder(provider)
        if args.dry_run:
            print(folder)
            for candidate in candidates:
                print(f"  {candidate}")
            return 0
        launch_shell_in(folder, candidates)
    except PshereError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
