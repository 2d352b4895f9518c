from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from pathlib import Path

from .directory import resolve_directory
from .errors import ConfigError, ReadConfigFileError
from .files import CONFIG_ENCODING, read_specific_file

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m confstrap",
        description="Inspect bootstrapped configuration directories and files.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    subparsers = parser.add_subparsers(
        dest="command", metavar="<command>", required=True
    )

    dir_cmd = subparsers.add_parser(
        "dir",
        help="Resolve (and create if missing) the config directory for an app.",
    )
    dir_cmd.add_argument("name", help="Logical application name, e.g. 'myapp'.")
    dir_cmd.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Use this directory instead of the platform config root.",
    )

    cat_cmd = subparsers.add_parser("cat", help="Print a file's text.")
    cat_cmd.add_argument("path", type=Path)

    check_cmd = subparsers.add_parser("check", help="Check that a file is valid TOML.")
    check_cmd.add_argument("path", type=Path)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=args.log_level)

    if args.command == "dir":
        try:
            directory = resolve_directory(args.name, root=args.root)
        except (ConfigError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(directory)
        return 0

    if args.command == "cat":
        try:
            text = read_specific_file(args.path)
        except ReadConfigFileError as exc:
            print(f"error: {args.path}: {exc}", file=sys.stderr)
            return 1
        sys.stdout.write(text)
        return 0

    if args.command == "check":
        try:
            tomllib.loads(read_specific_file(args.path, encoding=CONFIG_ENCODING))
        except ReadConfigFileError as exc:
            print(f"error: {args.path}: {exc}", file=sys.stderr)
            return 1
        except tomllib.TOMLDecodeError as exc:
            print(f"{args.path}: {exc}", file=sys.stderr)
            return 1
        print("ok")
        return 0

    parser.print_help()
    return 2


__all__ = ["main", "build_parser"]
