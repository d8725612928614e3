"""
Command-line entry point.

Usage:
    msgkit msg-scan
    msgkit msg-init fr de_AT pt-BR.ISO-8859-1
    msgkit --config path/to/dist.toml msg-init --pot-file po/my-app.pot ja
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from msgkit import __version__
from msgkit.dist import Dist
from msgkit.errors import MsgkitError, UsageError
from msgkit.plugins.registry import hub

logger = logging.getLogger("msgkit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msgkit",
        description="Manage gettext message catalogs of a distribution.",
    )
    parser.add_argument(
        "--config",
        "-C",
        type=Path,
        metavar="PATH",
        help="distribution config file (default: dist.toml or pyproject.toml)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="show debug output"
    )
    parser.add_argument("--version", action="version", version=__version__)

    sub = parser.add_subparsers(dest="command", metavar="command", required=True)
    for cls in hub.list_commands(load_all=True):
        cmd_parser = sub.add_parser(
            cls.command_name,
            help=cls.abstract,
            description=cls.abstract,
            usage=getattr(cls, "usage_desc", None),
        )
        cls.add_arguments(cmd_parser)
        cmd_parser.set_defaults(_parser=cmd_parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(message)s" if args.verbose else "%(message)s",
    )

    try:
        dist = Dist.from_files(args.config)
        command = hub.build_command(args.command, dist)
        command.run(args)
    except UsageError as e:
        args._parser.print_usage()
        logger.error("%s", e)
        return 2
    except MsgkitError as e:
        logger.error("%s", e)
        return 1
    return 0
