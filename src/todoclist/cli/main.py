# src/todoclist/cli/main.py

"""
CLI entrypoint.

Parses arguments, initializes logging, builds AppState and hands the
subcommand to the command registry. Returns the process exit code.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .. import __version__
from ..config import get_settings
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state
from .commands import CommandRegistry, registry

logger = logging.getLogger(__name__)


def _add_global_flags(parser: argparse.ArgumentParser, *, file_name: str, suppress: bool) -> None:
    # Subparsers use SUPPRESS so a flag given before the subcommand is not reset.
    parser.add_argument(
        "-i",
        "--auto-init",
        dest="auto_init",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Auto initialize the file before any command",
    )
    parser.add_argument(
        "-p",
        "--path",
        dest="path",
        metavar="PATH",
        default=argparse.SUPPRESS if suppress else None,
        help=f"Path to the directory containing {file_name}",
    )


def build_parser(
    commands: CommandRegistry = registry,
    *,
    file_name: str = "todoclist.json",
    prog: str | None = None,
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="A simple file-cli-based todolist")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_flags(parser, file_name=file_name, suppress=False)

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    for spec in commands.commands():
        sp = sub.add_parser(spec.name, aliases=list(spec.aliases), help=spec.help_text)
        for arg_name, arg_help in spec.arguments:
            sp.add_argument(arg_name, help=arg_help)
        _add_global_flags(sp, file_name=file_name, suppress=True)
    return parser


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    parser = build_parser(registry, file_name=settings.file_name)
    args = parser.parse_args(argv)
    logger.debug("Running command=%s path=%s auto_init=%s", args.command, args.path, args.auto_init)

    state = create_initial_state(
        settings=settings,
        directory=args.path,
        auto_init=args.auto_init,
        prog=parser.prog,
    )
    return registry.handle(state, args.command, args)


if __name__ == "__main__":
    raise SystemExit(main())
