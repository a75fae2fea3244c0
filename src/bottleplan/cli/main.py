"""CLI entry point for :mod:`bottleplan`."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable

from ..config import load_config
from .commands.install import InstallCommand, InstallRequest, options_from_args
from .context import CLIContext
from .parser import build_parser, check_dependent_flags


def _configure_logging(debug: bool, verbose: bool) -> None:
    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: Iterable[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    parser = build_parser()
    args = parser.parse_args(argv)

    command = args.command
    if command == "install":
        check_dependent_flags(parser, args)
        _configure_logging(args.debug, args.verbose)
        config = load_config(Path(args.config_path) if args.config_path else None)
        context = CLIContext(parser.prog, argv, config)
        request = InstallRequest(
            packages=list(args.packages),
            options=options_from_args(args),
            catalog_path=Path(args.catalog_path) if args.catalog_path else None,
            plan_out=Path(args.plan_out) if args.plan_out else None,
        )
        return InstallCommand(context).execute(request)

    parser.print_help()
    return 0


__all__ = ["main"]
