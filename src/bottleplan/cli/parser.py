"""Argument parser construction for the CLI."""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bottleplan")
    parser.add_argument("--config", dest="config_path", metavar="PATH", help="Read settings from PATH")
    parser.add_argument("--catalog", dest="catalog_path", metavar="PATH", help="Package catalog to plan against")

    sub = parser.add_subparsers(dest="command")

    install = sub.add_parser("install", help="Plan the installation of one or more formulae")
    install.add_argument("packages", nargs="+", metavar="FORMULA")
    install.add_argument("-d", "--debug", action="store_true", help="Show debugging output")
    install.add_argument("-v", "--verbose", action="store_true", help="Print informational messages")
    install.add_argument("-q", "--quiet", action="store_true", help="Suppress progress output")
    install.add_argument("-f", "--force", action="store_true", help="Act even on up-to-date formulae")
    install.add_argument("-n", "--dry-run", action="store_true", help="Show what would be installed")
    install.add_argument("--ask", action="store_true", help="Show sizes and ask before installing")
    install.add_argument("--plan-out", metavar="PATH", help="Write the validated plan to PATH")

    deps = install.add_mutually_exclusive_group()
    deps.add_argument(
        "--ignore-dependencies",
        action="store_true",
        help="Unsupported: skip installing any dependencies",
    )
    deps.add_argument(
        "--only-dependencies",
        action="store_true",
        help="Install the dependencies but not the formula itself",
    )

    build = install.add_mutually_exclusive_group()
    build.add_argument("-s", "--build-from-source", action="store_true", help="Compile even if a bottle exists")
    build.add_argument("--build-bottle", action="store_true", help="Prepare the formula for bottling")
    build.add_argument("--force-bottle", action="store_true", help="Install from a bottle even if unsuitable")

    install.add_argument("--HEAD", dest="head", action="store_true", help="Install the HEAD version")
    install.add_argument("--fetch-HEAD", dest="fetch_head", action="store_true", help="Check upstream HEAD for updates")
    install.add_argument("--bottle-arch", metavar="ARCH", help="Optimise bottles for ARCH (needs --build-bottle)")
    install.add_argument("--debug-symbols", action="store_true", help="Keep debug symbols (needs --build-from-source)")
    install.add_argument("--cc", metavar="COMPILER", help="Compile with COMPILER")
    install.add_argument("--include-test", action="store_true", help="Install test dependencies")
    install.add_argument("--keep-tmp", action="store_true", help="Retain temporary build files")
    install.add_argument("--skip-post-install", action="store_true", help="Skip post-install steps")
    install.add_argument("--skip-link", action="store_true", help="Do not link the keg into the prefix")
    install.add_argument("--overwrite", action="store_true", help="Overwrite files while linking")
    install.add_argument("-i", "--interactive", action="store_true", help="Open a shell in the build directory")
    install.add_argument("-g", "--git", action="store_true", help="Create a git repository of the sources")

    return parser


def check_dependent_flags(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if getattr(args, "debug_symbols", False) and not args.build_from_source:
        parser.error("--debug-symbols requires --build-from-source")
    if getattr(args, "bottle_arch", None) and not args.build_bottle:
        parser.error("--bottle-arch requires --build-bottle")


__all__ = ["build_parser", "check_dependent_flags"]
