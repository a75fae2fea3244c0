"""Implementation of the ``install`` sub-command."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from ...catalog import Catalog, CatalogInstallDecision
from ...errors import BuildFlagsError, CatalogError, PackageUnavailableError
from ...interfaces import Installer
from ...models import InstallOptions
from ...output import ofail, ohai, opoo
from ...planner import InstallPlanner
from ..context import CLIContext
from ..planfile import PlanExporter

IGNORE_DEPENDENCIES_WARNING = (
    "`--ignore-dependencies` is an unsupported developer option!\n"
    "Adjust your PATH to put any preferred versions of applications earlier in the\n"
    "PATH rather than using this unsupported option!"
)


@dataclass(slots=True)
class InstallRequest:
    packages: Sequence[str]
    options: InstallOptions = field(default_factory=InstallOptions)
    catalog_path: Optional[Path] = None
    plan_out: Optional[Path] = None


def options_from_args(args: argparse.Namespace) -> InstallOptions:
    return InstallOptions(
        head=args.head,
        fetch_head=args.fetch_head,
        build_bottle=args.build_bottle,
        build_from_source=args.build_from_source,
        force_bottle=args.force_bottle,
        bottle_arch=args.bottle_arch,
        ignore_dependencies=args.ignore_dependencies,
        only_dependencies=args.only_dependencies,
        include_test=args.include_test,
        force=args.force,
        overwrite=args.overwrite,
        skip_link=args.skip_link,
        skip_post_install=args.skip_post_install,
        keep_tmp=args.keep_tmp,
        debug_symbols=args.debug_symbols,
        interactive=args.interactive,
        git=args.git,
        cc=args.cc,
        dry_run=args.dry_run,
        ask=args.ask,
        debug=args.debug,
        verbose=args.verbose,
        quiet=args.quiet,
    )


class InstallCommand:
    """Plan an installation, optionally confirm it, and hand it to the installer."""

    def __init__(self, context: CLIContext, installer: Optional[Installer] = None) -> None:
        self._context = context
        self._installer = installer

    def execute(self, request: InstallRequest) -> int:
        ctx = self._context
        options = request.options

        if options.ignore_dependencies:
            opoo(IGNORE_DEPENDENCIES_WARNING + "\n", out=ctx.stderr)

        catalog_path = request.catalog_path or ctx.config.catalog
        show_progress = ctx.config.show_progress and not options.quiet
        try:
            catalog = Catalog.load(catalog_path, progress=show_progress)
        except CatalogError as exc:
            ofail(exc, out=ctx.stderr)
            return 1

        planner = InstallPlanner(
            catalog,
            catalog,
            CatalogInstallDecision(catalog, ctx.config),
            ctx.config,
        )

        try:
            plan = planner.plan(request.packages, options)
        except PackageUnavailableError as exc:
            self._report_unavailable(exc, catalog)
            return 1
        except BuildFlagsError as exc:
            ofail(exc, out=ctx.stderr)
            return 1

        if plan.nothing_to_do:
            return 0

        if options.ask or ctx.config.ask:
            ohai("Looking for bottles...", out=ctx.stdout)
            estimate = planner.estimate(plan)
            if not planner.confirm(estimate, ctx.stdin, ctx.stdout):
                return 0

        installer = self._installer or PlanExporter(ctx.stdout, request.plan_out)
        return int(installer.install(plan))

    def _report_unavailable(self, exc: PackageUnavailableError, catalog: Catalog) -> None:
        ctx = self._context
        name = exc.name
        if name == "updog":
            ofail("What's updog?", out=ctx.stderr)
            return

        opoo(exc, out=ctx.stderr)
        # Searching is pointless once a tap prefix is given.
        if "/" in name:
            return

        ohai("Searching for similarly named formulae...", out=ctx.stdout)
        matches = catalog.search_names(name)
        if not matches:
            ofail(f"No formulae found for {name}.", out=ctx.stderr)
            return

        ohai("Formulae", matches, out=ctx.stdout)
        ctx.stdout.write(f"\nTo install {matches[0]}, run:\n  {ctx.prog} install {matches[0]}\n")
        ctx.stdout.flush()


__all__ = ["InstallCommand", "InstallRequest", "options_from_args"]
