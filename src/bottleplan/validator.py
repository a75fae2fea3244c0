from __future__ import annotations

import logging
from typing import Sequence

from .config import PlannerConfig
from .errors import BuildFlagsError
from .interfaces import InstallDecision, PackageGraph
from .models import InstallOptions, InstallPlan, Package

logger = logging.getLogger(__name__)


def check_build_flags(
    requested: Sequence[Package],
    options: InstallOptions,
    graph: PackageGraph,
    *,
    has_build_toolchain: bool,
    developer: bool = False,
) -> None:
    """Reject build flags that cannot be honoured without building tools.

    Raises :class:`BuildFlagsError` when no toolchain is installed and at
    least one requested package has no bottle to fall back on.
    """

    build_flags = options.build_flags()
    if not build_flags:
        return

    if not has_build_toolchain:
        bottled = all(graph.has_bottle(package) for package in requested)
        if not bottled:
            raise BuildFlagsError(build_flags, bottled=False)
        logger.warning(
            "%s requires building tools, but none are installed; "
            "bottles will be used instead",
            ", ".join(build_flags),
        )

    if not developer:
        logger.warning(
            "building from source is not supported! "
            "You're on your own. Failures are expected so don't create any issues, please!"
        )


def validate(
    requested: Sequence[Package],
    options: InstallOptions,
    *,
    graph: PackageGraph,
    decision: InstallDecision,
    has_build_toolchain: bool,
    config: PlannerConfig = PlannerConfig(),
) -> InstallPlan:
    """Narrow *requested* to the packages that need installing or upgrading."""

    check_build_flags(
        requested,
        options,
        graph,
        has_build_toolchain=has_build_toolchain,
        developer=config.developer,
    )

    packages = tuple(package for package in requested if decision.should_act(package, options))
    plan = InstallPlan(requested=tuple(requested), packages=packages, options=options)
    if plan.nothing_to_do:
        logger.info("nothing to install for %s", ", ".join(pkg.name for pkg in requested))
    return plan


__all__ = ["check_build_flags", "validate"]
