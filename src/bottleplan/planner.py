"""Helpers for constructing and sizing installation plans."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .closure import PruneContext, SizedSet, augment_with_installed_dependents, expand
from .config import PlannerConfig
from .confirm import confirm as confirm_install
from .interfaces import InstallDecision, LineSource, PackageGraph, PackageResolver
from .models import InstallOptions, InstallPlan, SizeSummary
from .sizing import total_sizes
from .toolchain import build_toolchain_installed
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Estimate:
    packages: SizedSet
    summary: SizeSummary


class InstallPlanner:
    """Resolve, validate, and size an install request.

    The planner only reads from its collaborators.  Installation itself is
    left to the caller, which receives the validated plan unexpanded.
    """

    def __init__(
        self,
        resolver: PackageResolver,
        graph: PackageGraph,
        decision: InstallDecision,
        config: Optional[PlannerConfig] = None,
        *,
        has_build_toolchain: Optional[bool] = None,
    ) -> None:
        self._resolver = resolver
        self._graph = graph
        self._decision = decision
        self.config = config or PlannerConfig()
        self._has_build_toolchain = has_build_toolchain

    @property
    def has_build_toolchain(self) -> bool:
        if self._has_build_toolchain is None:
            self._has_build_toolchain = build_toolchain_installed()
        return self._has_build_toolchain

    def plan(self, names: Sequence[str], options: Optional[InstallOptions] = None) -> InstallPlan:
        options = options or InstallOptions()
        requested = self._resolver.resolve(names)
        return validate(
            requested,
            options,
            graph=self._graph,
            decision=self._decision,
            has_build_toolchain=self.has_build_toolchain,
            config=self.config,
        )

    def estimate(self, plan: InstallPlan, *, progress: Optional[bool] = None) -> Estimate:
        check_dependencies = not plan.options.ignore_dependencies
        context = PruneContext(
            self._graph,
            check_dependencies=check_dependencies,
            allow_upgrade_candidates=self.config.size_outdated_dependencies,
        )
        sized = expand(plan.packages, context)
        augment_with_installed_dependents(
            sized,
            self._graph,
            enabled=not self.config.no_installed_dependents_check,
            check_dependencies=check_dependencies,
        )
        if progress is None:
            progress = self.config.show_progress and not plan.options.quiet
        summary = total_sizes(sized, self._graph, progress=progress)
        logger.debug("estimate for %s: %s", sized.names(), summary.as_dict())
        return Estimate(packages=sized, summary=summary)

    def confirm(
        self,
        estimate: Estimate,
        reader: Optional[LineSource] = None,
        out: Optional[TextIO] = None,
    ) -> bool:
        return confirm_install(
            estimate.summary,
            estimate.packages,
            reader,
            out,
            max_attempts=self.config.confirm_max_attempts,
        )


__all__ = ["Estimate", "InstallPlanner"]
