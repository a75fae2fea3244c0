"""Closure of packages whose sizes belong in a pre-install estimate.

Starting from the packages about to be installed, :func:`expand` walks the
dependency graph and keeps every dependency that would be upgraded alongside
them.  :func:`augment_with_installed_dependents` then adds installed packages
that would be upgraded because one of their dependencies changes.  Both only
decide *what to size*; neither affects what gets installed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

from .interfaces import PackageGraph
from .models import Package

logger = logging.getLogger(__name__)


class SizedSet:
    """Insertion-ordered set of packages keyed by package name."""

    def __init__(self, packages: Iterable[Package] = ()) -> None:
        self._items: Dict[str, Package] = {}
        for package in packages:
            self.add(package)

    def add(self, package: Package) -> bool:
        if package.name in self._items:
            return False
        self._items[package.name] = package
        return True

    def __contains__(self, package: object) -> bool:
        name = getattr(package, "name", None)
        return name in self._items

    def __iter__(self) -> Iterator[Package]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def names(self) -> List[str]:
        return list(self._items)

    def __repr__(self) -> str:
        return f"SizedSet({', '.join(self._items)})"


@dataclass(frozen=True)
class PruneContext:
    graph: PackageGraph
    check_dependencies: bool = True
    allow_upgrade_candidates: bool = True


def should_exclude(package: Package, context: PruneContext) -> bool:
    """Return ``True`` when *package* must not be sized or descended into.

    Leaves are skipped, as are dependencies that are not upgrade candidates
    and dependencies without a bottle to take sizes from.
    """

    graph = context.graph
    if not graph.direct_dependencies(package):
        return True
    if not context.allow_upgrade_candidates or not graph.is_outdated(package):
        return True
    return not graph.has_bottle(package)


def _pending(parent: Package, graph: PackageGraph) -> List[Tuple[Package, Package]]:
    # reversed so the first listed dependency is popped first
    return [(parent, dep) for dep in reversed(list(graph.direct_dependencies(parent)))]


def expand(seeds: Iterable[Package], context: PruneContext) -> SizedSet:
    """Return *seeds* plus every dependency that survives :func:`should_exclude`."""

    sized = SizedSet()
    visited: set[str] = set()
    graph = context.graph

    for package in seeds:
        sized.add(package)
        if not context.check_dependencies:
            continue

        stack = _pending(package, graph)
        while stack:
            parent, dep = stack.pop()
            if dep.name == parent.name or dep.name in visited:
                continue
            visited.add(dep.name)
            if should_exclude(dep, context):
                logger.debug("pruned %s (dependency of %s)", dep, parent)
                continue
            sized.add(dep)
            stack.extend(_pending(dep, graph))

    return sized


def augment_with_installed_dependents(
    sized: SizedSet,
    graph: PackageGraph,
    *,
    enabled: bool = True,
    check_dependencies: bool = True,
) -> SizedSet:
    """Add outdated installed packages that depend directly on a member of *sized*.

    Membership is tested against the set as it was passed in, so a package
    added here never pulls in its own dependents during the same call.
    """

    if not (enabled and check_dependencies):
        return sized

    dependents = [
        installed
        for installed in graph.installed_packages()
        if graph.is_outdated(installed)
        and any(dep in sized for dep in graph.direct_dependencies(installed))
    ]
    for installed in dependents:
        if sized.add(installed):
            logger.debug("sizing outdated dependent %s", installed)
    return sized


__all__ = [
    "PruneContext",
    "SizedSet",
    "augment_with_installed_dependents",
    "expand",
    "should_exclude",
]
