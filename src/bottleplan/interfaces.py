"""Protocols for the collaborators the planner consumes.

The planner never builds packages or inspects the filesystem itself.  It asks
these services about the package graph, installed kegs, and whether a package
needs any action, which keeps the closure and sizing logic free of ambient
state.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .models import Bottle, InstallOptions, InstallPlan, Package


class Keg(Protocol):
    def disk_usage(self) -> int: ...


class PackageGraph(Protocol):
    def direct_dependencies(self, package: Package) -> Sequence[Package]: ...

    def is_outdated(self, package: Package) -> bool: ...

    def has_bottle(self, package: Package) -> bool: ...

    def bottle_metadata(self, package: Package) -> Optional[Bottle]:
        """Return bottle sizes, fetching remote metadata on first use."""
        ...

    def installed_kegs(self, package: Package) -> Sequence[Keg]: ...

    def installed_packages(self) -> Sequence[Package]: ...


class PackageResolver(Protocol):
    def resolve(self, names: Sequence[str]) -> list[Package]:
        """Map user-supplied names to packages or raise ``PackageUnavailableError``."""
        ...


class InstallDecision(Protocol):
    def should_act(self, package: Package, options: InstallOptions) -> bool: ...


class LineSource(Protocol):
    def readline(self) -> str: ...


class Installer(Protocol):
    def install(self, plan: InstallPlan) -> int: ...


__all__ = [
    "InstallDecision",
    "Installer",
    "Keg",
    "LineSource",
    "PackageGraph",
    "PackageResolver",
]
