"""Value types shared by the planner components."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Package:
    """Handle for a package known to the package graph.

    Two handles denote the same package when their names match; everything
    else about a package is answered by the graph accessor.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Bottle:
    """Size metadata of a prebuilt artifact, in bytes."""

    download_size: Optional[int] = None
    installed_size: Optional[int] = None


@dataclass(frozen=True, slots=True)
class SizeSummary:
    download: int = 0
    installed: int = 0
    net: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"download": self.download, "installed": self.installed, "net": self.net}


@dataclass(slots=True)
class InstallOptions:
    """Switches forwarded untouched to the installer.

    Only :meth:`build_flags` is interpreted by the planner itself.
    """

    head: bool = False
    fetch_head: bool = False
    build_bottle: bool = False
    build_from_source: bool = False
    force_bottle: bool = False
    bottle_arch: Optional[str] = None
    ignore_dependencies: bool = False
    only_dependencies: bool = False
    include_test: bool = False
    force: bool = False
    overwrite: bool = False
    skip_link: bool = False
    skip_post_install: bool = False
    keep_tmp: bool = False
    debug_symbols: bool = False
    interactive: bool = False
    git: bool = False
    cc: Optional[str] = None
    dry_run: bool = False
    ask: bool = False
    debug: bool = False
    verbose: bool = False
    quiet: bool = False

    def build_flags(self) -> List[str]:
        """Return the requested flags that need a source-build toolchain."""

        flags: List[str] = []
        if self.head:
            flags.append("--HEAD")
        if self.build_bottle:
            flags.append("--build-bottle")
        if self.build_from_source:
            flags.append("--build-from-source")
        return flags


@dataclass(frozen=True)
class InstallPlan:
    requested: Tuple[Package, ...]
    packages: Tuple[Package, ...]
    options: InstallOptions = field(default_factory=InstallOptions)

    @property
    def nothing_to_do(self) -> bool:
        return bool(self.requested) and not self.packages

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requested": [pkg.name for pkg in self.requested],
            "packages": [pkg.name for pkg in self.packages],
            "options": dataclasses.asdict(self.options),
        }


__all__ = [
    "Bottle",
    "InstallOptions",
    "InstallPlan",
    "Package",
    "SizeSummary",
]
