"""Install planning and pre-install size estimation."""

from typing import Iterable

from .catalog import Catalog, CatalogInstallDecision
from .cli import main as _cli_main
from .closure import PruneContext, SizedSet, augment_with_installed_dependents, expand, should_exclude
from .config import PlannerConfig, load_config
from .confirm import confirm
from .errors import (
    BottleFetchError,
    BuildFlagsError,
    CatalogError,
    PackageUnavailableError,
    PlannerError,
)
from .models import Bottle, InstallOptions, InstallPlan, Package, SizeSummary
from .planner import Estimate, InstallPlanner
from .sizing import disk_usage_readable, total_sizes
from .validator import validate

__version__ = "0.1.0"

__all__ = [
    "main",
    "Bottle",
    "BottleFetchError",
    "BuildFlagsError",
    "Catalog",
    "CatalogError",
    "CatalogInstallDecision",
    "Estimate",
    "InstallOptions",
    "InstallPlan",
    "InstallPlanner",
    "Package",
    "PackageUnavailableError",
    "PlannerConfig",
    "PlannerError",
    "PruneContext",
    "SizeSummary",
    "SizedSet",
    "augment_with_installed_dependents",
    "confirm",
    "disk_usage_readable",
    "expand",
    "load_config",
    "should_exclude",
    "total_sizes",
    "validate",
]


def main(argv: Iterable[str] | None = None) -> int:
    if argv is None:
        return _cli_main()
    return _cli_main(list(argv))
