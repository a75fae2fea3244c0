"""Aggregation of bottle sizes over a sized package set."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from tqdm import tqdm

from .errors import BottleFetchError
from .interfaces import PackageGraph
from .models import Bottle, Package, SizeSummary

logger = logging.getLogger(__name__)

_KB = 1024
_MB = 1024 * _KB
_GB = 1024 * _MB


def _fetch_bottle(package: Package, graph: PackageGraph) -> Optional[Bottle]:
    if not graph.has_bottle(package):
        return None
    try:
        return graph.bottle_metadata(package)
    except BottleFetchError as exc:
        logger.warning("%s; leaving it out of the size estimate", exc)
        return None


def total_sizes(
    packages: Iterable[Package],
    graph: PackageGraph,
    *,
    progress: bool = False,
) -> SizeSummary:
    """Sum download, installed, and net sizes of *packages*.

    Packages without bottle metadata contribute nothing.  The net size of a
    package is its bottle's installed size minus the disk usage of its
    currently installed kegs, and may be negative.
    """

    download = installed = net = 0
    ordered = list(packages)
    for package in tqdm(
        ordered,
        desc="Looking for bottles",
        unit="pkg",
        disable=not progress,
        leave=False,
    ):
        bottle = _fetch_bottle(package, graph)
        if bottle is None:
            continue

        download += int(bottle.download_size or 0)
        installed += int(bottle.installed_size or 0)

        kegs = graph.installed_kegs(package)
        if not kegs or bottle.installed_size is None:
            continue
        try:
            kegs_size = sum(int(keg.disk_usage()) for keg in kegs)
        except OSError as exc:
            logger.warning("%s: cannot measure installed kegs (%s); leaving it out of the net size", package, exc)
            continue
        net += int(bottle.installed_size) - kegs_size

    return SizeSummary(download=download, installed=installed, net=net)


def disk_usage_readable(size_in_bytes: int) -> str:
    """Format a byte count like ``1.5MB``, dropping a trailing ``.0``."""

    magnitude = abs(size_in_bytes)
    if magnitude >= _GB:
        size: float = size_in_bytes / _GB
        unit = "GB"
    elif magnitude >= _MB:
        size = size_in_bytes / _MB
        unit = "MB"
    elif magnitude >= _KB:
        size = size_in_bytes / _KB
        unit = "KB"
    else:
        size = size_in_bytes
        unit = "B"

    return f"{size:.1f}".removesuffix(".0") + unit


__all__ = ["disk_usage_readable", "total_sizes"]
