"""Builders for small in-memory catalogs used across the test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bottleplan.catalog import Catalog  # noqa: E402


def pkg(name, deps=(), *, outdated=False, bottle=None, kegs=(), version="1.0"):
    entry = {"name": name, "version": version, "deps": list(deps), "outdated": outdated}
    if bottle is not None:
        entry["bottle"] = dict(bottle)
    entry["kegs"] = [
        keg if isinstance(keg, dict) else {"version": "0.9", "disk_usage": keg} for keg in kegs
    ]
    return entry


def bottle(download=None, installed=None, manifest=None):
    data = {"download_size": download, "installed_size": installed}
    if manifest is not None:
        data["manifest"] = manifest
    return data


def make_catalog(*entries):
    return Catalog.from_dict({"packages": list(entries)})


class FetchCounter:
    """Wrap a catalog and count ``bottle_metadata`` calls per package."""

    def __init__(self, catalog):
        self._catalog = catalog
        self.fetches = []

    def __getattr__(self, name):
        return getattr(self._catalog, name)

    def bottle_metadata(self, package):
        self.fetches.append(package.name)
        return self._catalog.bottle_metadata(package)
