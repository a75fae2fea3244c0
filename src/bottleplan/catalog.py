"""JSON-backed package graph used by the command line interface.

A catalog file lists every known package with its dependencies, outdated
state, bottle sizes, and installed kegs::

    {"packages": [
      {"name": "wget", "version": "1.24", "deps": ["openssl"], "outdated": true,
       "bottle": {"download_size": 1500000, "installed_size": 4200000,
                  "manifest": "https://example.com/bottles/wget.json"},
       "kegs": [{"version": "1.23", "path": "/opt/cellar/wget/1.23",
                 "disk_usage": 4100000}]}
    ]}

A bottle ``manifest`` is optional.  When present it is fetched once, the
first time the bottle's sizes are requested, and its ``download_size`` and
``installed_size`` take precedence over the values recorded in the catalog.
"""

from __future__ import annotations

import difflib
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .config import PlannerConfig
from .errors import BottleFetchError, CatalogError, PackageUnavailableError
from .fs import read_json, tree_size, urlread
from .models import Bottle, InstallOptions, Package

logger = logging.getLogger(__name__)

HEAD_PREFIX = "HEAD"


def _optional_int(value: object, what: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise CatalogError(f"{what}: expected a size in bytes, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise CatalogError(f"{what}: expected a size in bytes, got {value!r}")
    try:
        size = int(value)
    except ValueError as exc:
        raise CatalogError(f"{what}: expected a size in bytes, got {value!r}") from exc
    if size < 0:
        raise CatalogError(f"{what}: size must not be negative, got {value!r}")
    return size


@dataclass
class CatalogKeg:
    version: str
    path: Optional[Path] = None
    recorded_size: int = 0

    @property
    def head(self) -> bool:
        return self.version.startswith(HEAD_PREFIX)

    def disk_usage(self) -> int:
        if self.path is not None and self.path.is_dir():
            return tree_size(self.path)
        return self.recorded_size


@dataclass
class CatalogBottle:
    package: str
    download_size: Optional[int] = None
    installed_size: Optional[int] = None
    manifest: Optional[str] = None
    progress: bool = False
    _fetched: bool = field(default=False, repr=False)

    def fetch(self) -> Bottle:
        """Return the bottle's sizes, reading its manifest on the first call."""

        if self.manifest and not self._fetched:
            try:
                data = json.loads(urlread(self.manifest, progress=self.progress))
            except (OSError, ValueError) as exc:
                raise BottleFetchError(self.package, exc) from exc
            if not isinstance(data, dict):
                raise BottleFetchError(self.package, "manifest is not a JSON object")
            try:
                if "download_size" in data:
                    self.download_size = _optional_int(data["download_size"], self.package)
                if "installed_size" in data:
                    self.installed_size = _optional_int(data["installed_size"], self.package)
            except CatalogError as exc:
                raise BottleFetchError(self.package, exc) from exc
            self._fetched = True
            logger.debug("fetched bottle manifest for %s from %s", self.package, self.manifest)
        return Bottle(download_size=self.download_size, installed_size=self.installed_size)


@dataclass
class CatalogEntry:
    package: Package
    version: str = ""
    deps: List[str] = field(default_factory=list)
    outdated: bool = False
    bottle: Optional[CatalogBottle] = None
    kegs: List[CatalogKeg] = field(default_factory=list)


def _parse_entry(raw: Any) -> CatalogEntry:
    if not isinstance(raw, Mapping):
        raise CatalogError(f"package entries must be objects, got {raw!r}")
    name = str(raw.get("name") or "").strip()
    if not name:
        raise CatalogError("package entry without a name")

    deps = raw.get("deps") or []
    if not isinstance(deps, list):
        raise CatalogError(f"{name}: deps must be a list")

    outdated = raw.get("outdated", False)
    if not isinstance(outdated, bool):
        raise CatalogError(f"{name}: outdated must be true or false")

    bottle = None
    raw_bottle = raw.get("bottle")
    if raw_bottle is not None:
        if not isinstance(raw_bottle, Mapping):
            raise CatalogError(f"{name}: bottle must be an object")
        bottle = CatalogBottle(
            package=name,
            download_size=_optional_int(raw_bottle.get("download_size"), name),
            installed_size=_optional_int(raw_bottle.get("installed_size"), name),
            manifest=raw_bottle.get("manifest") or None,
        )

    kegs = []
    for raw_keg in raw.get("kegs") or []:
        if not isinstance(raw_keg, Mapping):
            raise CatalogError(f"{name}: kegs must be objects")
        path = raw_keg.get("path")
        kegs.append(
            CatalogKeg(
                version=str(raw_keg.get("version") or ""),
                path=Path(path) if path else None,
                recorded_size=_optional_int(raw_keg.get("disk_usage"), name) or 0,
            )
        )

    return CatalogEntry(
        package=Package(name),
        version=str(raw.get("version") or ""),
        deps=[str(dep) for dep in deps],
        outdated=outdated,
        bottle=bottle,
        kegs=kegs,
    )


class Catalog:
    """Package graph, resolver, and installed-package index over one document."""

    def __init__(self, entries: Sequence[CatalogEntry], *, progress: bool = False) -> None:
        self._entries: Dict[str, CatalogEntry] = {}
        for entry in entries:
            if entry.package.name in self._entries:
                raise CatalogError(f"duplicate package {entry.package.name!r}")
            self._entries[entry.package.name] = entry
            if entry.bottle is not None:
                entry.bottle.progress = progress

        for entry in self._entries.values():
            missing = [dep for dep in entry.deps if dep not in self._entries]
            if missing:
                raise CatalogError(
                    f"{entry.package.name}: unknown dependencies: {', '.join(missing)}"
                )

    @classmethod
    def from_dict(cls, data: Any, *, progress: bool = False) -> "Catalog":
        if not isinstance(data, Mapping) or not isinstance(data.get("packages", []), list):
            raise CatalogError("catalog must be an object with a 'packages' list")
        return cls([_parse_entry(raw) for raw in data.get("packages", [])], progress=progress)

    @classmethod
    def load(cls, path: Path, *, progress: bool = False) -> "Catalog":
        try:
            data = read_json(Path(path))
        except FileNotFoundError as exc:
            raise CatalogError(f"catalog not found: {path}") from exc
        except (OSError, ValueError) as exc:
            raise CatalogError(f"failed to read catalog {path}: {exc}") from exc
        return cls.from_dict(data, progress=progress)

    def entry(self, package: Package) -> CatalogEntry:
        try:
            return self._entries[package.name]
        except KeyError:
            raise PackageUnavailableError(package.name) from None

    # -- resolver -----------------------------------------------------------
    def resolve(self, names: Sequence[str]) -> List[Package]:
        packages: List[Package] = []
        for name in names:
            entry = self._entries.get(name.strip())
            if entry is None:
                raise PackageUnavailableError(name)
            packages.append(entry.package)
        return packages

    def search_names(self, name: str, *, limit: int = 5) -> List[str]:
        candidates = sorted(self._entries)
        matches = [candidate for candidate in candidates if name in candidate]
        for close in difflib.get_close_matches(name, candidates, n=limit, cutoff=0.6):
            if close not in matches:
                matches.append(close)
        return matches[:limit]

    # -- package graph ------------------------------------------------------
    def direct_dependencies(self, package: Package) -> List[Package]:
        return [self._entries[dep].package for dep in self.entry(package).deps]

    def is_outdated(self, package: Package) -> bool:
        return self.entry(package).outdated

    def has_bottle(self, package: Package) -> bool:
        return self.entry(package).bottle is not None

    def bottle_metadata(self, package: Package) -> Optional[Bottle]:
        bottle = self.entry(package).bottle
        if bottle is None:
            return None
        return bottle.fetch()

    def installed_kegs(self, package: Package) -> List[CatalogKeg]:
        return list(self.entry(package).kegs)

    def installed_packages(self) -> List[Package]:
        return [entry.package for entry in self._entries.values() if entry.kegs]


class CatalogInstallDecision:
    """Decide whether a requested package needs an install or upgrade."""

    def __init__(self, catalog: Catalog, config: Optional[PlannerConfig] = None) -> None:
        self._catalog = catalog
        self._config = config or PlannerConfig()

    def should_act(self, package: Package, options: InstallOptions) -> bool:
        if options.force or options.only_dependencies:
            return True

        entry = self._catalog.entry(package)
        if not entry.kegs:
            return True
        if options.head and not any(keg.head for keg in entry.kegs):
            return True

        installed = ", ".join(keg.version for keg in entry.kegs)
        if entry.outdated:
            if not self._config.no_install_upgrade:
                return True
            logger.warning(
                "%s %s is installed but outdated; upgrading on install is disabled",
                package,
                installed,
            )
            return False

        logger.warning(
            "%s %s is already installed and up-to-date. To reinstall it, pass --force.",
            package,
            installed,
        )
        return False


__all__ = [
    "Catalog",
    "CatalogBottle",
    "CatalogEntry",
    "CatalogInstallDecision",
    "CatalogKeg",
]
