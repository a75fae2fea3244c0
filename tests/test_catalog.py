import json

import pytest
from catalog_helpers import bottle, make_catalog, pkg

from bottleplan.catalog import Catalog, CatalogKeg
from bottleplan.errors import CatalogError, PackageUnavailableError
from bottleplan.models import Bottle, Package


def test_load_reads_catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "packages": [
                    pkg("wget", ["openssl"], outdated=True, bottle=bottle(100, 400), kegs=[350]),
                    pkg("openssl"),
                ]
            }
        )
    )

    catalog = Catalog.load(path)
    wget = Package("wget")

    assert catalog.resolve(["wget"]) == [wget]
    assert catalog.direct_dependencies(wget) == [Package("openssl")]
    assert catalog.is_outdated(wget)
    assert catalog.has_bottle(wget)
    assert not catalog.has_bottle(Package("openssl"))
    assert catalog.bottle_metadata(wget) == Bottle(download_size=100, installed_size=400)
    assert catalog.bottle_metadata(Package("openssl")) is None
    assert [keg.disk_usage() for keg in catalog.installed_kegs(wget)] == [350]
    assert catalog.installed_packages() == [wget]


@pytest.mark.parametrize(
    "data, message",
    [
        ({"packages": [pkg("a", ["ghost"])]}, "unknown dependencies: ghost"),
        ({"packages": [pkg("a"), pkg("a")]}, "duplicate package"),
        ({"packages": [{"deps": []}]}, "without a name"),
        ({"packages": "nope"}, "'packages' list"),
        ({"packages": [pkg("a", bottle={"download_size": "big"})]}, "expected a size"),
        ({"packages": [pkg("a", bottle=bottle(-500, -100))]}, "must not be negative"),
        ({"packages": [pkg("a", kegs=[-1])]}, "must not be negative"),
        ({"packages": [pkg("a", bottle=bottle(1.9, 4))]}, "expected a size"),
        ({"packages": [{"name": "a", "outdated": "false"}]}, "outdated must be true or false"),
    ],
)
def test_inconsistent_catalogs_are_rejected(data, message):
    with pytest.raises(CatalogError) as excinfo:
        Catalog.from_dict(data)
    assert message in str(excinfo.value)


def test_missing_or_malformed_file_raises_catalog_error(tmp_path):
    with pytest.raises(CatalogError, match="catalog not found"):
        Catalog.load(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(CatalogError, match="failed to read catalog"):
        Catalog.load(broken)


def test_unknown_names_raise_package_unavailable():
    catalog = make_catalog(pkg("wget"))

    with pytest.raises(PackageUnavailableError) as excinfo:
        catalog.resolve(["wget", "wegt"])

    assert excinfo.value.name == "wegt"
    assert 'No available formula with the name "wegt"' in str(excinfo.value)


def test_search_names_offers_substring_and_close_matches():
    catalog = make_catalog(pkg("wget"), pkg("wget2"), pkg("curl"), pkg("openssl@3"))

    assert catalog.search_names("wget") == ["wget", "wget2"]
    assert catalog.search_names("wegt") == ["wget", "wget2"]
    assert catalog.search_names("openssl") == ["openssl@3"]
    assert catalog.search_names("zzz") == []


def test_keg_disk_usage_walks_the_keg_directory(tmp_path):
    keg_dir = tmp_path / "cellar" / "wget" / "1.23"
    (keg_dir / "bin").mkdir(parents=True)
    (keg_dir / "bin" / "wget").write_bytes(b"x" * 300)
    (keg_dir / "README").write_bytes(b"y" * 45)
    (keg_dir / "bin" / "link").symlink_to(keg_dir / "README")

    keg = CatalogKeg(version="1.23", path=keg_dir, recorded_size=1)

    assert keg.disk_usage() == 345


def test_keg_without_directory_uses_recorded_size(tmp_path):
    keg = CatalogKeg(version="HEAD-abc", path=tmp_path / "gone", recorded_size=77)

    assert keg.disk_usage() == 77
    assert keg.head
