import hypothesis.strategies as st
from hypothesis import given, settings
from catalog_helpers import make_catalog, pkg

from bottleplan.closure import PruneContext, expand
from bottleplan.sizing import total_sizes

sizes = st.one_of(st.none(), st.integers(min_value=0, max_value=10**12))


def entry_strategy(index):
    def build(download, installed, has_bottle, kegs, outdated):
        bottle = {"download_size": download, "installed_size": installed} if has_bottle else None
        return pkg(f"p{index}", outdated=outdated, bottle=bottle, kegs=kegs)

    return st.builds(
        build,
        sizes,
        sizes,
        st.booleans(),
        st.lists(st.integers(min_value=0, max_value=10**12), max_size=3),
        st.booleans(),
    )


def catalog_strategy():
    def build(n):
        return st.tuples(*[entry_strategy(i) for i in range(n)])

    return st.integers(min_value=1, max_value=8).flatmap(build)


@given(catalog_strategy(), st.randoms(use_true_random=False))
@settings(max_examples=75)
def test_totals_do_not_depend_on_traversal_order(entries, rng):
    catalog = make_catalog(*entries)
    packages = catalog.resolve([entry["name"] for entry in entries])
    shuffled = list(packages)
    rng.shuffle(shuffled)

    first = total_sizes(packages, catalog)

    assert total_sizes(shuffled, catalog) == first
    assert total_sizes(packages, catalog) == first


@given(catalog_strategy())
@settings(max_examples=50)
def test_net_is_never_clamped(entries):
    catalog = make_catalog(*entries)
    packages = catalog.resolve([entry["name"] for entry in entries])

    expected_net = 0
    for entry in entries:
        bottle = entry.get("bottle")
        if bottle and bottle["installed_size"] is not None and entry["kegs"]:
            expected_net += bottle["installed_size"] - sum(k["disk_usage"] for k in entry["kegs"])

    assert total_sizes(packages, catalog).net == expected_net


def graph_strategy():
    def build(n):
        deps = st.lists(st.integers(min_value=0, max_value=n - 1), max_size=3)
        node = st.tuples(deps, st.booleans(), st.booleans())
        return st.lists(node, min_size=n, max_size=n)

    return st.integers(min_value=1, max_value=8).flatmap(build)


def _graph_catalog(nodes):
    entries = []
    for i, (deps, outdated, bottled) in enumerate(nodes):
        bottle = {"download_size": 1, "installed_size": 1} if bottled else None
        entries.append(pkg(f"n{i}", [f"n{d}" for d in sorted(set(deps))], outdated=outdated, bottle=bottle))
    return make_catalog(*entries)


@given(graph_strategy(), st.lists(st.integers(min_value=0, max_value=7), min_size=1, max_size=6), st.booleans())
@settings(max_examples=75)
def test_no_dependency_check_returns_exactly_the_seeds(nodes, seed_indexes, allow_upgrades):
    catalog = _graph_catalog(nodes)
    names = [f"n{i % len(nodes)}" for i in seed_indexes]
    context = PruneContext(catalog, check_dependencies=False, allow_upgrade_candidates=allow_upgrades)

    sized = expand(catalog.resolve(names), context)

    assert sized.names() == list(dict.fromkeys(names))


@given(graph_strategy(), st.booleans())
@settings(max_examples=75)
def test_expansion_only_adds_outdated_bottled_non_leaves(nodes, allow_upgrades):
    catalog = _graph_catalog(nodes)
    context = PruneContext(catalog, check_dependencies=True, allow_upgrade_candidates=allow_upgrades)

    sized = expand(catalog.resolve(["n0"]), context)

    assert sized.names()[0] == "n0"
    for package in list(sized)[1:]:
        assert allow_upgrades
        assert catalog.direct_dependencies(package)
        assert catalog.is_outdated(package)
        assert catalog.has_bottle(package)
