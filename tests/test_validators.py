# -*- coding: utf-8 -*-
from dataclasses import replace

import pytest

from ieee_cdf.network.core.validators import build_graph, swing_buses_by_component, validate_network
from ieee_cdf.network.io import parse_cdf


@pytest.fixture
def dataset(sample_text):
    return parse_cdf(sample_text).dataset


def test_sample_network_is_valid(dataset):
    validate_network(dataset, require_swing=True)


def test_graph_has_buses_and_branches(dataset):
    g = build_graph(dataset)

    assert sorted(g.nodes) == [1, 2, 3]
    assert g.number_of_edges() == 3


def test_unknown_branch_bus(dataset):
    bad = replace(dataset.branches[0], z_bus=99)
    ds = replace(dataset, branches=(bad,) + dataset.branches[1:])

    with pytest.raises(ValueError, match="99"):
        validate_network(ds)


def test_unknown_interchange_slack(dataset):
    ds = replace(dataset, interchanges=(replace(dataset.interchanges[0], slack_bus=7),))

    with pytest.raises(ValueError, match="interchange"):
        validate_network(ds)


def test_unknown_tie_line_bus(dataset):
    ds = replace(dataset, tie_lines=(replace(dataset.tie_lines[0], non_metered_bus=8),))

    with pytest.raises(ValueError, match="tie_line"):
        validate_network(ds)


def test_zero_reactance(dataset):
    ds = replace(dataset, branches=(replace(dataset.branches[0], x=0.0),) + dataset.branches[1:])

    with pytest.raises(ValueError, match="reactancia"):
        validate_network(ds)


def test_duplicate_bus_number(dataset):
    ds = replace(dataset, buses=dataset.buses + (dataset.buses[0],))

    with pytest.raises(ValueError, match="duplicado"):
        validate_network(ds)


def test_island_without_swing(dataset):
    # la barra 3 queda aislada al quitar las ramas que llegan a ella
    ds = replace(dataset, branches=dataset.branches[:1], tie_lines=())

    comps = swing_buses_by_component(ds)
    assert sorted((sorted(c), s) for c, s in comps) == [([1, 2], [1]), ([3], [])]

    validate_network(ds)
    with pytest.raises(ValueError, match="swing"):
        validate_network(ds, require_swing=True)


def test_bus_number_zero_is_rejected(dataset):
    # la barra 0 reemplaza a la 3 también en ramas y enlace, así solo falla el número
    buses = dataset.buses[:2] + (replace(dataset.buses[2], number=0),)
    branches = tuple(replace(br, z_bus=0) if br.z_bus == 3 else br for br in dataset.branches)
    tie_lines = (replace(dataset.tie_lines[0], non_metered_bus=0),)
    ds = replace(dataset, buses=buses, branches=branches, tie_lines=tie_lines)

    with pytest.raises(ValueError, match=r"no positivos: \[0\]"):
        validate_network(ds)


def test_interchange_area_zero_is_rejected(dataset):
    ds = replace(dataset, interchanges=(replace(dataset.interchanges[0], area=0),))

    with pytest.raises(ValueError, match="área 0"):
        validate_network(ds)
