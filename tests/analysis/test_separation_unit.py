#!/usr/bin/env python3

from __future__ import annotations

import pytest

from relgraph.analysis.separation import degrees_of_separation
from relgraph.errors import UnknownEntityError, UnreachableError
from relgraph.graph.store import GraphStore


def test_chain_forward(chain_store):
    assert degrees_of_separation(chain_store, "A", "D") == 3
    assert degrees_of_separation(chain_store, "B", "C") == 1


def test_chain_reverse_is_unreachable(chain_store):
    with pytest.raises(UnreachableError) as excinfo:
        degrees_of_separation(chain_store, "D", "A")
    assert excinfo.value.source == "D"
    assert excinfo.value.target == "A"
    assert "'D'" in str(excinfo.value) and "'A'" in str(excinfo.value)


@pytest.mark.parametrize("name", ["A", "B", "C", "D"])
def test_self_is_zero(chain_store, name):
    assert degrees_of_separation(chain_store, name, name) == 0


def test_shortcut_wins():
    store = GraphStore.from_edges([("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")])
    assert degrees_of_separation(store, "A", "D") == 1


def test_cycle_without_target_terminates():
    store = GraphStore.from_edges([("A", "B"), ("B", "C"), ("C", "A"), ("D", "A")])
    with pytest.raises(UnreachableError):
        degrees_of_separation(store, "A", "D")


def test_bidirectional_path_is_symmetric(bidirectional_path):
    store = bidirectional_path(6)
    assert degrees_of_separation(store, "n0", "n5") == 5
    assert degrees_of_separation(store, "n5", "n0") == 5


@pytest.mark.parametrize(
    "source,target,missing",
    [
        ("Z", "A", "Z"),
        ("A", "Z", "Z"),
        ("Y", "Z", "Y"),
        ("Z", "Z", "Z"),
    ],
)
def test_unknown_entity(chain_store, source, target, missing):
    with pytest.raises(UnknownEntityError) as excinfo:
        degrees_of_separation(chain_store, source, target)
    assert excinfo.value.name == missing


def test_unknown_is_not_unreachable(chain_store):
    with pytest.raises(UnknownEntityError):
        try:
            degrees_of_separation(chain_store, "A", "nobody")
        except UnreachableError:  # pragma: no cover
            pytest.fail("unknown entity reported as unreachable")
