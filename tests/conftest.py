"""Pytest configuration shared by the relation-graph test suite.

- Clears RELGRAPH_* variables so defaults are deterministic.
- Turns off tqdm progress bars.
- Removes root logging handlers installed by setup_logging().
- Provides small graph fixtures used across modules.
"""

from __future__ import annotations

import logging
import os

import pytest

from relgraph.graph.store import GraphStore


@pytest.fixture(autouse=True)
def _isolate_relgraph_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("RELGRAPH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("RELGRAPH_PROGRESS", "off")


@pytest.fixture
def chain_store() -> GraphStore:
    """A -> B -> C -> D"""
    return GraphStore.from_edges([("A", "B"), ("B", "C"), ("C", "D")])


def _bidirectional_path(size: int) -> GraphStore:
    edges = []
    for i in range(size - 1):
        edges.append((f"n{i}", f"n{i + 1}"))
        edges.append((f"n{i + 1}", f"n{i}"))
    return GraphStore.from_edges(edges)


@pytest.fixture
def bidirectional_path():
    return _bidirectional_path


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop the stdout and file handlers installed by setup_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
