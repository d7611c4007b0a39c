#!/usr/bin/env python3
"""
Smoke tests to ensure the CLI wrapper and analysis modules import cleanly.
"""

import runpy
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
SCRIPTS = ROOT / "scripts"


@pytest.mark.unit
def test_console_entry_point_declared():
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert "relgraph-analyze" in pyproject
    assert "relgraph.analysis.cli:main" in pyproject


@pytest.mark.unit
def test_wrapper_script_loads_without_running_main():
    namespace = runpy.run_path(str(SCRIPTS / "analyze_graph.py"), run_name="smoke_test")
    assert callable(namespace["main"])


@pytest.mark.unit
def test_analysis_modules_import_as_package():
    import importlib

    for module_name in [
        "relgraph.analysis.centrality",
        "relgraph.analysis.separation",
        "relgraph.analysis.cli",
        "relgraph.graph.store",
    ]:
        assert importlib.import_module(module_name) is not None
