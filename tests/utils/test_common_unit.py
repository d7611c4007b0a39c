#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging


def test_add_common_args_defaults():
    from relgraph.utils.common import add_common_args

    parser = argparse.ArgumentParser()
    add_common_args(parser)
    args = parser.parse_args([])

    assert args.edges_file == "edges.csv"
    assert args.log_level == "INFO"
    assert hasattr(args, "log_file") and args.log_file is None


def test_setup_logging_with_file(tmp_path):
    from relgraph.utils.common import setup_logging

    log_file = tmp_path / "nested" / "run.log"
    setup_logging("debug", str(log_file))
    logging.getLogger("relgraph.test").debug("hello")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert log_file.exists()
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    for handler in root.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_setup_logging_int_level_and_default_dir(tmp_path, monkeypatch):
    from relgraph.utils.common import setup_logging

    monkeypatch.chdir(tmp_path)
    setup_logging(logging.WARNING)

    assert logging.getLogger().level == logging.WARNING
    assert (tmp_path / "logs" / "relgraph.log").exists()


def test_setup_logging_unknown_level_defaults_to_info(tmp_path):
    from relgraph.utils.common import setup_logging

    setup_logging("chatty", str(tmp_path / "x.log"))
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_unwritable_log_dir_keeps_stdout(tmp_path):
    from relgraph.utils.common import setup_logging

    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    setup_logging("INFO", str(blocker / "run.log"))

    root = logging.getLogger()
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    assert any(type(h) is logging.StreamHandler for h in root.handlers)
