#!/usr/bin/env python3
"""
Common utilities shared across relation-graph scripts.
"""

import argparse
import logging
import sys
from pathlib import Path

from relgraph.constants import DEFAULT_LOG_DIR, DEFAULT_LOG_FILENAME, LOG_FORMAT
from relgraph.utils.config import get_graph_config


def _file_handler(log_file: str | None) -> logging.Handler | None:
    path = Path(log_file) if log_file else Path(DEFAULT_LOG_DIR) / DEFAULT_LOG_FILENAME
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path)
    except OSError:
        # Unwritable location: keep stdout logging only
        return None


def setup_logging(log_level: str | int = "INFO", log_file: str | None = None) -> None:
    """Send log records to stdout and to a log file.

    Args:
        log_level: Level name ("INFO", "debug") or a logging constant; unknown
            names fall back to INFO
        log_file: Log file path; defaults to logs/relgraph.log
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_handler = _file_handler(log_file)
    if file_handler is not None:
        handlers.append(file_handler)

    if isinstance(log_level, str):
        level = getattr(logging, log_level.upper(), logging.INFO)
    else:
        level = log_level

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add input and logging arguments shared by every command.

    Defaults come from the environment / ``.env`` via ``get_graph_config()``.
    """
    config = get_graph_config()
    parser.add_argument(
        "--edges-file",
        default=config.edges_file,
        help="Edge list to load, one 'entityA,entityB' pair per line",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", help="Optional log file")
