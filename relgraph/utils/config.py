#!/usr/bin/env python3
"""
Runtime configuration resolved from the environment and an optional ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from relgraph.constants import (
    DEFAULT_EDGES_FILE,
    DEFAULT_SOURCE_ENTITY,
    DEFAULT_TARGET_ENTITY,
    DEFAULT_TOP_N,
    DEFAULT_WORKERS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphConfig:
    edges_file: str = DEFAULT_EDGES_FILE
    source: str = DEFAULT_SOURCE_ENTITY
    target: str = DEFAULT_TARGET_ENTITY
    top_n: int = DEFAULT_TOP_N
    sample_cap: int | None = None
    workers: int = DEFAULT_WORKERS


def _env_int(name: str, default: int | None, positive: bool = False) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("[config] Ignoring %s=%r (not an integer)", name, raw)
        return default
    if positive and value <= 0:
        logger.warning("[config] Ignoring %s=%r (must be positive)", name, raw)
        return default
    return value


def get_graph_config() -> GraphConfig:
    """Return settings after loading environment variables.

    Real environment variables win over values from ``.env``; empty strings
    are treated as absent.
    """
    env_path = find_dotenv(usecwd=True) or find_dotenv()
    load_dotenv(dotenv_path=env_path or None, override=False)

    edges_file = os.getenv("RELGRAPH_EDGES_FILE") or DEFAULT_EDGES_FILE
    source = os.getenv("RELGRAPH_SOURCE") or DEFAULT_SOURCE_ENTITY
    target = os.getenv("RELGRAPH_TARGET") or DEFAULT_TARGET_ENTITY
    top_n = _env_int("RELGRAPH_TOP_N", DEFAULT_TOP_N)
    sample_cap = _env_int("RELGRAPH_SAMPLE_CAP", None, positive=True)
    workers = _env_int("RELGRAPH_WORKERS", DEFAULT_WORKERS, positive=True)

    return GraphConfig(
        edges_file=edges_file,
        source=source,
        target=target,
        top_n=top_n if top_n is not None else DEFAULT_TOP_N,
        sample_cap=sample_cap,
        workers=workers if workers is not None else DEFAULT_WORKERS,
    )
