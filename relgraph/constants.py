#!/usr/bin/env python3
"""
Centralized constants for the relation-graph project.

Defaults used by the loader, the analytics and the command line. The tunables
below can be overridden from the environment (or a ``.env`` file, see
``relgraph.utils.config``) without code changes, e.g.:

  export RELGRAPH_PARALLEL_THRESHOLD=500
"""

import os

# Input
DEFAULT_EDGES_FILE = "edges.csv"
EDGE_DELIMITER = ","

# Example query pair from the Marvel co-appearance network
DEFAULT_SOURCE_ENTITY = "SPIDER-MAN/PETER PARKER"
DEFAULT_TARGET_ENTITY = "STACY, JILL"

# Reporting
DEFAULT_TOP_N = 5

# Centrality
DEFAULT_WORKERS = 1
# Below this many entities the worker pool is not worth starting
DEFAULT_PARALLEL_THRESHOLD = int(os.getenv("RELGRAPH_PARALLEL_THRESHOLD", "100"))

# Logging
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILENAME = "relgraph.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
