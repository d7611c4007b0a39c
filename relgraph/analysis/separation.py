#!/usr/bin/env python3
"""
Degrees of separation: hop count of the shortest directed path between two entities.
"""

from __future__ import annotations

import logging
from collections import deque

from relgraph.errors import UnreachableError
from relgraph.graph.store import GraphStore

logger = logging.getLogger(__name__)


def degrees_of_separation(store: GraphStore, source: str, target: str) -> int:
    """Number of edges on the shortest path ``source -> ... -> target``.

    Only outgoing edges are followed, so the result is not symmetric.

    Raises:
        UnknownEntityError: either name is not in the store (source checked first)
        UnreachableError: both names exist but no directed path connects them
    """
    start = store.index_of(source)
    goal = store.index_of(target)
    if start == goal:
        return 0

    hops = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in store.successors(current):
            if neighbour in hops:
                continue
            hops[neighbour] = hops[current] + 1
            if neighbour == goal:
                logger.debug("%s -> %s: %d hops", source, target, hops[neighbour])
                return hops[neighbour]
            queue.append(neighbour)

    raise UnreachableError(source, target)
