#!/usr/bin/env python3
"""
Centrality Analysis for Relationship Graphs - Identify Central Entities

- Betweenness Centrality (Brandes): score each entity by the fraction of
  directed shortest paths between other entities that pass through it
- Most connected entity: the single highest-scoring entity
- Top-k and distribution views of the scores for reporting

Parallel edges count as distinct shortest paths, so repeated co-occurrences
raise the score of the entities they connect.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from time import perf_counter
from typing import Any

import pandas as pd

from relgraph.constants import DEFAULT_PARALLEL_THRESHOLD, DEFAULT_TOP_N
from relgraph.errors import EmptyGraphError
from relgraph.graph.store import GraphStore
from relgraph.utils.progress import progress_iter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MostConnectedEntity:
    name: str
    centrality: float


def _accumulate(store: GraphStore, sources: Iterable[int], endpoints: bool) -> list[float]:
    """Raw betweenness contributions of the given BFS sources."""
    n = len(store)
    betweenness = [0.0] * n
    for s in sources:
        stack: list[int] = []
        preds: list[list[int]] = [[] for _ in range(n)]
        sigma = [0] * n
        dist = [-1] * n
        sigma[s] = 1
        dist[s] = 0
        queue = deque([s])
        while queue:
            v = queue.popleft()
            stack.append(v)
            for w in store.successors(v):
                if dist[w] < 0:
                    dist[w] = dist[v] + 1
                    queue.append(w)
                if dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    preds[w].append(v)

        if endpoints:
            betweenness[s] += len(stack) - 1
        delta = [0.0] * n
        while stack:
            w = stack.pop()
            coeff = (1.0 + delta[w]) / sigma[w]
            for v in preds[w]:
                delta[v] += sigma[v] * coeff
            if w != s:
                betweenness[w] += delta[w]
                if endpoints:
                    betweenness[w] += 1.0
    return betweenness


def _scale(n: int, normalized: bool, endpoints: bool, sampled: int | None) -> float | None:
    scale: float | None = None
    if normalized:
        if endpoints:
            if n >= 2:
                scale = 1.0 / (n * (n - 1))
        elif n > 2:
            scale = 1.0 / ((n - 1) * (n - 2))
    if sampled is not None:
        scale = (scale if scale is not None else 1.0) * n / sampled
    return scale


def _select_sources(
    n: int, sample_cap: int | None, seed: int | None
) -> tuple[list[int], int | None]:
    if sample_cap is not None and sample_cap <= 0:
        raise ValueError(f"sample_cap must be positive, got {sample_cap}")
    if sample_cap is None or sample_cap >= n:
        return list(range(n)), None
    rng = random.Random(seed)
    return sorted(rng.sample(range(n), sample_cap)), sample_cap


def _accumulate_parallel(
    store: GraphStore, sources: list[int], endpoints: bool, workers: int
) -> list[float]:
    partitions = [sources[i::workers] for i in range(workers)]
    partitions = [p for p in partitions if p]
    totals = [0.0] * len(store)
    with ThreadPoolExecutor(max_workers=len(partitions)) as executor:
        futures = [executor.submit(_accumulate, store, part, endpoints) for part in partitions]
        for future in progress_iter(
            as_completed(futures), total=len(futures), desc="Betweenness partitions"
        ):
            for i, value in enumerate(future.result()):
                totals[i] += value
    return totals


def betweenness_centrality(
    store: GraphStore,
    *,
    normalized: bool = True,
    endpoints: bool = False,
    sample_cap: int | None = None,
    seed: int | None = None,
    workers: int = 1,
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
) -> list[float]:
    """Betweenness of every entity, indexed by store enumeration order.

    Args:
        store: Built graph store
        normalized: Divide by the number of ordered pairs of the other entities
        endpoints: Also credit the source and target of each path
        sample_cap: Process at most this many BFS sources and extrapolate
        seed: Seed for choosing sampled sources
        workers: Thread count; only used when the graph has at least
            ``parallel_threshold`` entities
        parallel_threshold: Minimum entity count before workers are used

    Returns:
        List of non-negative scores, one per entity
    """
    n = len(store)
    sources, sampled = _select_sources(n, sample_cap, seed)
    if sampled is not None:
        logger.info("Approximating betweenness from %d of %d sources", sampled, n)

    if workers > 1 and n >= parallel_threshold:
        logger.debug("Running betweenness on %d workers", workers)
        raw = _accumulate_parallel(store, sources, endpoints, workers)
    else:
        raw = _accumulate(
            store,
            progress_iter(sources, total=len(sources), desc="Betweenness", unit="src"),
            endpoints,
        )

    scale = _scale(n, normalized, endpoints, sampled)
    if scale is None:
        return raw
    return [value * scale for value in raw]


def compute_centrality(
    store: GraphStore, *, write_back: bool = False, **options: Any
) -> dict[str, float]:
    """Betweenness centrality keyed by entity name.

    Every entity is present, zero scores included, in construction order.
    With ``write_back`` the scores are also stored on ``Entity.centrality``.
    Remaining keyword options go to :func:`betweenness_centrality`.
    """
    if len(store) == 0:
        raise EmptyGraphError("Cannot compute centrality of an empty graph")

    logger.info("🔍 Running Betweenness Centrality analysis...")
    start_time = perf_counter()
    scores = betweenness_centrality(store, **options)
    logger.info("Betweenness completed in %.2fs", perf_counter() - start_time)

    if write_back:
        for entity, score in zip(store, scores):
            entity.centrality = score
        logger.debug("Centrality scores written back to %d entities", len(scores))

    return {entity.name: score for entity, score in zip(store, scores)}


def most_connected_entity(
    store: GraphStore, scores: Mapping[str, float] | None = None, **options: Any
) -> MostConnectedEntity:
    """Entity with the strictly highest centrality.

    Ties go to the entity created first, so a graph where every score is zero
    yields its first entity. Pass ``scores`` to reuse an earlier
    :func:`compute_centrality` result.
    """
    if len(store) == 0:
        raise EmptyGraphError("Cannot pick the most connected entity of an empty graph")
    if scores is None:
        scores = compute_centrality(store, **options)

    best: MostConnectedEntity | None = None
    for entity in store:
        score = scores.get(entity.name, 0.0)
        if best is None or score > best.centrality:
            best = MostConnectedEntity(entity.name, score)
    assert best is not None
    return best


def top_entities(scores: Mapping[str, float], k: int = DEFAULT_TOP_N) -> list[tuple[str, float]]:
    """Top ``k`` (name, score) pairs by descending score; ties keep input order."""
    if k <= 0:
        return []
    # sorted() is stable
    return sorted(scores.items(), key=lambda item: -item[1])[:k]


def centrality_distribution(store: GraphStore, scores: Mapping[str, float]) -> pd.DataFrame:
    """Scores of all entities as a DataFrame ordered like :func:`top_entities`.

    Columns: name, appearances, centrality
    """
    ranked = top_entities(scores, k=len(scores))
    rows = [
        {
            "name": name,
            "appearances": store.entity(name).appearances,
            "centrality": score,
        }
        for name, score in ranked
    ]
    return pd.DataFrame(rows, columns=["name", "appearances", "centrality"])


def describe_distribution(frame: pd.DataFrame) -> dict[str, float]:
    if frame.empty:
        return {"min": 0.0, "max": 0.0, "mean": 0.0, "median": 0.0}
    column = frame["centrality"]
    return {
        "min": float(column.min()),
        "max": float(column.max()),
        "mean": float(column.mean()),
        "median": float(column.median()),
    }
