#!/usr/bin/env python3
"""Console presentation of the centrality and separation results."""

from __future__ import annotations

from collections.abc import Sequence

from relgraph.analysis.centrality import MostConnectedEntity


def print_top_entities(top: Sequence[tuple[str, float]]) -> None:
    print(f"\n🏆 TOP {len(top)} ENTITIES BY BETWEENNESS CENTRALITY:")
    print("-" * 80)
    if not top:
        print("  (no entities)")
    for name, score in top:
        print(f"  {name}: {score * 100:.2f}%")


def print_most_connected(most_connected: MostConnectedEntity) -> None:
    print(
        f"\n🌉 Most connected entity: {most_connected.name} "
        f"(centrality {most_connected.centrality:.6f})"
    )


def print_separation(source: str, target: str, hops: int) -> None:
    print(f"\n🔗 Degrees of separation between {source} and {target}: {hops}")


def print_query_failure(query: str, error: Exception) -> None:
    print(f"\n⚠️  {query} failed: {error}")
