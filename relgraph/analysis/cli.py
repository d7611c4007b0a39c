#!/usr/bin/env python3
"""
Relationship graph analysis - most central entity, top-k centrality and
degrees of separation for an edge list.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from relgraph.analysis.centrality import (
    centrality_distribution,
    compute_centrality,
    describe_distribution,
    most_connected_entity,
    top_entities,
)
from relgraph.analysis.io import read_edges
from relgraph.analysis.report import (
    print_most_connected,
    print_query_failure,
    print_separation,
    print_top_entities,
)
from relgraph.analysis.separation import degrees_of_separation
from relgraph.errors import (
    EmptyGraphError,
    MalformedInputError,
    UnknownEntityError,
    UnreachableError,
)
from relgraph.graph.store import GraphStore
from relgraph.utils.common import add_common_args, setup_logging
from relgraph.utils.config import get_graph_config

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    config = get_graph_config()
    parser = argparse.ArgumentParser(
        description="Rank entities of a co-occurrence graph and measure separation between two"
    )
    add_common_args(parser)
    parser.add_argument("--source", default=config.source, help="Entity to start from")
    parser.add_argument("--target", default=config.target, help="Entity to reach")
    parser.add_argument(
        "--top-n", type=int, default=config.top_n, help="Number of top entities to display"
    )
    parser.add_argument(
        "--sample-cap",
        type=_positive_int,
        default=config.sample_cap,
        help="Approximate betweenness from at most this many source entities",
    )
    parser.add_argument("--seed", type=int, help="Seed for sampled betweenness sources")
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=config.workers,
        help="Worker threads for betweenness on large graphs",
    )
    parser.add_argument(
        "--endpoints",
        action="store_true",
        help="Count path endpoints in betweenness scores",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the edge list, run the three queries and print the results.

    Returns 0 when every query succeeded, 1 when the edge list could not be
    loaded and 2 when a query failed.
    """
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        edges = read_edges(args.edges_file)
    except FileNotFoundError:
        logger.error("Edges file not found: %s", args.edges_file)
        return 1
    except OSError as e:
        logger.error("Cannot read edges file %s: %s", args.edges_file, e)
        return 1
    except MalformedInputError as e:
        logger.error("Malformed edge list: %s", e)
        return 1

    store = GraphStore.from_edges(edges)
    logger.info(
        "Graph built: %d entities, %d relationships",
        store.entity_count,
        store.relationship_count,
    )

    failed = False
    try:
        scores = compute_centrality(
            store,
            endpoints=args.endpoints,
            sample_cap=args.sample_cap,
            seed=args.seed,
            workers=args.workers,
        )
    except EmptyGraphError as e:
        logger.error("Centrality analysis failed: %s", e)
        print_query_failure("Centrality analysis", e)
        failed = True
    else:
        stats = describe_distribution(centrality_distribution(store, scores))
        logger.info(
            "Centrality range: %.6f - %.6f (mean %.6f, median %.6f)",
            stats["min"],
            stats["max"],
            stats["mean"],
            stats["median"],
        )
        print_top_entities(top_entities(scores, args.top_n))
        print_most_connected(most_connected_entity(store, scores))

    try:
        hops = degrees_of_separation(store, args.source, args.target)
    except (UnknownEntityError, UnreachableError) as e:
        logger.warning("Degrees of separation failed: %s", e)
        print_query_failure("Degrees of separation", e)
        failed = True
    else:
        print_separation(args.source, args.target, hops)

    logger.info("Analysis completed")
    return 2 if failed else 0
