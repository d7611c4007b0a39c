#!/usr/bin/env python3
"""
In-memory relationship graph built once from an ordered edge list.

Entities are kept in construction order; that order is the stable enumeration
used by the analytics for score vectors and tie-breaks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from relgraph.errors import MalformedInputError, UnknownEntityError

logger = logging.getLogger(__name__)


@dataclass
class Entity:
    name: str
    appearances: int = 0
    centrality: float = 0.0


@dataclass(frozen=True)
class Relationship:
    """Directed edge between two entity positions in the store."""

    source: int
    target: int


class GraphStore:
    """Ordered entities plus directed relationships, including parallel edges.

    Build with :meth:`from_edges`. The entity and relationship sets never change
    afterwards; only ``Entity.centrality`` may be filled in by the analytics.
    """

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._relationships: list[Relationship] = []
        self._successors: list[list[int]] = []
        self._index: dict[str, int] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str]]) -> GraphStore:
        """Build a store from ``(first, second)`` name pairs, in order.

        Each pair registers unseen names, counts one appearance for both
        endpoints and adds a relationship ``first -> second``.
        """
        store = cls()
        for position, (first, second) in enumerate(edges):
            if not first or not second:
                raise MalformedInputError(
                    f"edge {position} has an empty entity name: {(first, second)!r}"
                )
            source = store._register(first)
            target = store._register(second)
            store._entities[source].appearances += 1
            store._entities[target].appearances += 1
            store._relationships.append(Relationship(source, target))
            store._successors[source].append(target)

        logger.debug(
            "Built graph store: %d entities, %d relationships",
            store.entity_count,
            store.relationship_count,
        )
        return store

    def _register(self, name: str) -> int:
        index = self._index.get(name)
        if index is None:
            index = len(self._entities)
            self._index[name] = index
            self._entities.append(Entity(name))
            self._successors.append([])
        return index

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def relationships(self) -> tuple[Relationship, ...]:
        return tuple(self._relationships)

    @property
    def names(self) -> list[str]:
        return [entity.name for entity in self._entities]

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    @property
    def relationship_count(self) -> int:
        return len(self._relationships)

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise UnknownEntityError(name) from None

    def entity(self, name: str) -> Entity:
        return self._entities[self.index_of(name)]

    def successors(self, index: int) -> list[int]:
        """Outgoing neighbours of ``index``; repeated once per parallel edge."""
        return self._successors[index]

    def summary(self) -> dict[str, int]:
        return {
            "entities": self.entity_count,
            "relationships": self.relationship_count,
        }
