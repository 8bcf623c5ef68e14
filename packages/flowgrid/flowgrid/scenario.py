"""Seeding functions for the built-in scenarios."""
from __future__ import annotations

from typing import Callable

from flowgrid.graph import EntityGraph
from flowgrid.resource import Resource

# (wants, has, position) for the reference chain, top-left to bottom-right.
CHAIN: list[tuple[int, int, tuple[int, int]]] = [
    (1, 100, (1, 1)),
    (1, 255, (1, 2)),
    (2, 64, (2, 2)),
    (2, 192, (3, 2)),
    (5, 0, (3, 3)),
]


def setup_chain(graph: EntityGraph) -> None:
    """Five entities forming a single path from (1, 1) down to (3, 3)."""
    kind = graph.kind
    for wants, has, position in CHAIN:
        graph.insert(Resource(wants, kind), Resource(has, kind), position, True)


def setup_column(graph: EntityGraph, length: int = 8, source: int = 255) -> None:
    """A vertical column fed from a single full source at the top."""
    if length <= 0:
        raise ValueError(f"length must be > 0, got {length}")
    kind = graph.kind
    graph.insert(Resource(0, kind), Resource(source, kind), (0, 0))
    for y in range(1, length):
        graph.insert(Resource(min(y, kind.max_amount), kind), Resource(0, kind), (0, y))


SCENARIOS: dict[str, Callable[[EntityGraph], None]] = {
    "chain": setup_chain,
    "column": setup_column,
}
