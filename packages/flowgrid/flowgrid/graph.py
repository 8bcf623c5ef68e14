"""EntityGraph - grid-placed entities and the per-tick resource flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from flowgrid.resource import ENERGY, Resource, ResourceKind
from flowgrid.types import EntityIndex, KindMismatchError, Position, UnknownEntityError


@dataclass(frozen=True, slots=True)
class EntityView:
    """Read-only copy of one entity's state."""

    index: EntityIndex
    has: Resource
    wants: Resource
    position: Position
    visible: bool
    upstream: tuple[EntityIndex, ...]
    downstream: tuple[EntityIndex, ...]


@dataclass(frozen=True, slots=True)
class Glyph:
    """A visible entity as handed to a renderer."""

    index: EntityIndex
    position: Position
    band: int


class EntityGraph:
    """Append-only store of entities wired by relative grid position.

    Entities are kept in parallel lists indexed by :data:`EntityIndex`.
    Adjacency is fixed at insertion: a neighbor directly above or to the
    left becomes upstream of the new entity, one directly below or to the
    right becomes downstream. Existing entities pick up the reverse edge.
    """

    def __init__(self, kind: ResourceKind = ENERGY, capacity_hint: int = 1024) -> None:
        if capacity_hint < 0:
            raise ValueError(f"capacity_hint must be >= 0, got {capacity_hint}")
        self._kind = kind
        self._capacity_hint = capacity_hint
        self._wants: list[Resource] = []
        self._has: list[Resource] = []
        self._position: list[Position] = []
        self._visible: list[bool] = []
        self._upstream: list[list[EntityIndex]] = []
        self._downstream: list[list[EntityIndex]] = []

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    @property
    def capacity_hint(self) -> int:
        return self._capacity_hint

    def __len__(self) -> int:
        return len(self._position)

    def __iter__(self) -> Iterator[EntityIndex]:
        return iter(range(len(self._position)))

    def _check_index(self, index: EntityIndex) -> None:
        if not 0 <= index < len(self._position):
            raise UnknownEntityError(
                index, f"Entity {index} does not exist ({len(self._position)} entities)"
            )

    def insert(
        self,
        wants: Resource,
        has: Resource,
        position: Position,
        visible: bool = True,
    ) -> EntityIndex:
        for res in (wants, has):
            if res.kind != self._kind:
                raise KindMismatchError(self._kind, res.kind)

        new_index = len(self._position)
        x, y = position
        upstream: list[EntityIndex] = []
        downstream: list[EntityIndex] = []
        for i, pos in enumerate(self._position):
            if pos == (x, y - 1) or pos == (x - 1, y):
                upstream.append(i)
                self._downstream[i].append(new_index)
            if pos == (x, y + 1) or pos == (x + 1, y):
                downstream.append(i)
                self._upstream[i].append(new_index)

        self._wants.append(wants)
        self._has.append(has)
        self._position.append((x, y))
        self._visible.append(visible)
        self._upstream.append(upstream)
        self._downstream.append(downstream)
        return new_index

    def update(self) -> None:
        """Advance holdings by one tick.

        Single pass in increasing index order, mutating ``has`` in place.
        An entity sees the already-updated holdings of lower indices and the
        pre-tick holdings of higher ones, so flow can cross several hops in
        one tick along increasing indices.
        """
        has = self._has
        wants = self._wants
        for i, sources in enumerate(self._upstream):
            want = wants[i]
            for u in sources:
                if has[i].saturated:
                    continue
                if has[u] >= want:
                    has[i] = has[i] + want
                    has[u] = has[u] - want
                else:
                    has[i] = has[i] + has[u]
                    has[u] = has[u].zero()

    # -- Introspection --

    def has(self, index: EntityIndex) -> Resource:
        self._check_index(index)
        return self._has[index]

    def wants(self, index: EntityIndex) -> Resource:
        self._check_index(index)
        return self._wants[index]

    def position(self, index: EntityIndex) -> Position:
        self._check_index(index)
        return self._position[index]

    def visible(self, index: EntityIndex) -> bool:
        self._check_index(index)
        return self._visible[index]

    def upstream(self, index: EntityIndex) -> tuple[EntityIndex, ...]:
        self._check_index(index)
        return tuple(self._upstream[index])

    def downstream(self, index: EntityIndex) -> tuple[EntityIndex, ...]:
        self._check_index(index)
        return tuple(self._downstream[index])

    def holdings(self) -> list[int]:
        """Current amounts, in index order."""
        return [res.amount for res in self._has]

    def entity(self, index: EntityIndex) -> EntityView:
        self._check_index(index)
        return EntityView(
            index=index,
            has=self._has[index],
            wants=self._wants[index],
            position=self._position[index],
            visible=self._visible[index],
            upstream=tuple(self._upstream[index]),
            downstream=tuple(self._downstream[index]),
        )

    def describe(self, index: EntityIndex) -> str:
        """One diagnostic line for the entity at *index*."""
        view = self.entity(index)
        return (
            f"Index: {view.index}\tHas: {view.has.amount}\tWants: {view.wants.amount}"
            f"\tPosition: {view.position}\tVisible: {view.visible}"
            f"\tUpstream: {list(view.upstream)}\tDownstream: {list(view.downstream)}"
        )

    def display(self, bands: int = 4) -> list[Glyph]:
        """Glyphs for every visible entity, in index order."""
        return [
            Glyph(index=i, position=self._position[i], band=self._has[i].band(bands))
            for i in range(len(self._position))
            if self._visible[i]
        ]
