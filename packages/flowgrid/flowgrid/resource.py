"""Resource - saturating, kind-tagged quantity."""

from __future__ import annotations

from dataclasses import dataclass

from flowgrid.types import KindMismatchError


@dataclass(frozen=True)
class ResourceKind:
    """Immutable resource kind definition.

    Attributes:
        name: Unique identifier for this kind.
        max_amount: Largest quantity a single holding can reach.
    """

    name: str
    max_amount: int = 255

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ResourceKind name must be non-empty")
        if self.max_amount <= 0:
            raise ValueError(f"max_amount must be > 0, got {self.max_amount}")


ENERGY = ResourceKind("energy")


@dataclass(frozen=True)
class Resource:
    """A quantity of one kind, clamped to ``0..kind.max_amount``.

    Addition and subtraction saturate instead of wrapping. Mixing kinds in
    arithmetic or ordering raises :class:`KindMismatchError`.
    """

    amount: int = 0
    kind: ResourceKind = ENERGY

    def __post_init__(self) -> None:
        if not 0 <= self.amount <= self.kind.max_amount:
            raise ValueError(
                f"amount must be in 0..{self.kind.max_amount}, got {self.amount}"
            )

    def _check_kind(self, other: Resource) -> None:
        if other.kind != self.kind:
            raise KindMismatchError(self.kind, other.kind)

    @property
    def saturated(self) -> bool:
        return self.amount == self.kind.max_amount

    def zero(self) -> Resource:
        return Resource(0, self.kind)

    def band(self, bands: int = 4) -> int:
        """Magnitude bucket in ``0..bands-1``; buckets split the range evenly."""
        if bands <= 0:
            raise ValueError(f"bands must be > 0, got {bands}")
        return min(bands - 1, self.amount * bands // (self.kind.max_amount + 1))

    def __add__(self, other: Resource) -> Resource:
        self._check_kind(other)
        return Resource(min(self.amount + other.amount, self.kind.max_amount), self.kind)

    def __sub__(self, other: Resource) -> Resource:
        self._check_kind(other)
        return Resource(max(self.amount - other.amount, 0), self.kind)

    def __lt__(self, other: Resource) -> bool:
        self._check_kind(other)
        return self.amount < other.amount

    def __le__(self, other: Resource) -> bool:
        self._check_kind(other)
        return self.amount <= other.amount

    def __gt__(self, other: Resource) -> bool:
        self._check_kind(other)
        return self.amount > other.amount

    def __ge__(self, other: Resource) -> bool:
        self._check_kind(other)
        return self.amount >= other.amount

    def __int__(self) -> int:
        return self.amount
