"""Shared type aliases and errors for flowgrid."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowgrid.resource import ResourceKind

EntityIndex = int
Position = tuple[int, int]


class KindMismatchError(TypeError):
    """Raised when two resources of different kinds are combined."""

    def __init__(self, expected: ResourceKind, actual: ResourceKind) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Resource kind mismatch: expected {expected.name!r}, got {actual.name!r}"
        )


class UnknownEntityError(IndexError):
    """Raised when looking up an index that was never assigned."""

    def __init__(self, index: int, message: str) -> None:
        self.index = index
        super().__init__(message)
