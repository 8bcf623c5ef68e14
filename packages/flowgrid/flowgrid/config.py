"""Simulation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlowConfig:
    """Immutable configuration for a flowgrid run.

    Attributes:
        width: Viewport width in cells, excluding the border.
        height: Viewport height in cells, excluding the border.
        tps: Ticks per second the world paces itself to.
        capacity_hint: Expected number of entities. Not a cap.
        render: Whether the world draws a frame each tick.
    """

    width: int = 64
    height: int = 32
    tps: int = 4
    capacity_hint: int = 1024
    render: bool = True

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"viewport must be positive, got {self.width}x{self.height}"
            )
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.capacity_hint < 0:
            raise ValueError(f"capacity_hint must be >= 0, got {self.capacity_hint}")
