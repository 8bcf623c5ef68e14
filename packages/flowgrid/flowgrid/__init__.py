"""flowgrid - Resource flow across a grid of entities."""

from flowgrid.clock import Clock
from flowgrid.config import FlowConfig
from flowgrid.graph import EntityGraph, EntityView, Glyph
from flowgrid.render import TerminalRenderer
from flowgrid.resource import ENERGY, Resource, ResourceKind
from flowgrid.types import EntityIndex, KindMismatchError, Position, UnknownEntityError
from flowgrid.world import World

__all__ = [
    "World",
    "EntityGraph",
    "EntityView",
    "Glyph",
    "Resource",
    "ResourceKind",
    "ENERGY",
    "Clock",
    "FlowConfig",
    "TerminalRenderer",
    "EntityIndex",
    "Position",
    "KindMismatchError",
    "UnknownEntityError",
]
