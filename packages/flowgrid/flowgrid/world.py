"""World - owns the entity graph and drives the tick loop."""

from __future__ import annotations

import logging
import time
from typing import Callable

from flowgrid.clock import Clock
from flowgrid.config import FlowConfig
from flowgrid.graph import EntityGraph
from flowgrid.render import TerminalRenderer
from flowgrid.resource import ENERGY, ResourceKind

logger = logging.getLogger(__name__)

TickHook = Callable[["World", int], None]


class World:
    """Render, log, update and pace, once per tick."""

    def __init__(
        self,
        config: FlowConfig | None = None,
        renderer: TerminalRenderer | None = None,
        kind: ResourceKind = ENERGY,
    ) -> None:
        self._config = config if config is not None else FlowConfig()
        self._clock = Clock(self._config.tps)
        self._graph = EntityGraph(kind, capacity_hint=self._config.capacity_hint)
        if renderer is None and self._config.render:
            renderer = TerminalRenderer(self._config.width, self._config.height)
        self._renderer = renderer
        self._tick_hooks: list[TickHook] = []
        self._stop_requested: bool = False

    @property
    def config(self) -> FlowConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def entities(self) -> EntityGraph:
        return self._graph

    @property
    def renderer(self) -> TerminalRenderer | None:
        return self._renderer

    def on_tick(self, hook: TickHook) -> None:
        self._tick_hooks.append(hook)

    def stop(self) -> None:
        self._stop_requested = True

    def _log_entities(self) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        for i in self._graph:
            logger.debug(self._graph.describe(i))

    def _step(self) -> float:
        """Run one tick without pacing. Returns seconds spent."""
        start = time.monotonic()
        if self._config.render and self._renderer is not None:
            self._renderer.draw(self._graph)
        self._log_entities()
        self._graph.update()
        tick_number = self._clock.advance()
        for hook in self._tick_hooks:
            hook(self, tick_number)
        return time.monotonic() - start

    def _pace(self, spent: float) -> None:
        sleep_time = self._clock.remaining(spent)
        logger.debug(
            "Render time: %.6fs  Target frame time: %.6fs  Tick #: %d",
            spent,
            self._clock.dt,
            self._clock.tick_number,
        )
        if sleep_time > 0:
            time.sleep(sleep_time)
        else:
            logger.warning(
                "Tick %d overran its budget by %.6fs",
                self._clock.tick_number,
                -sleep_time,
            )

    def tick(self) -> None:
        self._pace(self._step())

    def step(self) -> None:
        """Run one tick without sleeping."""
        self._step()

    def run(self, n: int, paced: bool = True) -> None:
        self._stop_requested = False
        for _ in range(n):
            spent = self._step()
            if self._stop_requested:
                break
            if paced:
                self._pace(spent)

    def run_forever(self) -> None:
        self._stop_requested = False
        logger.info("Running %d entities at %d tps", len(self._graph), self._clock.tps)
        while not self._stop_requested:
            spent = self._step()
            if self._stop_requested:
                break
            self._pace(spent)
        logger.info("Stopped at tick %d", self._clock.tick_number)
