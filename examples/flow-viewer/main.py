"""
Flow Viewer — flowgrid Pygame Demo

Draws each entity as a tile shaded by its holding band, with a line for
every upstream edge. Holdings advance at the configured tick rate.

Run: python examples/flow-viewer/main.py [scenario]
"""
from __future__ import annotations

import sys

import pygame

from flowgrid import EntityGraph, FlowConfig
from flowgrid.scenario import SCENARIOS

TITLE = "Flow Viewer — flowgrid"
TILE = 48
FPS = 60
BG_COLOR = (18, 22, 30)
EDGE_COLOR = (90, 90, 110)
HUD_COLOR = (200, 200, 220)
BAND_COLORS = [
    (60, 90, 200),
    (60, 180, 90),
    (210, 190, 60),
    (210, 60, 60),
]


def _center(pos: tuple[int, int]) -> tuple[int, int]:
    return pos[0] * TILE + TILE // 2, pos[1] * TILE + TILE // 2


def _draw_graph(screen: pygame.Surface, font: pygame.font.Font, graph: EntityGraph) -> None:
    """Draw edges first, then the tiles on top."""
    for i in graph:
        for u in graph.upstream(i):
            pygame.draw.line(
                screen, EDGE_COLOR, _center(graph.position(u)), _center(graph.position(i)), 3
            )

    for glyph in graph.display(len(BAND_COLORS)):
        x, y = glyph.position
        rect = pygame.Rect(x * TILE + 4, y * TILE + 4, TILE - 8, TILE - 8)
        pygame.draw.rect(screen, BAND_COLORS[glyph.band], rect, border_radius=6)
        label = font.render(str(graph.has(glyph.index).amount), True, (10, 10, 10))
        screen.blit(label, label.get_rect(center=rect.center))


def main() -> None:
    scenario = sys.argv[1] if len(sys.argv) > 1 else "chain"
    if scenario not in SCENARIOS:
        print(f"Unknown scenario {scenario!r}; choose from {sorted(SCENARIOS)}")
        sys.exit(2)

    config = FlowConfig(width=16, height=12)
    graph = EntityGraph(capacity_hint=config.capacity_hint)
    SCENARIOS[scenario](graph)

    pygame.init()
    screen = pygame.display.set_mode((config.width * TILE, config.height * TILE + 24))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    tick_acc = 0.0
    tick_interval = 1.0 / config.tps
    tick_number = 0
    paused = False
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused

        if not paused:
            tick_acc += dt
            while tick_acc >= tick_interval:
                graph.update()
                tick_number += 1
                tick_acc -= tick_interval

        screen.fill(BG_COLOR)
        _draw_graph(screen, font, graph)
        pause_str = "  [PAUSED]" if paused else ""
        hud = font.render(
            f"Tick: {tick_number}   Entities: {len(graph)}{pause_str}   Space=Pause  Esc=Quit",
            True,
            HUD_COLOR,
        )
        screen.blit(hud, (8, config.height * TILE + 4))
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
