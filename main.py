from __future__ import annotations

import logging
import random
import sys
import pygame

from config import Config
from systems.render import RenderSystem
from systems.ui import ParameterPanel
from world.terrain import Terrain, generate_terrain

logger = logging.getLogger(__name__)


def regenerate(panel: ParameterPanel, seeds: random.Random) -> Terrain:
    """Draw a fresh seed and build terrain from the panel's current values."""
    seed = seeds.getrandbits(32)
    cfg = panel.to_config(Config.CANVAS_WIDTH, seed=seed)
    terrain = generate_terrain(cfg)
    logger.info("seed %d: %d vertices, zones %s", seed, len(terrain),
                [z.variant for z in terrain.zones])
    return terrain


def main(seed: int | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ------------------- Init -------------------
    pygame.init()
    pygame.font.init()

    screen = pygame.display.set_mode((Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT))
    pygame.display.set_caption("Lunar terrain")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(Config.FONT_NAME, Config.FONT_SIZE)

    renderer = RenderSystem(screen, font)
    panel = ParameterPanel(font)
    seeds = random.Random(seed)
    terrain = regenerate(panel, seeds)

    running = True
    while running:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key in (pygame.K_r, pygame.K_SPACE) or panel.handle_key(e.key):
                    terrain = regenerate(panel, seeds)

        # --- Rendering ---
        renderer.draw_terrain(terrain)
        renderer.draw_panel(panel)
        renderer.end_frame()
        clock.tick(Config.FPS)

    pygame.quit()


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else None)
