# render.py
from __future__ import annotations
import pygame
from config import Config
from world.terrain import Terrain

class RenderSystem:
    """All screen drawing. Keeps order: background → terrain → zone labels → UI."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        self.screen = screen
        self.font = font

    @classmethod
    def offscreen(cls, width: int = Config.CANVAS_WIDTH,
                  height: int = Config.CANVAS_HEIGHT) -> "RenderSystem":
        """Renderer drawing into a plain surface (no window)."""
        return cls(pygame.Surface((width, height)))

    # ----- Frame control ----------------------------------------------------
    def begin_frame(self) -> None:
        self.screen.fill(Config.WHITE)

    def end_frame(self) -> None:
        pygame.display.flip()

    # ----- World ------------------------------------------------------------
    def draw_terrain(self, terrain: Terrain) -> None:
        """Clear the surface and draw the terrain as one connected polyline."""
        self.begin_frame()
        points = terrain.points()
        if len(points) < 2:
            return
        pygame.draw.lines(self.screen, Config.TERRAIN_COLOR, False, points, Config.LINE_WIDTH)
        self.draw_zones(terrain)

    def draw_zones(self, terrain: Terrain) -> None:
        """Highlight each landing zone and label it with its multiplier."""
        for zone in terrain.zones:
            pygame.draw.line(self.screen, Config.ZONE_COLOR,
                             (zone.left, zone.y), (zone.right, zone.y), Config.LINE_WIDTH + 2)
            if self.font is None:
                continue
            lbl = self.font.render(zone.variant, True, Config.ZONE_COLOR)
            self.screen.blit(lbl, (zone.center - lbl.get_width() // 2,
                                   zone.y + Config.ZONE_LABEL_GAP))

    # ----- UI ---------------------------------------------------------------
    def draw_panel(self, panel) -> None:
        panel.draw(self.screen)
