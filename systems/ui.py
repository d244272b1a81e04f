import pygame
from config import Config
from typing import Dict, Mapping, Tuple
from world.options import GenerationConfig

# Panel rows, top to bottom
FIELDS: Tuple[str, ...] = tuple(Config.FORM_DEFAULTS)

LABELS = {
    "num_terms": "TERMS",
    "num_samples": "SAMPLES",
    "scale_y": "SCALE Y",
    "max_deviation_x": "DEV X",
    "max_deviation_y": "DEV Y",
    "num_zones": "ZONES",
    "x5_width": "x5 WIDTH",
    "x3_width": "x3 WIDTH",
    "x2_width": "x2 WIDTH",
}


def config_from_form(values: Mapping[str, int], canvas_width: int = Config.CANVAS_WIDTH,
                     seed: int | None = None) -> GenerationConfig:
    """Map the form fields onto a GenerationConfig.

    max_phase is fixed at 3π, scale_x stretches that domain over the canvas
    width and offset_y is fixed at 400.
    """
    max_phase = Config.FORM_MAX_PHASE
    return GenerationConfig(
        num_terms=int(values["num_terms"]),
        max_phase=max_phase,
        num_samples=int(values["num_samples"]),
        scale_x=canvas_width / max_phase,
        scale_y=values["scale_y"],
        offset_y=Config.FORM_OFFSET_Y,
        max_deviation_x=values["max_deviation_x"],
        max_deviation_y=values["max_deviation_y"],
        num_zones=int(values["num_zones"]),
        zone_widths=(values["x5_width"], values["x3_width"], values["x2_width"]),
        seed=seed,
    )


class ParameterPanel:
    """Keyboard-driven form for the generator parameters."""
    def __init__(self, font: pygame.font.Font | None = None,
                 values: Mapping[str, int] | None = None) -> None:
        self.font = font
        self.values: Dict[str, int] = dict(Config.FORM_DEFAULTS)
        if values:
            unknown = set(values) - set(FIELDS)
            if unknown:
                raise KeyError(f"unknown form fields: {sorted(unknown)}")
            self.values.update(values)
        self.selected = 0

    @property
    def field(self) -> str:
        return FIELDS[self.selected]

    def select(self, delta: int) -> None:
        self.selected = (self.selected + delta) % len(FIELDS)

    def adjust(self, delta: int) -> None:
        """Nudge the selected field, never below its minimum."""
        name = self.field
        floor = Config.FORM_MINIMUMS.get(name, 0)
        self.values[name] = max(floor, self.values[name] + delta * Config.FORM_STEP)

    def handle_key(self, key: int) -> bool:
        """Apply a key press. Returns True if a value changed."""
        if key == pygame.K_UP:
            self.select(-1)
        elif key == pygame.K_DOWN:
            self.select(1)
        elif key == pygame.K_RIGHT:
            self.adjust(1)
            return True
        elif key == pygame.K_LEFT:
            self.adjust(-1)
            return True
        return False

    def to_config(self, canvas_width: int = Config.CANVAS_WIDTH,
                  seed: int | None = None) -> GenerationConfig:
        return config_from_form(self.values, canvas_width, seed)

    def draw(self, screen: pygame.Surface) -> None:
        if self.font is None:
            return
        row_h = self.font.get_linesize()
        height = row_h * (len(FIELDS) + 2) + 10
        panel = pygame.Surface((Config.PANEL_WIDTH, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, Config.PANEL_BG_ALPHA))
        screen.blit(panel, (0, 0))

        def lbl(txt: str, x: int, y: int, c: Tuple[int, int, int] = Config.PANEL_COLOR) -> None:
            surf = self.font.render(txt, True, c)
            screen.blit(surf, (x, y))

        lbl("---- TERRAIN -----", 10, 5)
        for i, name in enumerate(FIELDS):
            color = Config.PANEL_HIGHLIGHT if i == self.selected else Config.PANEL_COLOR
            lbl(f"{LABELS[name]:<9}{self.values[name]:>6}", 10, 5 + row_h * (i + 1), color)
        lbl("R: regen  ESC: quit", 10, 5 + row_h * (len(FIELDS) + 1))
