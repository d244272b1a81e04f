"""Tests for the parameter panel and its form -> config mapping."""
import math

import pygame
import pytest

from config import Config
from systems.ui import FIELDS, ParameterPanel, config_from_form
from world.terrain import generate_terrain


class TestConfigFromForm:
    """Form fields map onto GenerationConfig with fixed derived fields."""

    def test_derived_fields(self):
        config = config_from_form(Config.FORM_DEFAULTS)
        assert config.max_phase == pytest.approx(3 * math.pi)
        assert config.scale_x == pytest.approx(800 / (3 * math.pi))
        assert config.offset_y == 400

    def test_form_values_copied(self):
        config = config_from_form(Config.FORM_DEFAULTS)
        assert config.num_terms == 6
        assert config.num_samples == 200
        assert config.scale_y == 40
        assert config.max_deviation_x == 2
        assert config.max_deviation_y == 3
        assert config.num_zones == 4
        assert config.zone_widths == (30.0, 40.0, 50.0)

    def test_canvas_width_sets_scale(self):
        config = config_from_form(Config.FORM_DEFAULTS, canvas_width=1200)
        assert config.scale_x * config.max_phase == pytest.approx(1200)

    def test_default_form_terrain_spans_canvas(self):
        terrain = generate_terrain(config_from_form(Config.FORM_DEFAULTS, seed=21))
        assert len(terrain.zones) <= 4
        assert terrain[0].x <= Config.FORM_DEFAULTS["max_deviation_x"]
        assert terrain[len(terrain) - 1].x > Config.CANVAS_WIDTH * 0.9


class TestParameterPanel:
    """Keyboard editing of the form."""

    def test_starts_with_defaults(self):
        panel = ParameterPanel()
        assert panel.values == Config.FORM_DEFAULTS
        assert panel.field == FIELDS[0]

    def test_override_values(self):
        panel = ParameterPanel(values={"num_zones": 0})
        assert panel.to_config().num_zones == 0

    def test_unknown_field_rejected(self):
        with pytest.raises(KeyError):
            ParameterPanel(values={"zones": 2})

    def test_selection_wraps(self):
        panel = ParameterPanel()
        panel.select(-1)
        assert panel.field == FIELDS[-1]
        panel.select(1)
        assert panel.field == FIELDS[0]

    def test_adjust_clamps_at_minimum(self):
        panel = ParameterPanel()
        panel.adjust(-100)
        assert panel.values["num_terms"] == 1
        panel.select(2)
        panel.adjust(-100)
        assert panel.values["scale_y"] == 0

    def test_keys(self):
        panel = ParameterPanel()
        assert panel.handle_key(pygame.K_DOWN) is False
        assert panel.field == "num_samples"
        assert panel.handle_key(pygame.K_RIGHT) is True
        assert panel.values["num_samples"] == 201
        assert panel.handle_key(pygame.K_LEFT) is True
        assert panel.values["num_samples"] == 200
        assert panel.handle_key(pygame.K_UP) is False
        assert panel.field == "num_terms"

    def test_seed_passed_through(self):
        assert ParameterPanel().to_config(seed=99).seed == 99

    def test_draw_without_font_is_noop(self):
        surface = pygame.Surface((100, 100))
        surface.fill(Config.WHITE)
        ParameterPanel().draw(surface)
        assert tuple(surface.get_at((5, 5)))[:3] == Config.WHITE

    def test_draw_with_font(self):
        pygame.font.init()
        surface = pygame.Surface((400, 400))
        surface.fill(Config.WHITE)
        ParameterPanel(pygame.font.Font(None, 16)).draw(surface)
        assert tuple(surface.get_at((5, 5)))[:3] != Config.WHITE
