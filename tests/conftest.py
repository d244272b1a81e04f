"""Shared pytest fixtures for all test modules."""
import os
import random
import sys
from pathlib import Path

# Headless pygame for the render/ui tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Project root holds the top-level modules (config, world, systems)
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from world.options import GenerationConfig
from world.wave import TermSet


@pytest.fixture
def rng():
    """Fixed-seed random source."""
    return random.Random(1234)


@pytest.fixture
def cosine_terms():
    """Single cosine harmonic: f(a) = cos(a)."""
    return TermSet([(0, 1)])


@pytest.fixture
def unit_config():
    """Unit scales, no jitter, no zones: x is the angle, y is -f(a)."""
    return GenerationConfig(
        num_terms=1,
        max_phase=2 * 3.141592653589793,
        num_samples=4,
        scale_x=1,
        scale_y=1,
        offset_y=0,
        max_deviation_x=0,
        max_deviation_y=0,
        num_zones=0,
    )


@pytest.fixture
def zone_config():
    """Form-like parameters with landing zones enabled."""
    return GenerationConfig(
        num_terms=6,
        max_phase=3 * 3.141592653589793,
        num_samples=200,
        scale_x=800 / (3 * 3.141592653589793),
        scale_y=40,
        offset_y=400,
        max_deviation_x=2,
        max_deviation_y=3,
        num_zones=2,
        zone_widths=(30, 40, 50),
    )
