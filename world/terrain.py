#terrain.py

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Tuple

from config import Config
from world.options import GenerationConfig
from world.wave import TermSet, build_wave_function

logger = logging.getLogger(__name__)

# Fraction of the nominal step. Keeps float drift from adding a sample at max_phase.
END_TOLERANCE = 1e-6


class Coordinate(NamedTuple):
    """One terrain vertex in output (screen) space."""
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LandingZone:
    """A flat segment spliced into the terrain."""
    index: int          # terrain index of the zone's left vertex
    left: float
    right: float
    y: float
    variant: str        # "x5", "x3" or "x2"

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def center(self) -> float:
        return (self.left + self.right) / 2


@dataclass(frozen=True, slots=True)
class Terrain:
    """Side-view terrain profile: vertices in left-to-right draw order."""
    coords: Tuple[Coordinate, ...]
    term_set: TermSet
    zones: Tuple[LandingZone, ...] = ()

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coords)

    def __getitem__(self, i: int) -> Coordinate:
        return self.coords[i]

    def points(self) -> List[Tuple[float, float]]:
        """Plain (x, y) tuples, ready for a polyline draw call."""
        return [(c.x, c.y) for c in self.coords]


def generate_terrain(config: GenerationConfig | None = None,
                     rng: random.Random | None = None,
                     term_set: TermSet | None = None) -> Terrain:
    """Sample a random harmonic wave into a rough terrain profile.

    The angle walks [0, max_phase) in steps of da +/- step_jitter*da, each
    sample is scaled, inverted (screen y points down) and jittered. Landing
    zones are offered once per sample after the angle passes the next zone
    slot, and taken with probability zone_probability.

    Args:
        config: Generation options; defaults apply when omitted.
        rng: Random source. When omitted a new one is seeded from config.seed.
        term_set: Force the harmonic flags instead of drawing them from rng.
    """
    cfg = config if config is not None else GenerationConfig()
    if rng is None:
        rng = random.Random(cfg.seed)
    if term_set is None:
        term_set = TermSet.draw(cfg.num_terms, rng)
    wave = build_wave_function(term_set, cfg.num_terms)

    da = cfg.max_phase / cfg.num_samples        # nominal radians between samples
    dda = da * cfg.step_jitter                  # max +/- change to each step
    end = cfg.max_phase - da * END_TOLERANCE
    zone_spacing = cfg.zone_spacing             # None when no zones requested

    coords: List[Coordinate] = []
    zones: List[LandingZone] = []
    a = 0.0
    while a < end:
        y = cfg.offset_y - wave(a) * cfg.scale_y
        x = a * cfg.scale_x
        y += rng.uniform(-1, 1) * cfg.max_deviation_y
        x += rng.uniform(-1, 1) * cfg.max_deviation_x
        coords.append(Coordinate(x, y))

        if (zone_spacing is not None
                and len(zones) <= cfg.num_zones
                and a / zone_spacing - len(zones) > 0
                and rng.random() < cfg.zone_probability):
            zone = _splice_zone(coords, cfg, rng)
            zones.append(zone)
            # resume sampling from the far edge of the zone
            a = zone.right / cfg.scale_x

        a += da + rng.uniform(-1, 1) * dda

    logger.debug("generated terrain: %d vertices, %d/%d zones, %r",
                 len(coords), len(zones), cfg.num_zones, term_set)
    return Terrain(coords=tuple(coords), term_set=term_set, zones=tuple(zones))


def _splice_zone(coords: List[Coordinate], cfg: GenerationConfig,
                 rng: random.Random) -> LandingZone:
    """Extend the last vertex into a flat zone of a randomly chosen width."""
    start = coords[-1]
    kind = rng.randrange(len(Config.ZONE_VARIANTS))
    right = start.x + cfg.zone_widths[kind]
    coords.append(Coordinate(right, start.y))
    return LandingZone(index=len(coords) - 2, left=start.x, right=right,
                       y=start.y, variant=Config.ZONE_VARIANTS[kind])
