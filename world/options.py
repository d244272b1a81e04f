"""Per-call terrain generation options.

`GenerationConfig` is built once per call: every field has an explicit
default, an explicit zero is kept as zero, and bad values are rejected at
construction time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Tuple

from world.errors import TerrainConfigError

DEFAULT_ZONE_PROBABILITY = 1 / 8
DEFAULT_STEP_JITTER = 0.4

# camelCase names accepted by from_options()
_OPTION_ALIASES = {
    "numTerms": "num_terms",
    "maxPhase": "max_phase",
    "numSamples": "num_samples",
    "scaleX": "scale_x",
    "scaleY": "scale_y",
    "offsetY": "offset_y",
    "maxDeviationX": "max_deviation_x",
    "maxDeviationY": "max_deviation_y",
    "numZones": "num_zones",
    "zoneWidths": "zone_widths",
    "stepJitter": "step_jitter",
    "zoneProbability": "zone_probability",
}


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Parameters for one generate_terrain() call.

    Attributes:
        num_terms: Harmonics in the wavefunction.
        max_phase: Sampling covers angles in [0, max_phase).
        num_samples: Nominal number of samples over the domain.
        scale_x: Maps angle (radians) to output x.
        scale_y: Maps wave value to output y magnitude.
        offset_y: Vertical baseline of the wave.
        max_deviation_x: Max symmetric jitter on each sample's x.
        max_deviation_y: Max symmetric jitter on each sample's y.
        num_zones: Landing zones to attempt to place.
        zone_widths: Widths of the (x5, x3, x2) zone variants, in x units.
        step_jitter: Bound on the random step change, as a fraction of the nominal step.
        zone_probability: Chance that a ready zone slot is taken on a given sample.
        seed: Seed for the generator's random source; None draws from the OS.
    """

    num_terms: int = 3
    max_phase: float = 2 * math.pi
    num_samples: int = 100
    scale_x: float = 100.0
    scale_y: float = 100.0
    offset_y: float = 0.0
    max_deviation_x: float = 0.0
    max_deviation_y: float = 0.0
    num_zones: int = 0
    zone_widths: Tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))
    step_jitter: float = DEFAULT_STEP_JITTER
    zone_probability: float = DEFAULT_ZONE_PROBABILITY
    seed: int | None = None

    def __post_init__(self) -> None:
        try:
            widths = tuple(float(w) for w in self.zone_widths)
        except (TypeError, ValueError) as exc:
            raise TerrainConfigError(
                f"zone_widths must be numbers, got {self.zone_widths!r}", field="zone_widths"
            ) from exc
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "zone_widths", widths)
        errors = self.validate()
        if errors:
            raise TerrainConfigError("; ".join(errors), field=errors[0].split(" ", 1)[0])

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "GenerationConfig":
        """Build from a loose mapping; absent or None keys take the defaults.

        Accepts snake_case field names as well as the camelCase option names
        (numTerms, maxPhase, ...).
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise TerrainConfigError(f"unknown option {key!r}", field=key)
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    @property
    def zone_spacing(self) -> float | None:
        """Angular width of one zone slot, or None when no zones are requested."""
        if self.num_zones == 0:
            return None
        return self.max_phase / self.num_zones

    def validate(self) -> list[str]:
        """Return a list of validation errors (empty if valid)."""
        errors = []

        if not _is_int(self.num_terms) or self.num_terms < 1:
            errors.append(f"num_terms must be an integer >= 1, got {self.num_terms!r}")
        if not _is_int(self.num_samples) or self.num_samples < 1:
            errors.append(f"num_samples must be an integer >= 1, got {self.num_samples!r}")
        if not _is_int(self.num_zones) or self.num_zones < 0:
            errors.append(f"num_zones must be an integer >= 0, got {self.num_zones!r}")

        if not (_finite(self.max_phase) and self.max_phase > 0):
            errors.append(f"max_phase must be finite and > 0, got {self.max_phase!r}")
        if not (_finite(self.scale_x) and self.scale_x > 0):
            errors.append(f"scale_x must be finite and > 0, got {self.scale_x!r}")
        for name in ("scale_y", "offset_y"):
            if not _finite(getattr(self, name)):
                errors.append(f"{name} must be finite, got {getattr(self, name)!r}")
        for name in ("max_deviation_x", "max_deviation_y"):
            value = getattr(self, name)
            if not (_finite(value) and value >= 0):
                errors.append(f"{name} must be finite and >= 0, got {value!r}")

        if len(self.zone_widths) != 3:
            errors.append(f"zone_widths must have exactly 3 entries, got {len(self.zone_widths)}")
        elif not all(_finite(w) and w >= 0 for w in self.zone_widths):
            errors.append(f"zone_widths must be finite and >= 0, got {self.zone_widths!r}")

        if not (_finite(self.step_jitter) and 0 <= self.step_jitter < 1):
            errors.append(f"step_jitter must be in [0, 1), got {self.step_jitter!r}")
        if not (_finite(self.zone_probability) and 0 <= self.zone_probability <= 1):
            errors.append(f"zone_probability must be in [0, 1], got {self.zone_probability!r}")

        return errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
