#wave.py

from __future__ import annotations

import logging
import math
import random
from typing import Callable, Iterable, Iterator, Tuple

from world.errors import TerrainConfigError
from world.options import _is_int

logger = logging.getLogger(__name__)

WaveFunction = Callable[[float], float]


class TermSet:
    """Which harmonics are switched on: (sine, cosine) flags per term index, 1-based."""

    __slots__ = ("_flags",)

    def __init__(self, flags: Iterable[Tuple[int, int]]) -> None:
        pairs = []
        for i, pair in enumerate(flags, start=1):
            try:
                s, c = pair
            except (TypeError, ValueError) as exc:
                raise TerrainConfigError(
                    f"term {i} must be a (sine, cosine) pair, got {pair!r}", field="term_set"
                ) from exc
            if not all(_is_int(v) and v in (0, 1) for v in (s, c)):
                raise TerrainConfigError(
                    f"term {i} flags must be 0 or 1, got ({s!r}, {c!r})", field="term_set"
                )
            pairs.append((s, c))
        if not pairs:
            raise TerrainConfigError("term set needs at least one term", field="num_terms")
        self._flags = tuple(pairs)

    @classmethod
    def draw(cls, n: int, rng: random.Random) -> "TermSet":
        """Flip two independent coins per term."""
        if n < 1:
            raise TerrainConfigError(f"num_terms must be >= 1, got {n}", field="num_terms")
        return cls((rng.randint(0, 1), rng.randint(0, 1)) for _ in range(n))

    def __getitem__(self, i: int) -> Tuple[int, int]:
        if not 1 <= i <= len(self._flags):
            raise IndexError(f"term index {i} outside 1..{len(self._flags)}")
        return self._flags[i - 1]

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermSet):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        terms = ", ".join(f"s{i}={s} c{i}={c}" for i, (s, c) in enumerate(self._flags, start=1))
        return f"TermSet({terms})"


def build_wave_function(term_set: TermSet, n: int) -> WaveFunction:
    """Return f(a) = sum over i of s_i*sin(i*a) + c_i*cos(i*a) for i in 1..n.

    A NaN result is logged as a warning and returned unchanged.
    """
    if not 1 <= n <= len(term_set):
        raise TerrainConfigError(
            f"n must be in 1..{len(term_set)} for this term set, got {n}", field="num_terms"
        )
    terms = [(i, *term_set[i]) for i in range(n, 0, -1)]
    sin, cos = math.sin, math.cos

    def wave(a: float) -> float:
        y = 0.0
        for i, s, c in terms:
            y += s * sin(i * a) + c * cos(i * a)
        if math.isnan(y):
            logger.warning("wavefunction returned NaN at a=%r for %r", a, term_set)
        return y

    return wave
