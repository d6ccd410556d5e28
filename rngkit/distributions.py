"""Normal and exponential variates.

Box–Muller produces normals in pairs. ``NormalSampler`` wraps a bit
generator and owns the one-slot cache for the second value of each pair, so
the generator itself stays a plain bit source and the cache's lifetime is
visible to the caller: drop or ``reset()`` the sampler and the spare is
gone. Two samplers over the same generator keep separate caches.

The four float intrinsics are injected via ``MathOps`` (defaults from
``math``) so tests can pin them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from .prng import BitSource

# Floor for uniforms fed to log(); log(0) is -inf.
_U_FLOOR = 1e-12


@dataclass(frozen=True)
class MathOps:
    sqrt: Callable[[float], float] = math.sqrt
    log: Callable[[float], float] = math.log
    sin: Callable[[float], float] = math.sin
    cos: Callable[[float], float] = math.cos


DEFAULT_MATH = MathOps()


class NormalSampler:
    def __init__(
        self, rng: BitSource, math_ops: MathOps | None = None
    ) -> None:
        self.rng = rng
        self.math = math_ops or DEFAULT_MATH
        self.has_spare = False
        self.spare = 0.0

    def normal(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        """One N(mean, stddev**2) variate.

        Every other call is served from the cache with no draws.
        ``stddev <= 0`` returns ``mean`` and leaves the cache alone.
        """
        if not stddev > 0.0:
            return mean
        if self.has_spare:
            self.has_spare = False
            return mean + stddev * self.spare
        m = self.math
        u1 = max(self.rng.next_f64(), _U_FLOOR)
        u2 = self.rng.next_f64()
        r = m.sqrt(-2.0 * m.log(u1))
        theta = 2.0 * math.pi * u2
        z0 = r * m.cos(theta)
        self.spare = r * m.sin(theta)
        self.has_spare = True
        return mean + stddev * z0

    def reset(self) -> None:
        self.has_spare = False
        self.spare = 0.0


def exponential(
    rng: BitSource, lam: float, math_ops: MathOps | None = None
) -> float:
    """Exponential variate with rate ``lam`` (inverse CDF).

    ``lam <= 0`` returns 0.0 without drawing.
    """
    if not lam > 0.0:
        return 0.0
    m = math_ops or DEFAULT_MATH
    u = max(rng.next_f64(), _U_FLOOR)
    return -m.log(1.0 - u) / lam
