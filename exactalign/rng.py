"""Deterministic linear congruential random generator with skip-ahead."""

from __future__ import annotations

import math
from dataclasses import dataclass

MASK64 = (1 << 64) - 1
MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407

_FLOAT32_MANTISSA_BITS = 24


def _round_to_float32(value: int) -> float:
    """Round a non-negative integer to single precision, ties to even."""
    bits = value.bit_length()
    if bits <= _FLOAT32_MANTISSA_BITS:
        return float(value)
    shift = bits - _FLOAT32_MANTISSA_BITS
    quotient, remainder = divmod(value, 1 << shift)
    half = 1 << (shift - 1)
    if remainder > half or (remainder == half and quotient & 1):
        quotient += 1
    return float(quotient << shift)


def _hash_seed(seed: int) -> int:
    value = seed & MASK64
    value = ((value ^ (value >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    value = ((value ^ (value >> 27)) * 0x94D049BB133111EB) & MASK64
    return value ^ (value >> 31)


@dataclass
class Rng:
    """A 64-bit LCG state; every draw advances it by one step."""

    state: int = 0

    def __post_init__(self) -> None:
        self.state &= MASK64

    @classmethod
    def from_seed(cls, seed: int) -> Rng:
        """Create a generator whose initial state is a hash of ``seed``."""
        return cls(_hash_seed(seed))

    def next(self) -> float:
        """Advance one step and return a uniform number in [0, 1]."""
        self.state = (self.state * MULTIPLIER + INCREMENT) & MASK64
        return math.ldexp(_round_to_float32(self.state), -64)

    def next_normal(self, mu: float, sigma: float) -> float:
        """Advance two steps and return a normal(mu, sigma) sample."""
        u1 = self.next()
        u2 = self.next()
        log_u1 = math.log(u1) if u1 > 0.0 else -math.inf
        z0 = math.sqrt(-2.0 * log_u1) * math.cos(2.0 * math.pi * u2)
        return mu + sigma * z0

    def skip(self, steps: int) -> None:
        """Advance the state by ``steps`` draws in logarithmic time."""
        steps &= MASK64
        cur_mult, cur_plus = MULTIPLIER, INCREMENT
        acc_mult, acc_plus = 1, 0
        while steps:
            if steps & 1:
                acc_mult = (acc_mult * cur_mult) & MASK64
                acc_plus = (acc_plus * cur_mult + cur_plus) & MASK64
            cur_plus = ((cur_mult + 1) * cur_plus) & MASK64
            cur_mult = (cur_mult * cur_mult) & MASK64
            steps >>= 1
        self.state = (acc_mult * self.state + acc_plus) & MASK64

    def copy(self) -> Rng:
        """Return an independent generator with the same state."""
        return Rng(self.state)