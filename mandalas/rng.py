"""Deterministic random source for mandala generation.

A small linear congruential generator seeded from an arbitrary string. The
sequence depends only on the seed and the order of calls, so the same seed
reproduces the same design on every platform.
"""

import math
import struct
from typing import Sequence, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def hash_seed(text: str) -> int:
    """Fold a seed string into a non-negative integer state.

    Each UTF-16 code unit is folded in with ``hash * 31 + unit`` under
    signed 32-bit wraparound; the absolute value of the result is returned.

    Args:
        text: Any string, including the empty string.

    Returns:
        Initial generator state.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    units = struct.unpack(f"<{len(data) // 2}H", data)

    value = 0
    for unit in units:
        value = _to_int32(value * 31 + unit)
    return abs(value)


class SeededRandom:
    """Seeded LCG exposing the subset of ``random.Random`` the generators use."""

    def __init__(self, seed: str = "") -> None:
        """Initialize from a seed string.

        Args:
            seed: Seed text; identical seeds give identical sequences.
        """
        self.state = 0
        self.seed(seed)

    def seed(self, text: str) -> None:
        """Reset the state from a seed string."""
        self.state = hash_seed(text)

    def random(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self.state = (self.state * MULTIPLIER + INCREMENT) % MODULUS
        return self.state / MODULUS

    def randint(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both bounds inclusive.

        Raises:
            InvalidArgument: If low > high.
        """
        if low > high:
            raise InvalidArgument(f"Empty integer range: [{low}, {high}]")
        return math.floor(self.random() * (high - low + 1)) + low

    def uniform(self, a: float, b: float) -> float:
        """Return a float between a and b."""
        return a + (b - a) * self.random()

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly.

        Raises:
            InvalidArgument: If items is empty.
        """
        if len(items) == 0:
            raise InvalidArgument("Cannot choose from an empty sequence")
        return items[self.randint(0, len(items) - 1)]

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a seed-derived permutation of items (Fisher-Yates).

        The input is left untouched.
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result
