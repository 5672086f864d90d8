"""Linear congruential pseudo-random numbers."""

import secrets

LCG_A = 1103515245
LCG_C = 12345
LCG_M = 2147483648


def lcg(x: int) -> int:
    """One step of the generator: ``|(a*x + c) mod -2**31|`` in 32-bit signed math."""
    value = (LCG_A * x + LCG_C) & 0xFFFFFFFF
    if value >= LCG_M:
        value -= 2 * LCG_M
    if value == -LCG_M:
        return 0
    return abs(value)


class Random:
    """A seeded generator whose state is the last value produced."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = secrets.randbits(31) + 2 if seed is None else seed

    def rand(self) -> int:
        """Advance the generator and return the new value."""
        self.seed = lcg(self.seed)
        return self.seed