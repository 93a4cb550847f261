"""
Alea pseudo random number generator.

Pure Python implementation of Johannes Baagøe's Alea algorithm. The stream
depends only on the seed, so a mosaic run can be reproduced exactly on any
platform and interpreter.
"""

MASH_START = 0xEFC8249D
TWO_POW_32 = 0x100000000
TWO_POW_MINUS_32 = 2.3283064365386963e-10


def _uint32(n):
    """Truncate to an unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Hash used to turn seed text into the three initial state fractions."""

    def __init__(self):
        self.n = MASH_START

    def __call__(self, data) -> float:
        n = self.n
        for char in str(data):
            n += ord(char)
            h = 0.02519603282416938 * n
            n = _uint32(h)
            h -= n
            h *= n
            n = _uint32(h)
            h -= n
            n += h * TWO_POW_32
        self.n = n
        return _uint32(n) * TWO_POW_MINUS_32


class AleaPRNG:
    """
    Alea generator producing floats in [0, 1).

    Integer seeds are hashed through their decimal representation, so
    ``AleaPRNG(42)`` and ``AleaPRNG("42")`` yield the same stream.
    """

    def __init__(self, seed: int):
        self.call_count = 0

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(seed)
        if self.s2 < 0:
            self.s2 += 1

    def random(self) -> float:
        """Next value in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * TWO_POW_MINUS_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n) from a single draw."""
        if n <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {n}")
        return int(self.random() * n)
