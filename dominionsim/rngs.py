"""Multi-stream Lehmer random number generator.

The generator returns values uniformly distributed strictly between 0.0
and 1.0, with period ``MODULUS - 1``. It offers ``STREAMS`` independent
streams. ``plant_seeds`` seeds all of them from one value.
"""

from __future__ import annotations

import math
import time

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789


class RandomStreams:
    """A set of ``STREAMS`` Lehmer generators, one of which is current."""

    def __init__(self) -> None:
        self._seeds = [0] * STREAMS
        self._seeds[0] = DEFAULT
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the current stream."""
        return self._stream

    def random(self) -> float:
        """Advance the current stream and return a value in (0, 1)."""
        q, r = divmod(MODULUS, MULTIPLIER)
        seed = self._seeds[self._stream]
        t = MULTIPLIER * (seed % q) - r * (seed // q)
        self._seeds[self._stream] = t if t > 0 else t + MODULUS
        return self._seeds[self._stream] / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and every other stream from its predecessor."""
        q, r = divmod(MODULUS, A256)
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            prev = self._seeds[j - 1]
            value = A256 * (prev % q) - r * (prev // q)
            self._seeds[j] = value if value > 0 else value + MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive ``x`` is the state (reduced modulo ``MODULUS``), a negative
        one takes the state from the system clock, and zero asks for a seed
        on standard input until a valid one is given.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        if x == 0:
            x = self._prompt_seed()
        self._seeds[self._stream] = x

    @staticmethod
    def _prompt_seed() -> int:
        while True:
            answer = input("\nEnter a positive integer seed (9 digits or less) >> ")
            try:
                value = int(answer.strip())
            except ValueError:
                value = 0
            if 0 < value < MODULUS:
                return value
            print("\nInput out of range ... try again")

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo ``STREAMS``) current."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_test(self) -> bool:
        """Check the generator against its known reference values."""
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK
        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256


def find_value(seed: int, target: int, limit: int | None = None) -> int | None:
    """Draw from stream 1 seeded with ``seed`` until ``floor(u * 1e9) == target``.

    Returns the number of draws it took, or ``None`` if ``limit`` draws
    passed without a match. With no limit the search runs until it matches.
    """
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    draws = 0
    while limit is None or draws < limit:
        draws += 1
        if math.floor(rng.random() * 1000000000) == target:
            return draws
    return None