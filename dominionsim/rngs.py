"""Multi-stream Lehmer random number generator.

The generator keeps 256 independent streams. Each one produces values
uniformly distributed strictly between 0.0 and 1.0, with period
``MODULUS - 1``.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789

_PROMPT = "\nEnter a positive integer seed (9 digits or less) >> "
_RETRY = "\nInput out of range ... try again"


class StreamRandom:
    """A set of 256 Lehmer generator streams, one of which is current.

    ``ask`` is called with a prompt string to read a seed interactively
    when :meth:`put_seed` is given zero; it defaults to :func:`input`.
    """

    def __init__(self, ask: Optional[Callable[[str], str]] = None) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False
        self._ask = ask if ask is not None else input

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
        """Seed stream 0 with ``x`` and derive every other stream from it."""
        q, r = divmod(MODULUS, A256)
        self._initialized = True
        current = self._stream
        self._stream = 0
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            prev = self._seeds[j - 1]
            value = A256 * (prev % q) - r * (prev // q)
            self._seeds[j] = value if value > 0 else value + MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive ``x`` is the state (reduced modulo ``MODULUS``), a
        negative one takes the state from the clock, and zero asks for it.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        if x == 0:
            x = self._read_seed()
        self._seeds[self._stream] = x

    def _read_seed(self) -> int:
        while True:
            reply = self._ask(_PROMPT)
            try:
                value = int(reply.split()[0])
            except (IndexError, ValueError):
                value = 0
            if 0 < value < MODULUS:
                return value
            print(_RETRY)

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo 256) the current one."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_test(self) -> bool:
        """Check the implementation against known reference states."""
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK
        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256