"""Search a generator stream for a given scaled value."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .rngs import StreamRandom

SCALE = 1_000_000_000


def find_value(seed: int, target: int) -> int:
    """Draw from stream 1 seeded with ``seed`` until ``target`` comes up.

    Each draw is scaled to an integer in ``[0, SCALE)``. Returns how many
    draws it took.
    """
    if not 0 <= target < SCALE:
        raise ValueError(f"target must be in [0, {SCALE}), got {target}")
    rng = StreamRandom()
    rng.select_stream(1)
    rng.put_seed(seed)
    draws = 0
    while True:
        draws += 1
        if int(rng.random() * SCALE) == target:
            return draws


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: ``rt SEED TARGET``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Not enough inputs:  seed target")
        return 1
    try:
        seed, target = int(args[0]), int(args[1])
        find_value(seed, target)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Found the bug!")
    return 0


if __name__ == "__main__":
    sys.exit(main())