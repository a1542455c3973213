"""Seeded random number generator for deterministic combat simulation.

Wraps Python's random.Random to provide reproducible randomness.  Every
random decision the engine makes (deck shuffles, enemy selection, intent
rolls, card rewards) goes through ``random_int`` so that a test can
substitute a scripted source and replay an exact sequence.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element from a non-empty sequence."""
        if not seq:
            raise ValueError("random_choice requires a non-empty sequence")
        return seq[self.random_int(0, len(seq) - 1)]

    def shuffle(self, lst: list[T]) -> None:
        """Shuffle *lst* in-place (Fisher-Yates).

        Walks from the last index down to 1 and swaps each slot with a
        uniformly chosen index in ``[0, i]``.
        """
        for i in range(len(lst) - 1, 0, -1):
            j = self.random_int(0, i)
            lst[i], lst[j] = lst[j], lst[i]

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        Forking with the same *name* always produces the same child seed,
        so sub-systems (``"engine"``, ``"agent"``) each get their own
        independent random stream.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return GameRNG(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
