"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from deckbuilder.sim.content.registry import ContentRegistry
from deckbuilder.sim.core.game_state import CardInstance
from deckbuilder.sim.core.rng import GameRNG


class ScriptedRNG(GameRNG):
    """GameRNG that returns queued values from ``random_int`` first.

    Once the script runs out it falls back to the seeded stream, so a test
    only needs to script the rolls it cares about.
    """

    def __init__(self, values: Sequence[int] = (), seed: int = 0) -> None:
        super().__init__(seed)
        self._values = list(values)

    def push(self, *values: int) -> None:
        self._values.extend(values)

    def random_int(self, low: int, high: int) -> int:
        if self._values:
            value = self._values.pop(0)
            assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
            return value
        return super().random_int(low, high)


@pytest.fixture(scope="module")
def registry() -> ContentRegistry:
    """Module-scoped registry with vanilla content loaded once."""
    reg = ContentRegistry()
    reg.load_vanilla_cards()
    reg.load_vanilla_enemies()
    return reg


@pytest.fixture
def scripted_rng() -> type[ScriptedRNG]:
    """Factory for RNGs with scripted ``random_int`` results."""
    return ScriptedRNG


@pytest.fixture
def make_card(registry: ContentRegistry):
    """Factory for fresh instances of vanilla cards."""

    def _make(card_id: str) -> CardInstance:
        return CardInstance.from_template(registry.get_card(card_id))

    return _make
