"""Random action agent -- picks cards uniformly at random.

The ``RandomAgent`` is the simplest possible play agent.  It lets us
verify that the full session loop works end-to-end through the engine's
public intents.

Behaviour:
    - Each time the agent is asked to play a card, there is a 10 % chance
      it will choose to end the turn early (simulating "pass").
    - Otherwise it picks a random card from the playable set.
    - For card rewards it picks a random card (never skips).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deckbuilder.sim.core.rng import GameRNG
from deckbuilder.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from deckbuilder.sim.snapshots import CardSnapshot, GameSnapshot


class RandomAgent(PlayAgent):
    """Agent that plays random affordable cards each turn.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    end_turn_chance:
        Probability (0.0 -- 1.0) that the agent voluntarily ends the turn
        instead of playing another card.  Default is 0.10 (10 %).
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        end_turn_chance: float = 0.10,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._end_turn_chance = end_turn_chance

    # ------------------------------------------------------------------
    # PlayAgent interface
    # ------------------------------------------------------------------

    def choose_card_to_play(
        self,
        frame: GameSnapshot,
        playable: list[int],
    ) -> int | None:
        """Pick a random playable card, with a chance to end the turn early."""
        if not playable:
            return None

        if self._rng.random_float() < self._end_turn_chance:
            return None

        return self._rng.random_choice(playable)

    def choose_card_reward(
        self,
        cards: tuple[CardSnapshot, ...],
        deck: list[str],
    ) -> int | None:
        """Always pick a random card from the reward options."""
        if not cards:
            return None
        return self._rng.random_int(0, len(cards) - 1)
