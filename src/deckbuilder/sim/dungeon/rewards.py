"""Card reward generation after a won combat.

Each option is an independent uniform draw over every registered card
template, so the same card may be offered more than once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deckbuilder.sim.core.game_state import CardInstance
from deckbuilder.sim.core.rng import GameRNG

if TYPE_CHECKING:
    from deckbuilder.sim.content.registry import ContentRegistry


def generate_card_reward(
    registry: ContentRegistry,
    rng: GameRNG,
    count: int = 3,
) -> list[CardInstance]:
    """Generate *count* card reward choices, sampled with replacement.

    Parameters
    ----------
    registry:
        Content registry providing the card templates.
    rng:
        Seeded RNG for deterministic selection.
    count:
        Number of choices to offer.
    """
    templates = registry.all_cards()
    if not templates:
        return []
    return [
        CardInstance.from_template(rng.random_choice(templates))
        for _ in range(count)
    ]
