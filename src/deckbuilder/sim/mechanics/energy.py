"""Energy system -- reset, affordability and spending.

Energy rules:
    - The player starts each turn with their max energy.
    - Playing a card spends its cost from the energy pool.
    - Energy never goes negative and does not carry over between turns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deckbuilder.sim.core.entities import Player


def reset_energy(player: Player) -> None:
    """Refill the player's energy to ``max_energy``."""
    player.energy = player.max_energy


def can_afford(player: Player, cost: int) -> bool:
    return player.energy >= cost


def spend_energy(player: Player, amount: int) -> None:
    """Pay *amount* from the energy pool, flooring at zero."""
    if amount < 0:
        raise ValueError(f"spend_energy amount must be >= 0, got {amount}")
    player.energy = max(0, player.energy - amount)
