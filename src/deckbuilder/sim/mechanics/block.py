"""Block mechanics -- gain and clear."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deckbuilder.sim.core.entities import Combatant


def gain_block(entity: Combatant, amount: int) -> None:
    """Add *amount* block to an entity.  Block stacks additively."""
    if amount < 0:
        raise ValueError(f"gain_block amount must be >= 0, got {amount}")
    entity.status.block += amount


def clear_block(entity: Combatant) -> None:
    entity.status.block = 0
