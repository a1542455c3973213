"""Status effect lifecycle -- apply and decay vulnerable / weak.

Both statuses count turns remaining.  Applications stack additively and
each decays by one per turn of the owning combatant, flooring at zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deckbuilder.sim.core.entities import Combatant


def apply_vulnerable(entity: Combatant, turns: int) -> None:
    if turns < 0:
        raise ValueError(f"apply_vulnerable turns must be >= 0, got {turns}")
    entity.status.vulnerable += turns


def apply_weak(entity: Combatant, turns: int) -> None:
    if turns < 0:
        raise ValueError(f"apply_weak turns must be >= 0, got {turns}")
    entity.status.weak += turns


def decay_statuses(entity: Combatant) -> None:
    """Tick vulnerable and weak down by one turn each (floor 0)."""
    status = entity.status
    if status.vulnerable > 0:
        status.vulnerable -= 1
    if status.weak > 0:
        status.weak -= 1
