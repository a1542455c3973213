"""Damage calculation and application.

Implements the damage pipeline:
    base -> vulnerable multiplier (target) -> weak multiplier (source) -> floor(0)

Then applies damage to the target: block absorbs first, remainder hits health.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from deckbuilder.sim.core.entities import take_damage

if TYPE_CHECKING:
    from deckbuilder.sim.core.entities import Combatant

VULNERABLE_MULTIPLIER = 1.5
WEAK_MULTIPLIER = 0.75


def calculate_damage(
    base: int,
    source: Combatant,
    target: Combatant,
    vulnerable_multiplier: float = VULNERABLE_MULTIPLIER,
    weak_multiplier: float = WEAK_MULTIPLIER,
) -> int:
    """Calculate final damage after status modifiers.

    Pipeline (each multiplier floors the running value):
        1. If target is vulnerable: multiply by 1.5
        2. If source is weak: multiply by 0.75
        3. Floor at 0
    """
    damage = base

    if target.status.is_vulnerable:
        damage = math.floor(damage * vulnerable_multiplier)

    if source.status.is_weak:
        damage = math.floor(damage * weak_multiplier)

    return max(0, int(damage))


def deal_damage(
    source: Combatant,
    target: Combatant,
    base_damage: int,
    vulnerable_multiplier: float = VULNERABLE_MULTIPLIER,
    weak_multiplier: float = WEAK_MULTIPLIER,
) -> int:
    """Scale *base_damage* for both combatants and apply it to *target*.

    Returns the health actually lost by the target.
    """
    final_damage = calculate_damage(
        base_damage, source, target, vulnerable_multiplier, weak_multiplier,
    )
    return take_damage(target, final_damage)
