"""Core combat mechanics for the card-combat engine.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from deckbuilder.sim.mechanics import (
        calculate_damage, deal_damage,
        gain_block, clear_block,
        reset_energy, can_afford, spend_energy,
        apply_vulnerable, apply_weak, decay_statuses,
    )
"""

# -- damage ------------------------------------------------------------------
from .damage import calculate_damage, deal_damage

# -- block -------------------------------------------------------------------
from .block import clear_block, gain_block

# -- energy ------------------------------------------------------------------
from .energy import can_afford, reset_energy, spend_energy

# -- status effects ----------------------------------------------------------
from .status_effects import apply_vulnerable, apply_weak, decay_statuses

__all__ = [
    # damage
    "calculate_damage",
    "deal_damage",
    # block
    "gain_block",
    "clear_block",
    # energy
    "reset_energy",
    "can_afford",
    "spend_energy",
    # status effects
    "apply_vulnerable",
    "apply_weak",
    "decay_statuses",
]
