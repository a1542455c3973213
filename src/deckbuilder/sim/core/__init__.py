"""Core simulation primitives for the card-combat engine."""

from deckbuilder.sim.core.entities import (
    Combatant,
    Enemy,
    Player,
    StatusEffects,
    take_damage,
)
from deckbuilder.sim.core.game_state import (
    CardInstance,
    CardPiles,
    GamePhase,
    GameState,
)
from deckbuilder.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # entities
    "StatusEffects",
    "Player",
    "Enemy",
    "Combatant",
    "take_damage",
    # game_state
    "CardInstance",
    "CardPiles",
    "GamePhase",
    "GameState",
]
