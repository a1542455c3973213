"""Content schema for the card-combat engine.

Cards and enemies are represented as frozen Pydantic models that are
parsed from the JSON files under ``deckbuilder/data/vanilla`` and shared
(never mutated) by every runtime instance built from them.
"""

from .cards import CardTemplate, CardType
from .enemies import EnemyTemplate, IntentType

__all__ = [
    # cards
    "CardTemplate",
    "CardType",
    # enemies
    "EnemyTemplate",
    "IntentType",
]
