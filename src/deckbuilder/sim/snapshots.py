"""Read-only observation models handed to the presentation layer.

Snapshots are frozen copies of the engine state at one instant; mutating
the engine afterwards never changes a snapshot already taken.
"""

from __future__ import annotations

from pydantic import BaseModel

from deckbuilder.ir.cards import CardType
from deckbuilder.ir.enemies import IntentType
from deckbuilder.sim.core.game_state import GamePhase


class PlayerSnapshot(BaseModel):
    model_config = {"frozen": True}

    health: int
    max_health: int
    energy: int
    max_energy: int
    block: int
    vulnerable: int
    weak: int


class EnemySnapshot(BaseModel):
    model_config = {"frozen": True}

    name: str
    health: int
    max_health: int
    block: int
    vulnerable: int
    weak: int
    intent: IntentType | None
    forecast_damage: int | None = None
    """Damage of the upcoming attack; ``None`` unless the intent is attack."""

    color: tuple[float, float, float]


class CardSnapshot(BaseModel):
    model_config = {"frozen": True}

    name: str
    cost: int
    type: CardType
    description: str
    color: tuple[float, float, float]
    playable: bool
    """Whether the player can currently afford the card."""


class GameSnapshot(BaseModel):
    """Everything a renderer needs for one frame."""

    model_config = {"frozen": True}

    phase: GamePhase
    player: PlayerSnapshot
    enemy: EnemySnapshot | None = None
    hand: tuple[CardSnapshot, ...] = ()
    deck_count: int = 0
    discard_count: int = 0
    reward_cards: tuple[CardSnapshot, ...] = ()
    turn: int = 0
    turn_ending: bool = False
    animating: bool = False
    selected_card_index: int | None = None
