"""Game state for the headless card-combat engine.

Houses the full mutable state of a play session (``GameState``) plus the
card-pile management logic that drives the draw-discard-reshuffle cycle.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from deckbuilder.ir.cards import CardTemplate, CardType
from deckbuilder.sim.core.entities import Enemy, Player
from deckbuilder.sim.core.rng import GameRNG


def _new_uid() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# CardInstance
# ---------------------------------------------------------------------------

class CardInstance(BaseModel):
    """A single physical card residing in a pile.

    Carries a by-value copy of its template's fields so it never aliases
    the template or another instance.  Each copy has its own ``uid`` so it
    can be tracked across piles even when several copies of the same
    ``template_id`` exist.
    """

    uid: str = Field(default_factory=_new_uid)
    template_id: str
    name: str
    type: CardType
    cost: int = Field(ge=0)
    damage: int | None = None
    block: int | None = None
    vulnerable: int | None = None
    draw: int | None = None
    self_copy: bool = False
    aoe: bool = False
    description: str = ""
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)

    @classmethod
    def from_template(cls, template: CardTemplate) -> CardInstance:
        return cls(
            template_id=template.id,
            name=template.name,
            type=template.type,
            cost=template.cost,
            damage=template.damage,
            block=template.block,
            vulnerable=template.vulnerable,
            draw=template.draw,
            self_copy=template.self_copy,
            aoe=template.aoe,
            description=template.description,
            color=template.color,
        )

    def duplicate(self) -> CardInstance:
        """Return an independent copy of this card with a fresh ``uid``."""
        return self.model_copy(update={"uid": _new_uid()})


# ---------------------------------------------------------------------------
# CardPiles
# ---------------------------------------------------------------------------

class CardPiles(BaseModel):
    """Owns the three card zones: deck, hand and discard.

    Every card instance lives in exactly one of the three lists.  ``draw``
    reshuffles the discard pile back into the deck when the deck runs out
    mid-draw.
    """

    deck: list[CardInstance] = Field(default_factory=list)
    hand: list[CardInstance] = Field(default_factory=list)
    discard: list[CardInstance] = Field(default_factory=list)

    # -- queries -------------------------------------------------------------

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def deck_count(self) -> int:
        return len(self.deck)

    @property
    def discard_count(self) -> int:
        return len(self.discard)

    def all_cards(self) -> list[CardInstance]:
        """Every card across the three zones (deck, hand, discard order)."""
        return [*self.deck, *self.hand, *self.discard]

    # -- shuffling / drawing -------------------------------------------------

    def shuffle_deck_in(self, rng: GameRNG) -> None:
        """Move the discard pile onto the deck, then shuffle the deck."""
        self.deck.extend(self.discard)
        self.discard.clear()
        rng.shuffle(self.deck)

    def draw(self, count: int, rng: GameRNG) -> list[CardInstance]:
        """Draw up to *count* cards from the front of the deck into the hand.

        If the deck runs out mid-draw, the discard pile is shuffled in and
        drawing continues.  Returns the cards actually drawn, which may be
        fewer than *count* when both piles are empty.
        """
        drawn: list[CardInstance] = []
        for _ in range(count):
            if not self.deck:
                if not self.discard:
                    break  # nothing left to draw
                self.shuffle_deck_in(rng)
            card = self.deck.pop(0)
            self.hand.append(card)
            drawn.append(card)
        return drawn

    # -- pile movement -------------------------------------------------------

    def discard_hand(self) -> None:
        """Move every card in the hand to the discard pile, in order."""
        self.discard.extend(self.hand)
        self.hand.clear()

    def take_from_hand(self, index: int) -> CardInstance:
        """Remove and return the hand card at *index*."""
        if not 0 <= index < len(self.hand):
            raise IndexError(f"hand index {index} out of range (hand size {len(self.hand)})")
        return self.hand.pop(index)

    def add_to_discard(self, card: CardInstance) -> None:
        self.discard.append(card)

    def add_to_deck(self, card: CardInstance) -> None:
        self.deck.append(card)


# ---------------------------------------------------------------------------
# GameState
# ---------------------------------------------------------------------------

class GamePhase(str, Enum):
    """Top-level screens of a play session."""

    MENU = "menu"
    COMBAT = "combat"
    REWARDS = "rewards"
    GAMEOVER = "gameover"


class GameState(BaseModel):
    """Full mutable state of one play session."""

    model_config = {"arbitrary_types_allowed": True}

    phase: GamePhase = GamePhase.MENU
    player: Player
    enemy: Enemy | None = None
    """Present only during combat."""

    piles: CardPiles = Field(default_factory=CardPiles)
    reward_cards: list[CardInstance] = Field(default_factory=list)
    """Present only during the rewards phase."""

    turn: int = 0
    """Player turns taken in the current combat."""

    combats_won: int = 0

    turn_ending: bool = False
    """An end-turn request is waiting for its delay to elapse."""

    turn_end_elapsed: float = 0.0

    animation: str | None = None
    """Generic "an effect is animating" flag for the presentation layer."""

    animation_duration: float = 0.0
    animation_elapsed: float = 0.0

    selected_card_index: int | None = None
    """Hand index of the most recently played card."""

    rng: Any = Field(default=None, exclude=True)
    """Session ``GameRNG``.  Excluded from serialization."""

    # -- queries -------------------------------------------------------------

    @property
    def is_animating(self) -> bool:
        return self.animation is not None

    # -- deck manager shortcuts ----------------------------------------------

    def draw_cards(self, count: int) -> list[CardInstance]:
        return self.piles.draw(count, self.rng)

    def shuffle_deck(self) -> None:
        self.piles.shuffle_deck_in(self.rng)
