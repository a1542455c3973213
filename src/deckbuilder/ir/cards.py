"""Card templates -- the immutable definitions every card instance is built from."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CardType(str, Enum):
    """The two card types the engine resolves."""

    ATTACK = "attack"
    SKILL = "skill"


class CardTemplate(BaseModel):
    """Complete definition of a single card, loaded once at startup.

    Every optional effect is a named field; ``None`` (or ``False`` for the
    flags) means the card does not have that effect.
    """

    model_config = {"frozen": True}

    id: str
    """Unique identifier used for cross-references (e.g. ``"pommel_strike"``)."""

    name: str
    """Display name shown on the card."""

    type: CardType

    cost: int = Field(ge=0)
    """Energy cost to play."""

    damage: int | None = Field(default=None, ge=0)
    """Damage dealt to the current enemy (attacks only)."""

    block: int | None = Field(default=None, ge=0)
    """Block granted to the player."""

    vulnerable: int | None = Field(default=None, ge=0)
    """Turns of Vulnerable applied to the enemy hit by this attack."""

    draw: int | None = Field(default=None, ge=0)
    """Cards drawn after the card resolves."""

    self_copy: bool = False
    """If True a fresh copy of the card is added to the discard pile on play."""

    aoe: bool = False
    """Declared area-of-effect.  Combat only ever has one enemy, so this is
    carried as data and resolved against that single enemy."""

    description: str = ""
    """Card body text."""

    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    """RGB display colour, each channel in ``[0, 1]``."""
