"""Combatant models for the headless card-combat engine.

Player and Enemy are independent Pydantic models.  The behaviour they
share (status bookkeeping and damage resolution) lives in the embedded
``StatusEffects`` value and the module-level :func:`take_damage`, so the
two types never need a common base class.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from deckbuilder.ir.enemies import EnemyTemplate, IntentType


# ---------------------------------------------------------------------------
# StatusEffects
# ---------------------------------------------------------------------------

class StatusEffects(BaseModel):
    """Block and timed statuses carried by every combatant."""

    block: int = Field(default=0, ge=0)
    """Absorbs incoming damage before health."""

    vulnerable: int = Field(default=0, ge=0)
    """Turns remaining; while positive, damage taken is multiplied by 1.5."""

    weak: int = Field(default=0, ge=0)
    """Turns remaining; while positive, damage dealt is multiplied by 0.75."""

    @property
    def is_vulnerable(self) -> bool:
        return self.vulnerable > 0

    @property
    def is_weak(self) -> bool:
        return self.weak > 0


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------

class Player(BaseModel):
    """The player character."""

    health: int = Field(ge=0)
    max_health: int = Field(gt=0)
    energy: int = Field(default=0, ge=0)
    max_energy: int = Field(default=3, ge=0)
    status: StatusEffects = Field(default_factory=StatusEffects)

    @classmethod
    def fresh(cls, max_health: int, max_energy: int) -> Player:
        """Full-health player with a full energy pool."""
        return cls(
            health=max_health,
            max_health=max_health,
            energy=max_energy,
            max_energy=max_energy,
        )

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> int:
        return take_damage(self, amount)


# ---------------------------------------------------------------------------
# Enemy
# ---------------------------------------------------------------------------

class Enemy(BaseModel):
    """A single enemy in combat."""

    enemy_id: str
    """Identifier that ties this instance back to its template."""

    name: str
    health: int = Field(ge=0)
    max_health: int = Field(gt=0)
    damage: int = Field(ge=0)
    """Current base damage.  Raised permanently by the buff intent."""

    buff: int = Field(default=0, ge=0)
    intents: tuple[IntentType, ...] = Field(min_length=1)
    intent: IntentType | None = None
    """Intent for the upcoming enemy turn, rolled by the enemy AI."""

    status: StatusEffects = Field(default_factory=StatusEffects)
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)

    @classmethod
    def from_template(cls, template: EnemyTemplate) -> Enemy:
        """Build a full-health enemy from *template*.  The intent is left
        unset; the enemy AI rolls it."""
        return cls(
            enemy_id=template.id,
            name=template.name,
            health=template.max_health,
            max_health=template.max_health,
            damage=template.damage,
            buff=template.buff,
            intents=template.intents,
            color=template.color,
        )

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> int:
        return take_damage(self, amount)


Combatant = Union[Player, Enemy]


# ---------------------------------------------------------------------------
# Damage resolution
# ---------------------------------------------------------------------------

def take_damage(entity: Combatant, amount: int) -> int:
    """Apply already-modified *amount* damage: block absorbs first, the
    remainder hits health, which floors at 0.

    Vulnerable and weak are not consulted here; callers scale the amount
    with :func:`deckbuilder.sim.mechanics.damage.calculate_damage` first.

    Returns the health actually lost.
    """
    if amount <= 0:
        return 0

    status = entity.status
    if amount <= status.block:
        status.block -= amount
        return 0

    remaining = amount - status.block
    status.block = 0

    hp_lost = min(entity.health, remaining)
    entity.health -= hp_lost
    return hp_lost
