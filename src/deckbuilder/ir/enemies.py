"""Enemy templates -- stat blocks an ``Enemy`` is instantiated from at combat start."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class IntentType(str, Enum):
    """Actions an enemy can telegraph for its next turn."""

    ATTACK = "attack"
    DEFEND = "defend"
    BUFF = "buff"


class EnemyTemplate(BaseModel):
    """Complete definition of a single enemy type."""

    model_config = {"frozen": True}

    id: str
    name: str
    max_health: int = Field(gt=0)
    damage: int = Field(ge=0)
    """Base damage of the attack intent."""

    buff: int = Field(default=0, ge=0)
    """Permanent base-damage gain each time the buff intent resolves."""

    intents: tuple[IntentType, ...] = Field(min_length=1)
    """Fixed, ordered set of intents the AI rolls from."""

    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
