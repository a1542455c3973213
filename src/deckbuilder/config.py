"""Game rule configuration.

Every tunable constant of a play session lives on ``GameConfig``.  The
defaults reproduce the standard ruleset; a JSON file with any subset of the
fields can be loaded with :meth:`GameConfig.from_file`.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Rules for one play session."""

    model_config = {"frozen": True}

    hand_size: int = Field(default=5, ge=0)
    """Cards drawn at the start of every player turn."""

    reward_options: int = Field(default=3, ge=1)
    """Card choices offered after each victory."""

    starting_deck: dict[str, int] = Field(
        default_factory=lambda: {"strike": 5, "defend": 5, "bash": 1}
    )
    """Card id -> number of copies in the opening deck."""

    player_max_health: int = Field(default=100, gt=0)
    player_max_energy: int = Field(default=3, ge=0)

    enemy_defend_block: int = Field(default=5, ge=0)
    """Block an enemy gains when its defend intent resolves."""

    turn_end_delay: float = Field(default=0.5, ge=0.0)
    """Seconds between an end-turn request and its commit."""

    vulnerable_multiplier: float = Field(default=1.5, gt=0.0)
    weak_multiplier: float = Field(default=0.75, gt=0.0)

    @classmethod
    def from_file(cls, path: str | Path) -> GameConfig:
        """Load a config from a JSON file; missing fields keep their defaults."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(raw)
