"""Telemetry data models for per-combat and per-session statistics.

These lightweight dataclasses capture what a headless session did without
storing the whole state history:

- **BattleTelemetry**: outcome, damage dealt/taken, cards played, turn count.
- **RunTelemetry**: seed, ordered list of combat results, final outcome.

Both classes are plain ``dataclass`` instances (not Pydantic models) to
keep telemetry collection cheap during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BattleTelemetry:
    """Stats from a single combat encounter.

    Attributes
    ----------
    enemy_id:
        Template id of the enemy fought.
    result:
        ``"win"``, ``"loss"``, or ``"unfinished"`` if the turn cap was hit.
    turns:
        Number of player turns ended.
    player_hp_start:
        Player health when the combat began.
    player_hp_end:
        Player health when the combat ended (0 on loss).
    damage_dealt:
        Total health removed from the enemy.
    block_gained:
        Total block gained by the player from cards.
    cards_played:
        Total number of cards played.
    cards_played_by_id:
        Breakdown of cards played: ``template_id -> play count``.
    """

    enemy_id: str
    player_hp_start: int
    result: str = "unfinished"
    turns: int = 0
    player_hp_end: int = 0
    damage_dealt: int = 0
    block_gained: int = 0
    cards_played: int = 0
    cards_played_by_id: dict[str, int] = field(default_factory=dict)
    enemy_intents: list[str] = field(default_factory=list)
    """Enemy intent shown at the start of each player turn."""

    @property
    def hp_lost(self) -> int:
        return self.player_hp_start - self.player_hp_end


@dataclass
class RunTelemetry:
    """Stats from a full play session.

    Attributes
    ----------
    seed:
        The master RNG seed used for this session.
    battles:
        Ordered list of combat telemetry, one per encounter.
    final_result:
        ``"loss"`` if the player died, ``"survived"`` if the combat cap was
        reached alive, ``"unfinished"`` if a combat hit the turn cap.
    cards_in_deck:
        Template ids of every card owned at the end of the session.
    rewards_taken:
        Template ids of the reward cards picked, in order.
    """

    seed: int
    battles: list[BattleTelemetry] = field(default_factory=list)
    final_result: str = "unfinished"
    cards_in_deck: list[str] = field(default_factory=list)
    rewards_taken: list[str] = field(default_factory=list)

    @property
    def combats_won(self) -> int:
        return sum(1 for b in self.battles if b.result == "win")
