"""Session runner -- drives a ``CombatEngine`` headlessly with a play agent.

Provides two classes:

- **SessionRunner**: plays one session (a chain of combats and rewards)
  through the engine's public intents, exactly as a presentation layer
  would, and records telemetry.
- **BatchRunner**: runs many seeded sessions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deckbuilder.config import GameConfig
from deckbuilder.sim.core.game_state import GamePhase
from deckbuilder.sim.core.rng import GameRNG
from deckbuilder.sim.engine import CombatEngine
from deckbuilder.sim.play_agents.base import PlayAgent
from deckbuilder.sim.play_agents.random_agent import RandomAgent
from deckbuilder.sim.telemetry import BattleTelemetry, RunTelemetry

if TYPE_CHECKING:
    from deckbuilder.sim.content.registry import ContentRegistry
    from deckbuilder.sim.core.entities import Enemy

logger = logging.getLogger(__name__)

_MAX_TURNS = 200
_TICK_SECONDS = 0.1


class SessionRunner:
    """Plays one session from the menu until death or the combat cap.

    Parameters
    ----------
    registry:
        The content registry with all game data loaded.
    agent:
        The play agent making decisions.
    rng:
        Master RNG for the session.  Forked for the engine.
    config:
        Session rules.
    max_combats:
        Stop after this many combats even if the player is alive.
    tick:
        Seconds per simulated clock tick while an end of turn is pending.
    """

    def __init__(
        self,
        registry: ContentRegistry,
        agent: PlayAgent,
        rng: GameRNG,
        config: GameConfig | None = None,
        max_combats: int = 10,
        tick: float = _TICK_SECONDS,
    ) -> None:
        if tick <= 0:
            raise ValueError(f"tick must be > 0, got {tick}")
        self.registry = registry
        self.agent = agent
        self.rng = rng
        self.config = config or GameConfig()
        self.max_combats = max_combats
        self.tick = tick

    def run_session(self) -> RunTelemetry:
        """Play a full session and return telemetry."""
        engine = CombatEngine.new_session(
            self.registry, self.rng.fork("engine"), self.config,
        )
        telemetry = RunTelemetry(seed=self.rng.seed)

        engine.start_game()
        while len(telemetry.battles) < self.max_combats:
            battle = self._run_combat(engine)
            telemetry.battles.append(battle)

            if battle.result != "win":
                telemetry.final_result = battle.result
                break
            if len(telemetry.battles) >= self.max_combats:
                telemetry.final_result = "survived"
                break
            self._take_reward(engine, telemetry)

        state = engine.state
        telemetry.cards_in_deck = [c.template_id for c in state.piles.all_cards()]
        logger.info(
            "Session seed=%d finished: %s after %d combat(s)",
            telemetry.seed, telemetry.final_result, len(telemetry.battles),
        )
        return telemetry

    # ------------------------------------------------------------------
    # Combat loop
    # ------------------------------------------------------------------

    def _run_combat(self, engine: CombatEngine) -> BattleTelemetry:
        state = engine.state
        enemy = state.enemy
        battle = BattleTelemetry(
            enemy_id=enemy.enemy_id if enemy else "",
            player_hp_start=state.player.health,
        )

        while state.phase is GamePhase.COMBAT and battle.turns < _MAX_TURNS:
            if enemy is not None and enemy.intent is not None:
                battle.enemy_intents.append(enemy.intent.value)
            self._play_turn(engine, battle, enemy)
            if state.phase is not GamePhase.COMBAT:
                break

            engine.request_end_turn()
            while not engine.advance_time(self.tick):
                pass
            battle.turns += 1

        if state.phase is GamePhase.REWARDS:
            battle.result = "win"
        elif state.phase is GamePhase.GAMEOVER:
            battle.result = "loss"
        battle.player_hp_end = state.player.health
        return battle

    def _play_turn(
        self,
        engine: CombatEngine,
        battle: BattleTelemetry,
        enemy: Enemy | None,
    ) -> None:
        state = engine.state
        while state.phase is GamePhase.COMBAT:
            playable = [
                i for i, card in enumerate(state.piles.hand)
                if engine.interpreter.can_play(card, state.player)
            ]
            choice = self.agent.choose_card_to_play(engine.snapshot(), playable)
            if choice is None:
                return

            card = state.piles.hand[choice] if 0 <= choice < state.piles.hand_size else None
            enemy_hp = enemy.health if enemy is not None else 0
            block_before = state.player.status.block

            result = engine.play_card(choice)
            if not result.accepted:
                logger.debug("Agent choice %d rejected (%s); ending turn", choice, result.value)
                return

            battle.cards_played += 1
            battle.cards_played_by_id[card.template_id] = (
                battle.cards_played_by_id.get(card.template_id, 0) + 1
            )
            if enemy is not None:
                battle.damage_dealt += enemy_hp - enemy.health
            battle.block_gained += max(0, state.player.status.block - block_before)

    # ------------------------------------------------------------------
    # Rewards
    # ------------------------------------------------------------------

    def _take_reward(self, engine: CombatEngine, telemetry: RunTelemetry) -> None:
        state = engine.state
        deck_ids = [c.template_id for c in state.piles.all_cards()]
        frame = engine.snapshot()
        choice = self.agent.choose_card_reward(frame.reward_cards, deck_ids)

        if choice is not None:
            picked = state.reward_cards[choice] if 0 <= choice < len(state.reward_cards) else None
            if engine.pick_reward(choice).accepted and picked is not None:
                telemetry.rewards_taken.append(picked.template_id)
                return
        engine.skip_reward()


# =====================================================================
# BatchRunner
# =====================================================================

class BatchRunner:
    """Runs many seeded sessions."""

    def __init__(
        self,
        registry: ContentRegistry,
        agent_class: type[PlayAgent] = RandomAgent,
        config: GameConfig | None = None,
    ) -> None:
        self.registry = registry
        self.agent_class = agent_class
        self.config = config or GameConfig()

    def run_batch(
        self,
        n_runs: int,
        base_seed: int = 42,
        max_combats: int = 10,
    ) -> list[RunTelemetry]:
        """Run *n_runs* sessions with seeds ``base_seed .. base_seed + n_runs - 1``."""
        results: list[RunTelemetry] = []
        for seed in range(base_seed, base_seed + n_runs):
            rng = GameRNG(seed)
            try:
                agent = self.agent_class(rng=rng.fork("agent"))  # type: ignore[call-arg]
            except TypeError:
                agent = self.agent_class()  # type: ignore[call-arg]
            runner = SessionRunner(
                self.registry, agent, rng, self.config, max_combats=max_combats,
            )
            results.append(runner.run_session())
        return results
