"""Combat engine -- the state machine behind a play session.

The engine is the only entry point for external intents.  It owns the
phase transitions::

    menu -> combat -> rewards -> combat -> ...
    combat -> gameover -> menu

and delegates card movement to ``CardPiles``, effect resolution to
``CardInterpreter`` and enemy turns to ``EnemyAI``.  Every intent returns
an :class:`IntentResult`; a rejected intent leaves the state untouched.

Usage::

    engine = CombatEngine.new_session(registry, GameRNG(seed=7))
    engine.start_game()
    engine.play_card(0)
    engine.request_end_turn()
    engine.advance_time(0.6)
    frame = engine.snapshot()
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from deckbuilder.config import GameConfig
from deckbuilder.sim.core.entities import Player
from deckbuilder.sim.core.game_state import CardInstance, GamePhase, GameState
from deckbuilder.sim.dungeon.rewards import generate_card_reward
from deckbuilder.sim.enemy_ai import EnemyAI, EnemyTurnOutcome
from deckbuilder.sim.interpreter import CardInterpreter, PlayOutcome
from deckbuilder.sim.mechanics.block import clear_block
from deckbuilder.sim.mechanics.energy import reset_energy
from deckbuilder.sim.mechanics.status_effects import decay_statuses
from deckbuilder.sim.snapshots import (
    CardSnapshot,
    EnemySnapshot,
    GameSnapshot,
    PlayerSnapshot,
)

if TYPE_CHECKING:
    from deckbuilder.sim.content.registry import ContentRegistry
    from deckbuilder.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)


class IntentResult(str, Enum):
    """Outcome of an external intent."""

    OK = "ok"
    WRONG_PHASE = "wrong_phase"
    """The intent is not valid in the current phase."""

    INVALID_INDEX = "invalid_index"
    UNAFFORDABLE = "unaffordable"
    PENDING = "pending"
    """An end-turn request is already waiting to commit.  Card plays are
    refused too until it does, so the hand is frozen during the delay."""

    PLAYER_DEFEATED = "player_defeated"
    """The session's player is dead; only a new session can be started."""

    @property
    def accepted(self) -> bool:
        return self is IntentResult.OK


class CombatEngine:
    """Drives one play session through its phases.

    Parameters
    ----------
    state:
        The session aggregate.  Its ``rng`` is used for every random
        decision the engine makes.
    registry:
        Card and enemy templates for spawning enemies and rolling rewards.
    config:
        Session rules.
    """

    def __init__(
        self,
        state: GameState,
        registry: ContentRegistry,
        config: GameConfig | None = None,
    ) -> None:
        if state.rng is None:
            raise ValueError("GameState.rng must be set before building an engine")
        self.state = state
        self.registry = registry
        self.config = config or GameConfig()
        self.interpreter = CardInterpreter(self.config)
        self.enemy_ai = EnemyAI(state.rng, self.config)

    @classmethod
    def new_session(
        cls,
        registry: ContentRegistry,
        rng: GameRNG,
        config: GameConfig | None = None,
    ) -> CombatEngine:
        """Build a fresh session in the menu phase with a shuffled starter deck."""
        config = config or GameConfig()
        deck = [
            CardInstance.from_template(registry.get_card(card_id))
            for card_id in registry.get_starter_deck(config.starting_deck)
        ]
        state = GameState(
            player=Player.fresh(config.player_max_health, config.player_max_energy),
            rng=rng,
        )
        state.piles.deck.extend(deck)
        state.shuffle_deck()
        return cls(state, registry, config)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def _reject(self, intent: str, result: IntentResult) -> IntentResult:
        logger.debug("Rejected %s in phase %s: %s", intent, self.state.phase.value, result.value)
        return result

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def start_game(self) -> IntentResult:
        """Leave the menu for the first combat.

        A session whose player has been defeated cannot be restarted;
        build a new one with :meth:`new_session` instead.
        """
        if self.state.phase is not GamePhase.MENU:
            return self._reject("start_game", IntentResult.WRONG_PHASE)
        if self.state.player.is_dead:
            return self._reject("start_game", IntentResult.PLAYER_DEFEATED)
        self.start_combat()
        return IntentResult.OK

    def play_card(self, index: int) -> IntentResult:
        """Play the hand card at *index*.

        The card leaves the hand before its effects resolve and lands on
        the discard pile afterwards, so its own draw effect can never
        reshuffle it back into the deck.
        """
        state = self.state
        if state.phase is not GamePhase.COMBAT:
            return self._reject("play_card", IntentResult.WRONG_PHASE)
        if state.turn_ending:
            return self._reject("play_card", IntentResult.PENDING)
        if not 0 <= index < state.piles.hand_size:
            return self._reject("play_card", IntentResult.INVALID_INDEX)

        card = state.piles.hand[index]
        if not self.interpreter.can_play(card, state.player):
            return self._reject("play_card", IntentResult.UNAFFORDABLE)

        state.piles.take_from_hand(index)
        state.selected_card_index = index
        outcome = self.interpreter.play_card(card, state)
        state.piles.add_to_discard(card)
        logger.debug("Played %s (energy %d)", card.name, state.player.energy)

        if outcome is PlayOutcome.LETHAL:
            self.end_combat()
        return IntentResult.OK

    def request_end_turn(self) -> IntentResult:
        state = self.state
        if state.phase is not GamePhase.COMBAT:
            return self._reject("request_end_turn", IntentResult.WRONG_PHASE)
        if state.turn_ending:
            return self._reject("request_end_turn", IntentResult.PENDING)
        state.turn_ending = True
        state.turn_end_elapsed = 0.0
        return IntentResult.OK

    def advance_time(self, dt: float) -> bool:
        """Advance the external clock by *dt* seconds.

        Ticks the animation timer and, during combat, the pending end-turn
        delay.  Returns True when this tick committed an end of turn.
        """
        if dt < 0:
            raise ValueError(f"advance_time dt must be >= 0, got {dt}")
        state = self.state

        if state.animation is not None:
            state.animation_elapsed += dt
            if state.animation_elapsed > state.animation_duration:
                state.animation = None
                state.animation_elapsed = 0.0

        if state.phase is GamePhase.COMBAT and state.turn_ending:
            state.turn_end_elapsed += dt
            if state.turn_end_elapsed > self.config.turn_end_delay:
                state.turn_ending = False
                state.turn_end_elapsed = 0.0
                self.end_turn()
                return True
        return False

    def pick_reward(self, index: int) -> IntentResult:
        """Add a copy of reward card *index* to the deck and start the next combat."""
        state = self.state
        if state.phase is not GamePhase.REWARDS:
            return self._reject("pick_reward", IntentResult.WRONG_PHASE)
        if not 0 <= index < len(state.reward_cards):
            return self._reject("pick_reward", IntentResult.INVALID_INDEX)

        card = state.reward_cards[index].duplicate()
        state.piles.add_to_deck(card)
        state.shuffle_deck()
        logger.info("Added %s to the deck (%d cards)", card.name, len(state.piles.all_cards()))
        self.start_combat()
        return IntentResult.OK

    def skip_reward(self) -> IntentResult:
        if self.state.phase is not GamePhase.REWARDS:
            return self._reject("skip_reward", IntentResult.WRONG_PHASE)
        logger.info("Skipped card reward")
        self.start_combat()
        return IntentResult.OK

    def acknowledge_game_over(self) -> IntentResult:
        """Return to the menu.  The caller starts a new run with
        :meth:`new_session`; this state is not reset in place."""
        if self.state.phase is not GamePhase.GAMEOVER:
            return self._reject("acknowledge_game_over", IntentResult.WRONG_PHASE)
        self.state.phase = GamePhase.MENU
        return IntentResult.OK

    def start_animation(self, name: str, duration: float) -> None:
        """Raise the generic animation flag for *duration* seconds."""
        if duration < 0:
            raise ValueError(f"animation duration must be >= 0, got {duration}")
        self.state.animation = name
        self.state.animation_duration = duration
        self.state.animation_elapsed = 0.0

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_combat(self) -> None:
        """Spawn a random enemy, refill the player and draw the opening hand."""
        state = self.state
        templates = self.registry.all_enemies()
        if not templates:
            raise ValueError("Cannot start combat: no enemy templates registered")

        reset_energy(state.player)
        clear_block(state.player)
        state.enemy = self.enemy_ai.spawn(state.rng.random_choice(templates))
        state.reward_cards = []
        state.turn_ending = False
        state.turn_end_elapsed = 0.0
        state.selected_card_index = None
        state.turn = 1
        state.phase = GamePhase.COMBAT
        state.draw_cards(self.config.hand_size)
        logger.info("Combat started against %s (intent %s)", state.enemy.name, state.enemy.intent.value)

    def end_turn(self) -> None:
        """Commit the end of the player's turn and run the enemy's turn."""
        state = self.state
        player = state.player

        clear_block(player)
        state.piles.discard_hand()

        if state.enemy is not None:
            outcome = self.enemy_ai.take_turn(state.enemy, state)
            if outcome is EnemyTurnOutcome.PLAYER_DEFEATED:
                self.game_over()
                return

        reset_energy(player)
        decay_statuses(player)
        state.turn += 1
        state.draw_cards(self.config.hand_size)

    def end_combat(self) -> None:
        """Victory: move to the rewards phase and roll the card choices."""
        state = self.state
        logger.info("Defeated %s on turn %d", state.enemy.name if state.enemy else "enemy", state.turn)
        state.piles.discard_hand()
        state.enemy = None
        state.turn_ending = False
        state.turn_end_elapsed = 0.0
        state.combats_won += 1
        state.reward_cards = generate_card_reward(
            self.registry, state.rng, self.config.reward_options,
        )
        state.phase = GamePhase.REWARDS

    def game_over(self) -> None:
        state = self.state
        logger.info("Player defeated after %d combat(s) won", state.combats_won)
        state.turn_ending = False
        state.turn_end_elapsed = 0.0
        state.phase = GamePhase.GAMEOVER

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        """Freeze the observable state for the presentation layer."""
        state = self.state
        player = state.player

        enemy_snap: EnemySnapshot | None = None
        if state.enemy is not None:
            enemy = state.enemy
            enemy_snap = EnemySnapshot(
                name=enemy.name,
                health=enemy.health,
                max_health=enemy.max_health,
                block=enemy.status.block,
                vulnerable=enemy.status.vulnerable,
                weak=enemy.status.weak,
                intent=enemy.intent,
                forecast_damage=self.enemy_ai.forecast_damage(enemy, player),
                color=enemy.color,
            )

        return GameSnapshot(
            phase=state.phase,
            player=PlayerSnapshot(
                health=player.health,
                max_health=player.max_health,
                energy=player.energy,
                max_energy=player.max_energy,
                block=player.status.block,
                vulnerable=player.status.vulnerable,
                weak=player.status.weak,
            ),
            enemy=enemy_snap,
            hand=tuple(self._card_snapshot(c) for c in state.piles.hand),
            deck_count=state.piles.deck_count,
            discard_count=state.piles.discard_count,
            reward_cards=tuple(self._card_snapshot(c) for c in state.reward_cards),
            turn=state.turn,
            turn_ending=state.turn_ending,
            animating=state.is_animating,
            selected_card_index=state.selected_card_index,
        )

    def _card_snapshot(self, card: CardInstance) -> CardSnapshot:
        return CardSnapshot(
            name=card.name,
            cost=card.cost,
            type=card.type,
            description=card.description,
            color=card.color,
            playable=self.interpreter.can_play(card, self.state.player),
        )
