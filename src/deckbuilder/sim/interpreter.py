"""Card interpreter -- bridge between card instances and simulation mechanics.

Reads the effect fields of a ``CardInstance`` and dispatches to the
mechanics functions in a fixed order:

    1. damage (+ vulnerable) against the current enemy
    2. block for the player
    3. card draw
    4. self-copy into the discard pile
    5. energy payment

A lethal hit stops the pipeline after step 1.

Usage::

    from deckbuilder.sim.interpreter import CardInterpreter

    interp = CardInterpreter(config)
    if interp.can_play(card, state.player):
        outcome = interp.play_card(card, state)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from deckbuilder.config import GameConfig
from deckbuilder.ir.cards import CardType
from deckbuilder.sim.mechanics.block import gain_block
from deckbuilder.sim.mechanics.damage import deal_damage
from deckbuilder.sim.mechanics.energy import can_afford, spend_energy
from deckbuilder.sim.mechanics.status_effects import apply_vulnerable

if TYPE_CHECKING:
    from deckbuilder.sim.core.entities import Player
    from deckbuilder.sim.core.game_state import CardInstance, GameState

logger = logging.getLogger(__name__)


class PlayOutcome(str, Enum):
    """How a card resolution finished."""

    RESOLVED = "resolved"
    """Every effect applied and the cost was paid."""

    LETHAL = "lethal"
    """The attack killed the enemy; later effects and the cost were skipped."""


class CardInterpreter:
    """Resolves card effects against a ``GameState``.

    The interpreter is stateless between calls -- all mutable state lives in
    the ``GameState`` that is threaded through every resolution.

    Parameters
    ----------
    config:
        Session rules; supplies the vulnerable/weak multipliers.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()

    def can_play(self, card: CardInstance, player: Player) -> bool:
        return can_afford(player, card.cost)

    def play_card(self, card: CardInstance, state: GameState) -> PlayOutcome:
        """Apply every effect of *card* to *state*.

        The caller is responsible for the affordability check and for
        moving the card to the discard pile afterwards.
        """
        player = state.player
        enemy = state.enemy

        if card.type is CardType.ATTACK and enemy is not None:
            hp_lost = deal_damage(
                player,
                enemy,
                card.damage or 0,
                self._config.vulnerable_multiplier,
                self._config.weak_multiplier,
            )
            logger.debug("%s hits %s for %d (hp %d)", card.name, enemy.name, hp_lost, enemy.health)

            if card.vulnerable:
                apply_vulnerable(enemy, card.vulnerable)

            if enemy.is_dead:
                return PlayOutcome.LETHAL

        if card.block:
            gain_block(player, card.block)

        if card.draw:
            state.draw_cards(card.draw)

        if card.self_copy:
            state.piles.add_to_discard(card.duplicate())

        spend_energy(player, card.cost)
        return PlayOutcome.RESOLVED
