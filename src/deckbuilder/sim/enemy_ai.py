"""Enemy AI -- rolls and executes enemy intents.

Every enemy picks its next intent uniformly from its fixed intent set.
The roll happens eagerly (at spawn and right after each enemy turn) so the
upcoming action can be shown to the player before it executes.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from deckbuilder.config import GameConfig
from deckbuilder.ir.enemies import IntentType
from deckbuilder.sim.core.entities import Enemy
from deckbuilder.sim.mechanics.block import clear_block, gain_block
from deckbuilder.sim.mechanics.damage import calculate_damage, deal_damage
from deckbuilder.sim.mechanics.status_effects import decay_statuses

if TYPE_CHECKING:
    from deckbuilder.ir.enemies import EnemyTemplate
    from deckbuilder.sim.core.entities import Player
    from deckbuilder.sim.core.game_state import GameState
    from deckbuilder.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)


class EnemyTurnOutcome(str, Enum):
    ACTED = "acted"
    PLAYER_DEFEATED = "player_defeated"


class EnemyAI:
    """Determines and executes enemy behaviour.

    Parameters
    ----------
    rng:
        Source for intent rolls.
    config:
        Session rules (defend block amount, damage multipliers).
    """

    def __init__(self, rng: GameRNG, config: GameConfig | None = None) -> None:
        self._rng = rng
        self._config = config or GameConfig()

    def spawn(self, template: EnemyTemplate) -> Enemy:
        """Instantiate *template* with its first intent already rolled."""
        enemy = Enemy.from_template(template)
        self.roll_intent(enemy)
        return enemy

    def roll_intent(self, enemy: Enemy) -> IntentType:
        enemy.intent = self._rng.random_choice(enemy.intents)
        return enemy.intent

    def forecast_damage(self, enemy: Enemy, player: Player) -> int | None:
        """Damage the upcoming attack would deal, or ``None`` for other intents."""
        if enemy.intent is not IntentType.ATTACK:
            return None
        return calculate_damage(
            enemy.damage,
            enemy,
            player,
            self._config.vulnerable_multiplier,
            self._config.weak_multiplier,
        )

    def take_turn(self, enemy: Enemy, state: GameState) -> EnemyTurnOutcome:
        """Execute *enemy*'s current intent against *state*.

        Block from a previous defend lasts through one player turn and is
        cleared when the enemy acts again.  A killing attack returns
        immediately, skipping status decay and the next intent roll.
        """
        player = state.player
        clear_block(enemy)

        if enemy.intent is IntentType.ATTACK:
            hp_lost = deal_damage(
                enemy,
                player,
                enemy.damage,
                self._config.vulnerable_multiplier,
                self._config.weak_multiplier,
            )
            logger.debug("%s attacks: player loses %d (hp %d)", enemy.name, hp_lost, player.health)
            if player.is_dead:
                return EnemyTurnOutcome.PLAYER_DEFEATED

        elif enemy.intent is IntentType.DEFEND:
            gain_block(enemy, self._config.enemy_defend_block)
            logger.debug("%s defends (block %d)", enemy.name, enemy.status.block)

        elif enemy.intent is IntentType.BUFF:
            enemy.damage += enemy.buff
            logger.debug("%s buffs (damage %d)", enemy.name, enemy.damage)

        else:
            logger.warning("%s has no intent to execute", enemy.name)

        decay_statuses(enemy)
        self.roll_intent(enemy)
        return EnemyTurnOutcome.ACTED
