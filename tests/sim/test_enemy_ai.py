"""Tests for EnemyAI -- intent rolls, execution and forecasts."""

from deckbuilder.config import GameConfig
from deckbuilder.ir.enemies import IntentType
from deckbuilder.sim.core.entities import Enemy, Player, StatusEffects
from deckbuilder.sim.core.game_state import GamePhase, GameState
from deckbuilder.sim.core.rng import GameRNG
from deckbuilder.sim.enemy_ai import EnemyAI, EnemyTurnOutcome


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_enemy(intent: IntentType, **kwargs) -> Enemy:
    defaults = dict(
        enemy_id="goblin", name="Goblin", health=25, max_health=25, damage=10,
        intents=(IntentType.ATTACK, IntentType.DEFEND, IntentType.BUFF),
        buff=3, intent=intent,
    )
    defaults.update(kwargs)
    return Enemy(**defaults)


def _make_state(enemy: Enemy, player_health: int = 100) -> GameState:
    return GameState(
        phase=GamePhase.COMBAT,
        player=Player(health=player_health, max_health=100, energy=3),
        enemy=enemy,
        rng=GameRNG(1),
    )


# ---------------------------------------------------------------------------
# Intent rolls
# ---------------------------------------------------------------------------

class TestIntentRolls:
    def test_spawn_rolls_intent(self, registry, scripted_rng):
        ai = EnemyAI(scripted_rng([1]))
        enemy = ai.spawn(registry.get_enemy("goblin"))

        assert enemy.intent is IntentType.DEFEND
        assert enemy.health == 25

    def test_single_intent_enemy(self, registry):
        ai = EnemyAI(GameRNG(5))
        for _ in range(10):
            assert ai.spawn(registry.get_enemy("slime")).intent is IntentType.ATTACK

    def test_rolls_cover_the_intent_set(self, registry):
        ai = EnemyAI(GameRNG(5))
        enemy = ai.spawn(registry.get_enemy("cultist"))
        seen = {ai.roll_intent(enemy) for _ in range(50)}
        assert seen == {IntentType.ATTACK, IntentType.BUFF}


# ---------------------------------------------------------------------------
# take_turn
# ---------------------------------------------------------------------------

class TestTakeTurn:
    def test_attack(self, scripted_rng):
        enemy = _make_enemy(IntentType.ATTACK)
        state = _make_state(enemy)

        outcome = EnemyAI(scripted_rng([0])).take_turn(enemy, state)

        assert outcome is EnemyTurnOutcome.ACTED
        assert state.player.health == 90

    def test_weak_attack(self, scripted_rng):
        enemy = _make_enemy(IntentType.ATTACK, damage=8, status=StatusEffects(weak=1))
        state = _make_state(enemy)

        EnemyAI(scripted_rng([0])).take_turn(enemy, state)

        assert state.player.health == 94  # floor(8 * 0.75) = 6

    def test_attack_into_player_block(self, scripted_rng):
        enemy = _make_enemy(IntentType.ATTACK)
        state = _make_state(enemy)
        state.player.status.block = 4

        EnemyAI(scripted_rng([0])).take_turn(enemy, state)

        assert state.player.health == 94
        assert state.player.status.block == 0

    def test_defend(self, scripted_rng):
        enemy = _make_enemy(IntentType.DEFEND)
        state = _make_state(enemy)

        EnemyAI(scripted_rng([0])).take_turn(enemy, state)

        assert enemy.status.block == 5
        assert state.player.health == 100

    def test_defend_amount_from_config(self, scripted_rng):
        enemy = _make_enemy(IntentType.DEFEND)
        state = _make_state(enemy)

        EnemyAI(scripted_rng([0]), GameConfig(enemy_defend_block=7)).take_turn(enemy, state)

        assert enemy.status.block == 7

    def test_old_block_cleared_before_acting(self, scripted_rng):
        enemy = _make_enemy(IntentType.DEFEND, status=StatusEffects(block=5))
        state = _make_state(enemy)

        EnemyAI(scripted_rng([0])).take_turn(enemy, state)

        assert enemy.status.block == 5

    def test_buff_is_permanent(self, scripted_rng):
        enemy = _make_enemy(IntentType.BUFF)
        state = _make_state(enemy)
        ai = EnemyAI(scripted_rng([2, 0]))

        ai.take_turn(enemy, state)
        assert enemy.damage == 13
        ai.take_turn(enemy, state)
        assert enemy.damage == 16

        # Now attacks with the buffed base damage
        enemy.intent = IntentType.ATTACK
        EnemyAI(scripted_rng([0])).take_turn(enemy, state)
        assert state.player.health == 84

    def test_statuses_decay_after_acting(self, scripted_rng):
        enemy = _make_enemy(IntentType.ATTACK, damage=8, status=StatusEffects(vulnerable=2, weak=1))
        state = _make_state(enemy)

        EnemyAI(scripted_rng([0])).take_turn(enemy, state)

        # Weak still applied to this attack, then decays
        assert state.player.health == 94
        assert enemy.status.vulnerable == 1
        assert enemy.status.weak == 0

    def test_intent_rerolled(self, scripted_rng):
        enemy = _make_enemy(IntentType.ATTACK)
        state = _make_state(enemy)

        EnemyAI(scripted_rng([1])).take_turn(enemy, state)

        assert enemy.intent is IntentType.DEFEND

    def test_killing_blow_stops_turn(self, scripted_rng):
        enemy = _make_enemy(IntentType.ATTACK, status=StatusEffects(vulnerable=2))
        state = _make_state(enemy, player_health=10)
        rng = scripted_rng([1])

        outcome = EnemyAI(rng).take_turn(enemy, state)

        assert outcome is EnemyTurnOutcome.PLAYER_DEFEATED
        assert state.player.health == 0
        assert enemy.status.vulnerable == 2
        assert enemy.intent is IntentType.ATTACK


# ---------------------------------------------------------------------------
# Forecast
# ---------------------------------------------------------------------------

class TestForecast:
    def test_attack_forecast(self):
        enemy = _make_enemy(IntentType.ATTACK, damage=8)
        player = Player(health=100, max_health=100)
        assert EnemyAI(GameRNG(1)).forecast_damage(enemy, player) == 8

    def test_weak_forecast(self):
        enemy = _make_enemy(IntentType.ATTACK, damage=8, status=StatusEffects(weak=1))
        player = Player(health=100, max_health=100)
        assert EnemyAI(GameRNG(1)).forecast_damage(enemy, player) == 6

    def test_non_attack_has_no_forecast(self):
        player = Player(health=100, max_health=100)
        ai = EnemyAI(GameRNG(1))
        assert ai.forecast_damage(_make_enemy(IntentType.DEFEND), player) is None
        assert ai.forecast_damage(_make_enemy(IntentType.BUFF), player) is None
