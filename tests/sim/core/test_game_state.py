"""Tests for CardInstance, CardPiles and GameState."""

from collections import Counter

import pytest

from deckbuilder.sim.core.entities import Player
from deckbuilder.sim.core.game_state import (
    CardInstance,
    CardPiles,
    GamePhase,
    GameState,
)
from deckbuilder.sim.core.rng import GameRNG


def _uids(cards: list[CardInstance]) -> list[str]:
    return [c.uid for c in cards]


# ---------------------------------------------------------------------------
# CardInstance
# ---------------------------------------------------------------------------

class TestCardInstance:
    def test_from_template_copies_fields(self, registry):
        template = registry.get_card("bash")
        card = CardInstance.from_template(template)

        assert card.template_id == "bash"
        assert card.name == "Bash"
        assert card.cost == 2
        assert card.damage == 8
        assert card.vulnerable == 2
        assert card.block is None
        assert card.self_copy is False

    def test_instances_have_unique_uids(self, make_card):
        assert make_card("strike").uid != make_card("strike").uid

    def test_duplicate_is_independent(self, make_card):
        original = make_card("anger")
        copy = original.duplicate()

        assert copy.uid != original.uid
        assert copy.template_id == original.template_id
        copy.cost = 5
        assert original.cost == 0


# ---------------------------------------------------------------------------
# CardPiles -- draw
# ---------------------------------------------------------------------------

class TestCardPilesDraw:
    def test_draw_from_front(self, make_card):
        cards = [make_card("strike") for _ in range(5)]
        piles = CardPiles(deck=list(cards))
        drawn = piles.draw(3, GameRNG(42))

        assert _uids(drawn) == _uids(cards[:3])
        assert _uids(piles.hand) == _uids(cards[:3])
        assert piles.deck_count == 2

    def test_draw_fewer_than_requested(self, make_card):
        piles = CardPiles(deck=[make_card("strike"), make_card("defend")])
        drawn = piles.draw(5, GameRNG(42))

        assert len(drawn) == 2
        assert piles.hand_size == 2
        assert piles.deck_count == 0

    def test_draw_zero(self, make_card):
        piles = CardPiles(deck=[make_card("strike")])
        assert piles.draw(0, GameRNG(42)) == []
        assert piles.hand_size == 0

    def test_draw_with_everything_empty(self):
        piles = CardPiles()
        assert piles.draw(5, GameRNG(42)) == []


# ---------------------------------------------------------------------------
# CardPiles -- reshuffle during draw
# ---------------------------------------------------------------------------

class TestCardPilesReshuffle:
    def test_empty_deck_three_in_discard(self, make_card):
        discard = [make_card("strike") for _ in range(3)]
        piles = CardPiles(discard=list(discard))
        drawn = piles.draw(5, GameRNG(42))

        assert len(drawn) == 3
        assert piles.hand_size == 3
        assert piles.deck_count == 0
        assert piles.discard_count == 0
        assert sorted(_uids(piles.hand)) == sorted(_uids(discard))

    def test_reshuffle_mid_draw(self, make_card):
        piles = CardPiles(
            deck=[make_card("bash")],
            discard=[make_card("defend") for _ in range(4)],
        )
        drawn = piles.draw(3, GameRNG(42))

        assert len(drawn) == 3
        assert drawn[0].template_id == "bash"
        # 1 from deck + 4 reshuffled, drew 3, so 2 remain
        assert piles.deck_count == 2
        assert piles.discard_count == 0

    def test_no_reshuffle_when_deck_suffices(self, make_card):
        piles = CardPiles(
            deck=[make_card("strike") for _ in range(3)],
            discard=[make_card("defend")],
        )
        piles.draw(3, GameRNG(42))
        assert piles.discard_count == 1


# ---------------------------------------------------------------------------
# CardPiles -- shuffle_deck_in
# ---------------------------------------------------------------------------

class TestShuffleDeckIn:
    def test_shuffle_preserves_multiset(self, make_card):
        deck = [make_card("strike") for _ in range(4)]
        discard = [make_card("defend") for _ in range(3)]
        piles = CardPiles(deck=list(deck), discard=list(discard))
        before = Counter(_uids(deck + discard))

        piles.shuffle_deck_in(GameRNG(7))

        assert Counter(_uids(piles.deck)) == before
        assert piles.discard == []

    def test_shuffle_with_empty_discard(self, make_card):
        piles = CardPiles(deck=[make_card("strike") for _ in range(3)])
        piles.shuffle_deck_in(GameRNG(7))
        assert piles.deck_count == 3


# ---------------------------------------------------------------------------
# CardPiles -- pile movement
# ---------------------------------------------------------------------------

class TestCardPilesMovement:
    def test_discard_hand_keeps_order(self, make_card):
        hand = [make_card("strike"), make_card("defend"), make_card("bash")]
        existing = make_card("anger")
        piles = CardPiles(hand=list(hand), discard=[existing])

        piles.discard_hand()

        assert piles.hand == []
        assert _uids(piles.discard) == [existing.uid] + _uids(hand)

    def test_take_then_discard(self, make_card):
        hand = [make_card("strike"), make_card("defend")]
        piles = CardPiles(hand=list(hand))

        taken = piles.take_from_hand(1)
        assert _uids(piles.hand) == [hand[0].uid]
        assert piles.discard == []

        piles.add_to_discard(taken)
        assert taken.uid == hand[1].uid
        assert _uids(piles.discard) == [hand[1].uid]

    def test_take_from_hand_out_of_range(self, make_card):
        piles = CardPiles(hand=[make_card("strike")])
        with pytest.raises(IndexError):
            piles.take_from_hand(1)

    def test_all_cards(self, make_card):
        piles = CardPiles(
            deck=[make_card("strike")],
            hand=[make_card("defend")],
            discard=[make_card("bash")],
        )
        assert [c.template_id for c in piles.all_cards()] == ["strike", "defend", "bash"]


# ---------------------------------------------------------------------------
# GameState
# ---------------------------------------------------------------------------

class TestGameState:
    def test_defaults(self):
        state = GameState(player=Player.fresh(100, 3), rng=GameRNG(1))

        assert state.phase is GamePhase.MENU
        assert state.enemy is None
        assert state.reward_cards == []
        assert not state.turn_ending
        assert not state.is_animating

    def test_rng_excluded_from_dump(self):
        state = GameState(player=Player.fresh(100, 3), rng=GameRNG(1))
        assert "rng" not in state.model_dump()

    def test_draw_cards_uses_session_rng(self, make_card):
        state = GameState(player=Player.fresh(100, 3), rng=GameRNG(1))
        state.piles.discard.extend(make_card("strike") for _ in range(2))

        drawn = state.draw_cards(2)

        assert len(drawn) == 2
        assert state.piles.discard_count == 0
