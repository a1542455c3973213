"""Dungeon module -- post-combat rewards."""

from deckbuilder.sim.dungeon.rewards import generate_card_reward

__all__ = ["generate_card_reward"]
