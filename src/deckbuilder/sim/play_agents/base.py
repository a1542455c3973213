"""Base class for agents that drive a session headlessly.

All play agents must subclass ``PlayAgent`` and implement the two abstract
methods.  The session runner calls these at decision points, handing the
agent the same read-only snapshot a renderer would see.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deckbuilder.sim.snapshots import CardSnapshot, GameSnapshot


class PlayAgent(ABC):
    """Base class for agents that play the game."""

    @abstractmethod
    def choose_card_to_play(
        self,
        frame: GameSnapshot,
        playable: list[int],
    ) -> int | None:
        """Choose a hand index to play.

        Parameters
        ----------
        frame:
            Snapshot of the current combat, giving the agent full
            observability of what the player can see.
        playable:
            Hand indices of every card the player can currently afford.

        Returns
        -------
        int | None
            The hand index to play, or ``None`` to end the turn.
        """

    @abstractmethod
    def choose_card_reward(
        self,
        cards: tuple[CardSnapshot, ...],
        deck: list[str],
    ) -> int | None:
        """Choose a reward card (or ``None`` to skip).

        Parameters
        ----------
        cards:
            Reward choices on offer.
        deck:
            Template ids of every card the player currently owns.
        """
