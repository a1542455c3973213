"""Content loading for the simulator."""

from deckbuilder.sim.content.registry import ContentRegistry

__all__ = ["ContentRegistry"]
