"""Content registry -- loads and serves card and enemy templates.

Vanilla content is loaded from JSON files in ``deckbuilder/data/vanilla/``.
Extra content can be registered directly from template objects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from deckbuilder.ir.cards import CardTemplate, CardType
from deckbuilder.ir.enemies import EnemyTemplate

logger = logging.getLogger(__name__)

# Default paths relative to the package root.
_PACKAGE_ROOT = Path(__file__).resolve().parents[2]  # sim/content -> deckbuilder
_DEFAULT_CARDS_PATH = _PACKAGE_ROOT / "data" / "vanilla" / "cards.json"
_DEFAULT_ENEMIES_PATH = _PACKAGE_ROOT / "data" / "vanilla" / "enemies.json"


def _load_json_list(path: Path) -> list[dict[str, Any]]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of definitions")
    return raw


class ContentRegistry:
    """Loads and serves card and enemy templates.

    Templates keep their load order; that order is what random selection
    indexes into, so a fixed seed always yields the same picks.

    Usage::

        registry = ContentRegistry()
        registry.load_vanilla_cards()
        registry.load_vanilla_enemies()

        strike = registry.get_card("strike")
        deck_ids = registry.get_starter_deck({"strike": 5, "defend": 5})
    """

    def __init__(self) -> None:
        self.cards: dict[str, CardTemplate] = {}
        self.enemies: dict[str, EnemyTemplate] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_vanilla_cards(self, path: Path | None = None) -> None:
        """Load card templates from JSON (defaults to the bundled set)."""
        for raw in _load_json_list(path or _DEFAULT_CARDS_PATH):
            self.register_card(CardTemplate.model_validate(raw))

    def load_vanilla_enemies(self, path: Path | None = None) -> None:
        """Load enemy templates from JSON (defaults to the bundled set)."""
        for raw in _load_json_list(path or _DEFAULT_ENEMIES_PATH):
            self.register_enemy(EnemyTemplate.model_validate(raw))

    def register_card(self, template: CardTemplate) -> None:
        if template.id in self.cards:
            logger.warning("Card %r registered twice; keeping the newer one", template.id)
        if template.damage is not None and template.type is not CardType.ATTACK:
            logger.warning("Card %r has damage but is not an attack; damage is ignored", template.id)
        self.cards[template.id] = template

    def register_enemy(self, template: EnemyTemplate) -> None:
        if template.id in self.enemies:
            logger.warning("Enemy %r registered twice; keeping the newer one", template.id)
        self.enemies[template.id] = template

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_card(self, card_id: str) -> CardTemplate:
        try:
            return self.cards[card_id]
        except KeyError:
            raise KeyError(f"Unknown card id {card_id!r}") from None

    def get_enemy(self, enemy_id: str) -> EnemyTemplate:
        try:
            return self.enemies[enemy_id]
        except KeyError:
            raise KeyError(f"Unknown enemy id {enemy_id!r}") from None

    def all_cards(self) -> list[CardTemplate]:
        return list(self.cards.values())

    def all_enemies(self) -> list[EnemyTemplate]:
        return list(self.enemies.values())

    def get_starter_deck(self, composition: dict[str, int]) -> list[str]:
        """Expand a ``card_id -> count`` mapping into an ordered id list.

        Every id must be registered.
        """
        deck: list[str] = []
        for card_id, count in composition.items():
            self.get_card(card_id)
            deck.extend([card_id] * count)
        return deck
