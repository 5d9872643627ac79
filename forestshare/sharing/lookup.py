"""
Two-tier card lookup used when reconciling an imported payload.

Tier 1 is an index over the receiving game's deck: exact identity match,
and every deck instance is handed out at most once per lookup so a
payload naming the same card twice needs two copies in the deck.

Tier 2 is the static blueprint registry, consulted for woody plants
only, and only for blueprints that are never part of the deck. A match
there materializes a fresh card.
"""

import logging
from collections import defaultdict, deque
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

from forestshare.catalog.factory import create_woody_plant
from forestshare.catalog.registry import BlueprintRegistry, get_blueprint_registry
from forestshare.models.card import Cave, DwellerCard, WoodyPlantCard
from forestshare.models.game import Deck
from forestshare.sharing.schemas import CaveDto, DwellerCardDto, WoodyPlantCardDto

logger = logging.getLogger(__name__)

C = TypeVar("C")


def _group(cards: Iterable[C], key: Callable[[C], Hashable]) -> dict[Hashable, deque[C]]:
    grouped: dict[Hashable, deque[C]] = defaultdict(deque)
    for card in cards:
        grouped[key(card)].append(card)
    return grouped


def _take(grouped: dict[Hashable, deque[C]], key: Hashable) -> C | None:
    candidates = grouped.get(key)
    if not candidates:
        return None
    return candidates.popleft()


class DeckIndex:
    """
    Index of unclaimed deck instances keyed by card identity.

    Identity keys:
        woody plant: (name, game_box, tree_symbol)
        dweller: (name, game_box, tree_symbol, position)
        cave: name
    """

    def __init__(self, deck: Deck) -> None:
        self._woody_plants = _group(
            deck.woody_plants, lambda c: (c.name, c.game_box, c.tree_symbol)
        )
        self._dwellers = _group(
            deck.dwellers, lambda c: (c.name, c.game_box, c.tree_symbol, c.position)
        )
        self._caves = _group(deck.caves, lambda c: c.name)

    def take_woody_plant(self, dto: WoodyPlantCardDto) -> WoodyPlantCard | None:
        return _take(self._woody_plants, (dto.name, dto.game_box, dto.tree_symbol))

    def take_dweller(self, dto: DwellerCardDto) -> DwellerCard | None:
        return _take(self._dwellers, (dto.name, dto.game_box, dto.tree_symbol, dto.position))

    def take_cave(self, dto: CaveDto) -> Cave | None:
        return _take(self._caves, dto.name)


class CardLookup:
    """Resolves DTOs to live cards: deck first, then the blueprint registry."""

    def __init__(self, deck: Deck, registry: BlueprintRegistry | None = None) -> None:
        self._index = DeckIndex(deck)
        self._registry = registry if registry is not None else get_blueprint_registry()

    def find_cave(self, dto: CaveDto) -> Cave | None:
        # Caves have no game box or tree symbol; the name is their identity
        return self._index.take_cave(dto)

    def find_woody_plant(self, dto: WoodyPlantCardDto) -> WoodyPlantCard | None:
        woody_plant = self._index.take_woody_plant(dto)
        if woody_plant is not None:
            return woody_plant

        match = self._registry.find_non_deck_woody_plant(dto.name, dto.game_box, dto.tree_symbol)
        if match is None:
            return None

        blueprint, variant = match
        logger.debug("Materialized non-deck woody plant %s from blueprint", blueprint.name)
        return create_woody_plant(blueprint, variant)

    def find_dweller(self, dto: DwellerCardDto) -> DwellerCard | None:
        # No blueprint fallback for dwellers
        return self._index.take_dweller(dto)
