"""
Card, deck, player and game construction.

Every card instance created here gets a fresh handle; decks built from
the same game boxes contain equal cards under different handles.
"""

import logging
from collections.abc import Iterable

from forestshare.catalog.registry import BlueprintRegistry, get_blueprint_registry
from forestshare.models.blueprint import (
    CardVariant,
    CaveBlueprint,
    DwellerBlueprint,
    WoodyPlantBlueprint,
)
from forestshare.models.card import Cave, DwellerCard, GameBox, WoodyPlantCard
from forestshare.models.game import Deck, Forest, Game, Player

logger = logging.getLogger(__name__)


def create_woody_plant(blueprint: WoodyPlantBlueprint, variant: CardVariant) -> WoodyPlantCard:
    """Materialize one woody plant card from a blueprint printing."""
    return WoodyPlantCard(
        name=blueprint.name,
        game_box=variant.game_box,
        tree_symbol=variant.tree_symbol,
    )


def create_dweller(blueprint: DwellerBlueprint, variant: CardVariant) -> DwellerCard:
    """Materialize one dweller card from a blueprint printing."""
    return DwellerCard(
        name=blueprint.name,
        game_box=variant.game_box,
        tree_symbol=variant.tree_symbol,
        position=blueprint.position,
    )


def create_cave(blueprint: CaveBlueprint, card_count: int = 0) -> Cave:
    """Materialize one cave from a blueprint."""
    return Cave(name=blueprint.name, card_count=card_count)


def create_player(
    name: str,
    cave: Cave,
    woody_plants: Iterable[WoodyPlantCard] = (),
) -> Player:
    """Create a player owning the given cave and woody plants."""
    return Player(name=name, forest=Forest(cave=cave, woody_plants=tuple(woody_plants)))


def build_deck(
    game_boxes: Iterable[GameBox],
    registry: BlueprintRegistry | None = None,
) -> Deck:
    """
    Build the deck for a set of enabled game boxes.

    Every in-deck printing of an enabled game box contributes `count`
    instances. Woody plants flagged as not part of the deck are skipped.

    Args:
        game_boxes: Enabled game boxes
        registry: Blueprint registry. Defaults to the global registry.

    Returns:
        Deck with fresh card instances
    """
    if registry is None:
        registry = get_blueprint_registry()
    enabled = set(game_boxes)

    woody_plants = [
        create_woody_plant(blueprint, variant)
        for blueprint in registry.woody_plants
        if blueprint.is_part_of_deck
        for variant in blueprint.variants
        if variant.game_box in enabled
        for _ in range(variant.count)
    ]
    dwellers = [
        create_dweller(blueprint, variant)
        for blueprint in registry.dwellers
        for variant in blueprint.variants
        if variant.game_box in enabled
        for _ in range(variant.count)
    ]
    caves = [
        create_cave(blueprint)
        for blueprint in registry.caves
        if blueprint.game_box in enabled
        for _ in range(blueprint.count)
    ]

    logger.debug(
        "Built deck for %s: %d woody plants, %d dwellers, %d caves",
        sorted(box.value for box in enabled),
        len(woody_plants),
        len(dwellers),
        len(caves),
    )
    return Deck(woody_plants=tuple(woody_plants), dwellers=tuple(dwellers), caves=tuple(caves))


def create_game(game_boxes: Iterable[GameBox] = ()) -> Game:
    """
    Create an empty game. The base game is always enabled.

    Game boxes keep their declaration order, without duplicates.
    """
    requested = set(game_boxes) | {GameBox.BASE}
    enabled = tuple(box for box in GameBox if box in requested)
    return Game(game_boxes=enabled, deck=build_deck(enabled))
