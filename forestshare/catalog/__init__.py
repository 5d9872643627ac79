from forestshare.catalog.factory import (
    build_deck,
    create_cave,
    create_dweller,
    create_game,
    create_player,
    create_woody_plant,
)
from forestshare.catalog.registry import BlueprintRegistry, get_blueprint_registry

__all__ = [
    "BlueprintRegistry",
    "build_deck",
    "create_cave",
    "create_dweller",
    "create_game",
    "create_player",
    "create_woody_plant",
    "get_blueprint_registry",
]
