"""
Player export.

Projects a live player onto the transport DTOs. The producing side's
state is trusted, so nothing is validated here.
"""

from forestshare.config import settings
from forestshare.models.card import Cave, DwellerCard, DwellerPosition, WoodyPlantCard
from forestshare.models.game import Forest, Game, Player
from forestshare.sharing.codec import encode
from forestshare.sharing.schemas import (
    CaveDto,
    DwellerCardDto,
    ForestDto,
    PlayerDto,
    PlayerExportDto,
    WoodyPlantCardDto,
)


def encode_player(game: Game, player: Player) -> str:
    """Export a player as a transport string ready to be shown as a QR code."""
    return encode(create_player_export_dto(game, player).to_payload())


def create_player_export_dto(game: Game, player: Player) -> PlayerExportDto:
    """
    Build the root export DTO.

    The app version and enabled game boxes are stamped for the receiver's
    compatibility checks; they carry no meaning on this side.
    """
    return PlayerExportDto(
        app_version=settings.app_version,
        game_boxes=game.game_boxes,
        player=create_player_dto(player),
    )


def create_player_dto(player: Player) -> PlayerDto:
    return PlayerDto(name=player.name, forest=create_forest_dto(player.forest))


def create_forest_dto(forest: Forest) -> ForestDto:
    return ForestDto(
        woody_plants=tuple(create_woody_plant_dto(w) for w in forest.woody_plants),
        cave=create_cave_dto(forest.cave),
    )


def create_cave_dto(cave: Cave) -> CaveDto:
    return CaveDto(name=cave.name, card_count=cave.card_count)


def create_woody_plant_dto(woody_plant: WoodyPlantCard) -> WoodyPlantCardDto:
    # Dwellers flattened out of their per-position grouping, in position order
    return WoodyPlantCardDto(
        name=woody_plant.name,
        game_box=woody_plant.game_box,
        tree_symbol=woody_plant.tree_symbol,
        dwellers=tuple(
            create_dweller_dto(dweller, position)
            for position, dweller in woody_plant.all_dwellers()
        ),
    )


def create_dweller_dto(dweller: DwellerCard, position: DwellerPosition) -> DwellerCardDto:
    return DwellerCardDto(
        name=dweller.name,
        game_box=dweller.game_box,
        tree_symbol=dweller.tree_symbol,
        position=position,
    )
