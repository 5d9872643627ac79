"""
Player Import Reconciler.

Turns a scanned transport string into a live player for the receiving
game, or into a classified failure. This is the only place that decides
which FailureKind an import failure belongs to.

Pipeline:
    decode -> validate -> compatibility checks -> cave -> woody plants
    -> dwellers -> verdict -> unique name

INVARIANTS:
1. Failures are returned, never raised past `import_player`
2. Card-level failures are collected exhaustively, not first-failure
3. Dwellers of an unresolved woody plant are not reported separately
4. The receiving game is never mutated; the caller adds the player
"""

import logging
from dataclasses import dataclass, field

from forestshare.catalog.factory import create_player
from forestshare.catalog.registry import BlueprintRegistry
from forestshare.config import settings
from forestshare.models.card import WoodyPlantCard
from forestshare.models.failure import DecodeError, FailureKind, SchemaError
from forestshare.models.game import Game, Player
from forestshare.sharing.codec import decode
from forestshare.sharing.lookup import CardLookup
from forestshare.sharing.schemas import (
    CaveDto,
    DwellerCardDto,
    PlayerExportDto,
    WoodyPlantCardDto,
    validate_export_payload,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnavailableCards:
    """Every payload entry the receiving deck could not supply."""

    cave: CaveDto | None = None
    dwellers: tuple[DwellerCardDto, ...] = ()
    woody_plants: tuple[WoodyPlantCardDto, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.cave is None and not self.dwellers and not self.woody_plants

    def total(self) -> int:
        """Number of unavailable entries."""
        return (1 if self.cave is not None else 0) + len(self.dwellers) + len(self.woody_plants)


@dataclass(frozen=True)
class ImportSuccess:
    """The payload resolved completely."""

    player: Player

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ImportFailure:
    """The payload could not be imported."""

    kind: FailureKind
    unavailable_cards: UnavailableCards | None = None

    @property
    def success(self) -> bool:
        return False


ImportResult = ImportSuccess | ImportFailure


@dataclass
class _Resolution:
    """Working state of one reconciliation run."""

    woody_plants: list[WoodyPlantCard] = field(default_factory=list)
    unavailable_woody_plants: list[WoodyPlantCardDto] = field(default_factory=list)
    unavailable_dwellers: list[DwellerCardDto] = field(default_factory=list)


def import_player(
    game: Game,
    encoded_data: str,
    registry: BlueprintRegistry | None = None,
) -> ImportResult:
    """
    Import a player from a scanned transport string.

    Args:
        game: The receiving game (read only)
        encoded_data: String captured from the producer's QR code
        registry: Blueprint registry for the fallback tier.
            Defaults to the global registry.

    Returns:
        ImportSuccess with a new player, or ImportFailure with its kind
        (and, for UNAVAILABLE_CARDS, every unresolved entry)
    """
    try:
        decoded = decode(encoded_data)
    except DecodeError as e:
        logger.warning("Failed to decode exported player: %s", e.detail)
        return ImportFailure(kind=FailureKind.INVALID_DATA)
    except Exception:
        logger.exception("Unexpected error while decoding exported player")
        return ImportFailure(kind=FailureKind.INVALID_DATA)

    try:
        export_dto = validate_export_payload(decoded)
    except SchemaError as e:
        logger.warning(
            "Failed to parse exported player (%d errors): %s", e.error_count, e.detail
        )
        return ImportFailure(kind=FailureKind.INVALID_SCHEMA)

    incompatibility = check_compatibility(game, export_dto)
    if incompatibility is not None:
        logger.info(
            "Rejected player from app %s with boxes %s: %s",
            export_dto.app_version,
            [box.value for box in export_dto.game_boxes],
            incompatibility.value,
        )
        return ImportFailure(kind=incompatibility)

    return reconcile_player(game, export_dto, registry)


def check_compatibility(game: Game, export_dto: PlayerExportDto) -> FailureKind | None:
    """
    Compare the producer's metadata with the receiving side.

    Each check only runs when its settings flag is enabled.

    Returns:
        APP_VERSION_MISMATCH or GAME_BOXES_MISMATCH, or None if compatible
    """
    if settings.enforce_app_version_match and not versions_compatible(
        export_dto.app_version, settings.app_version
    ):
        return FailureKind.APP_VERSION_MISMATCH

    if settings.enforce_game_boxes_match and set(export_dto.game_boxes) != set(game.game_boxes):
        return FailureKind.GAME_BOXES_MISMATCH

    return None


def versions_compatible(producer: str, consumer: str) -> bool:
    """Versions are compatible when their major components are equal."""
    return producer.strip().split(".")[0] == consumer.strip().split(".")[0]


def reconcile_player(
    game: Game,
    export_dto: PlayerExportDto,
    registry: BlueprintRegistry | None = None,
) -> ImportResult:
    """
    Map a validated payload onto the receiving game's deck.

    Every woody plant and dweller is attempted even after a failure, so
    the result lists everything that is missing in one pass.
    """
    lookup = CardLookup(game.deck, registry)
    player_dto = export_dto.player
    forest_dto = player_dto.forest

    cave = lookup.find_cave(forest_dto.cave)

    resolution = _Resolution()
    for woody_plant_dto in forest_dto.woody_plants:
        woody_plant = lookup.find_woody_plant(woody_plant_dto)
        if woody_plant is None:
            resolution.unavailable_woody_plants.append(woody_plant_dto)
            continue

        for dweller_dto in woody_plant_dto.dwellers:
            dweller = lookup.find_dweller(dweller_dto)
            if dweller is None:
                resolution.unavailable_dwellers.append(dweller_dto)
                continue

            # Copy-on-attach; the deck's instance stays untouched
            woody_plant = woody_plant.with_dweller(dweller, dweller_dto.position)

        resolution.woody_plants.append(woody_plant)

    if (
        cave is None
        or resolution.unavailable_dwellers
        or resolution.unavailable_woody_plants
    ):
        unavailable = UnavailableCards(
            cave=forest_dto.cave if cave is None else None,
            dwellers=tuple(resolution.unavailable_dwellers),
            woody_plants=tuple(resolution.unavailable_woody_plants),
        )
        logger.info(
            "Import of player %r failed: %d unavailable cards",
            player_dto.name,
            unavailable.total(),
        )
        return ImportFailure(kind=FailureKind.UNAVAILABLE_CARDS, unavailable_cards=unavailable)

    player = create_player(
        find_unique_name(game, player_dto.name),
        cave.with_card_count(forest_dto.cave.card_count),
        resolution.woody_plants,
    )
    logger.info(
        "Imported player %r with %d woody plants", player.name, len(player.forest.woody_plants)
    )
    return ImportSuccess(player=player)


def find_unique_name(game: Game, name: str) -> str:
    """
    Disambiguate `name` against the game's players.

    "Alex" stays "Alex" if free, otherwise becomes "Alex (1)", "Alex (2)", ...
    """
    unique_name = name
    counter = 1
    while game.has_player(unique_name):
        unique_name = f"{name} ({counter})"
        counter += 1
    return unique_name
