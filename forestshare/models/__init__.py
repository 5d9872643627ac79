from forestshare.models.blueprint import (
    CardVariant,
    CaveBlueprint,
    DwellerBlueprint,
    WoodyPlantBlueprint,
)
from forestshare.models.card import (
    Cave,
    DwellerCard,
    DwellerPosition,
    GameBox,
    TreeSymbol,
    WoodyPlantCard,
)
from forestshare.models.failure import (
    IMPORT_FAILURE_MESSAGES,
    IMPORT_FAILURE_SUGGESTIONS,
    ApiResponse,
    DecodeError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    SchemaError,
)
from forestshare.models.game import Deck, Forest, Game, Player

__all__ = [
    "ApiResponse",
    "CardVariant",
    "Cave",
    "CaveBlueprint",
    "DecodeError",
    "Deck",
    "DwellerBlueprint",
    "DwellerCard",
    "DwellerPosition",
    "FailureDetail",
    "FailureKind",
    "Forest",
    "Game",
    "GameBox",
    "IMPORT_FAILURE_MESSAGES",
    "IMPORT_FAILURE_SUGGESTIONS",
    "KnownError",
    "OutcomeType",
    "Player",
    "SchemaError",
    "TreeSymbol",
    "WoodyPlantBlueprint",
    "WoodyPlantCard",
]
