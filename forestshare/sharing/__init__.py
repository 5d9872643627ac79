"""
Offline player sharing.

Export:  Player -> PlayerExportDto -> encode -> transport string
Import:  transport string -> decode -> validate -> reconcile -> ImportResult
"""

from forestshare.sharing.codec import decode, encode
from forestshare.sharing.export import create_player_dto, create_player_export_dto, encode_player
from forestshare.sharing.lookup import CardLookup, DeckIndex
from forestshare.sharing.reconciler import (
    ImportFailure,
    ImportResult,
    ImportSuccess,
    UnavailableCards,
    find_unique_name,
    import_player,
    reconcile_player,
)
from forestshare.sharing.schemas import (
    CaveDto,
    DwellerCardDto,
    ForestDto,
    PlayerDto,
    PlayerExportDto,
    WoodyPlantCardDto,
    validate_export_payload,
)
from forestshare.sharing.summary import UnavailableCardsSummary, summarize_unavailable_cards

__all__ = [
    "CardLookup",
    "CaveDto",
    "DeckIndex",
    "DwellerCardDto",
    "ForestDto",
    "ImportFailure",
    "ImportResult",
    "ImportSuccess",
    "PlayerDto",
    "PlayerExportDto",
    "UnavailableCards",
    "UnavailableCardsSummary",
    "WoodyPlantCardDto",
    "create_player_dto",
    "create_player_export_dto",
    "decode",
    "encode",
    "encode_player",
    "find_unique_name",
    "import_player",
    "reconcile_player",
    "summarize_unavailable_cards",
    "validate_export_payload",
]
