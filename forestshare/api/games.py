"""
Game API endpoints.

Stands in for the host/guest UI: create a scoring session, export one of
its players as a transport string, and import a scanned string as a new
player. Games live in process memory only.
"""

import logging
import uuid
from collections.abc import Iterable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from forestshare.catalog.factory import create_game
from forestshare.config import settings
from forestshare.models.card import GameBox
from forestshare.models.failure import ApiResponse
from forestshare.models.game import Game
from forestshare.sharing.export import create_player_dto, encode_player
from forestshare.sharing.reconciler import ImportFailure, import_player
from forestshare.sharing.schemas import PlayerDto
from forestshare.sharing.summary import summarize_unavailable_cards

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


class GameStore:
    """In-memory registry of running games."""

    def __init__(self) -> None:
        self._games: dict[str, Game] = {}

    def create(self, game_boxes: Iterable[GameBox]) -> tuple[str, Game]:
        game_id = uuid.uuid4().hex
        game = create_game(game_boxes)
        self._games[game_id] = game
        return game_id, game

    def get(self, game_id: str) -> Game | None:
        return self._games.get(game_id)


_store = GameStore()


def get_game_store() -> GameStore:
    """Dependency returning the process-wide game store."""
    return _store


class CreateGameRequest(BaseModel):
    """Request model for creating a game."""

    game_boxes: list[GameBox] = Field(
        default_factory=list,
        description="Enabled expansions. The base game is always included.",
        examples=[["ALPINE", "WOODLAND_EDGE"]],
    )


class DeckSizeResponse(BaseModel):
    """Number of unclaimed cards per type."""

    woody_plants: int = 0
    dwellers: int = 0
    caves: int = 0


class GameResponse(BaseModel):
    """Response model for game state."""

    game_id: str
    game_boxes: list[GameBox] = Field(default_factory=list)
    players: list[str] = Field(
        default_factory=list,
        description="Player names in joining order",
    )
    deck: DeckSizeResponse = Field(default_factory=DeckSizeResponse)


class ExportResponse(BaseModel):
    """Response model for a player export."""

    app_version: str
    data: str = Field(
        ...,
        description="Transport string to render as a QR code",
    )


class ImportPlayerRequest(BaseModel):
    """Request model for importing a scanned player."""

    data: str = Field(
        ...,
        description="String decoded from the producer's QR code",
    )


def _to_response(game_id: str, game: Game) -> GameResponse:
    return GameResponse(
        game_id=game_id,
        game_boxes=list(game.game_boxes),
        players=[player.name for player in game.players],
        deck=DeckSizeResponse(
            woody_plants=len(game.deck.woody_plants),
            dwellers=len(game.deck.dwellers),
            caves=len(game.deck.caves),
        ),
    )


def _get_game_or_404(store: GameStore, game_id: str) -> Game:
    game = store.get(game_id)
    if game is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Game '{game_id}' not found",
        )
    return game


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_new_game(
    request: CreateGameRequest,
    store: Annotated[GameStore, Depends(get_game_store)],
) -> GameResponse:
    """Create an empty game with the requested expansions."""
    game_id, game = store.create(request.game_boxes)
    logger.info("Created game %s with boxes %s", game_id, [b.value for b in game.game_boxes])
    return _to_response(game_id, game)


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(
    game_id: str,
    store: Annotated[GameStore, Depends(get_game_store)],
) -> GameResponse:
    """Get a game's expansions, players and remaining deck size."""
    return _to_response(game_id, _get_game_or_404(store, game_id))


@router.get("/{game_id}/players/{player_name}/export", response_model=ExportResponse)
async def export_game_player(
    game_id: str,
    player_name: str,
    store: Annotated[GameStore, Depends(get_game_store)],
) -> ExportResponse:
    """
    Export a player as a transport string.

    The string is meant to be rendered as a QR code on the guest's device.
    """
    game = _get_game_or_404(store, game_id)
    player = game.get_player(player_name)
    if player is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Player '{player_name}' not found",
        )

    return ExportResponse(app_version=settings.app_version, data=encode_player(game, player))


@router.post("/{game_id}/players/import", response_model=ApiResponse[PlayerDto])
async def import_game_player(
    game_id: str,
    request: ImportPlayerRequest,
    store: Annotated[GameStore, Depends(get_game_store)],
) -> ApiResponse[Any]:
    """
    Import a scanned player into a game.

    On success the player joins the game and their cards leave its deck.
    On failure the game is unchanged and the response explains why; for
    unavailable cards it lists them.
    """
    game = _get_game_or_404(store, game_id)
    result = import_player(game, request.data)

    if isinstance(result, ImportFailure):
        items: list[str] = []
        if result.unavailable_cards is not None:
            items = summarize_unavailable_cards(result.unavailable_cards).as_items()
        return ApiResponse.known_failure(kind=result.kind, items=items)

    game.add_player(result.player)
    return ApiResponse.success(create_player_dto(result.player))
