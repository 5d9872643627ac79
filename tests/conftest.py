from typing import Any

import pytest
from factories import dweller_payload, export_payload, woody_plant_payload

from forestshare.catalog.factory import create_game
from forestshare.config import settings
from forestshare.models.card import GameBox
from forestshare.models.game import Game


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep compatibility gates at their defaults unless a test opts in."""
    monkeypatch.setattr(settings, "enforce_app_version_match", False)
    monkeypatch.setattr(settings, "enforce_game_boxes_match", False)
    yield


@pytest.fixture
def base_game() -> Game:
    """Game with only the base box enabled."""
    return create_game()


@pytest.fixture
def full_game() -> Game:
    """Game with every game box enabled."""
    return create_game(list(GameBox))


@pytest.fixture
def guest_payload() -> dict[str, Any]:
    """Payload resolvable in a base game: mirrors make_guest_player."""
    return export_payload(
        woody_plants=[
            woody_plant_payload(
                "OAK",
                "OAK",
                dwellers=[
                    dweller_payload("RED_SQUIRREL", "OAK", "TOP"),
                    dweller_payload("RED_FOX", "OAK", "LEFT"),
                ],
            ),
            woody_plant_payload(
                "BIRCH",
                "BIRCH",
                dwellers=[dweller_payload("FLY_AGARIC", "BIRCH", "BOTTOM")],
            ),
        ],
        card_count=7,
    )
