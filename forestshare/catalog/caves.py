"""Cave blueprints."""

from forestshare.models.blueprint import CaveBlueprint
from forestshare.models.card import GameBox

REGULAR_CAVE = CaveBlueprint(name="REGULAR_CAVE", game_box=GameBox.BASE, count=5)
BEAR_CAVE = CaveBlueprint(name="BEAR_CAVE", game_box=GameBox.EXPLORATION)
CRYSTAL_CAVE = CaveBlueprint(name="CRYSTAL_CAVE", game_box=GameBox.EXPLORATION)

CAVES: tuple[CaveBlueprint, ...] = (REGULAR_CAVE, BEAR_CAVE, CRYSTAL_CAVE)
