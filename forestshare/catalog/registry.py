"""
Blueprint registry.

Global, static catalog of every card blueprint regardless of which game
boxes a game enables. The reconciler consults it as a second lookup tier
for woody plants that are deliberately kept out of the deck.
"""

from dataclasses import dataclass
from functools import lru_cache

from forestshare.catalog.caves import CAVES
from forestshare.catalog.dwellers import DWELLERS
from forestshare.catalog.woody_plants import WOODY_PLANTS
from forestshare.models.blueprint import (
    CardVariant,
    CaveBlueprint,
    DwellerBlueprint,
    WoodyPlantBlueprint,
)
from forestshare.models.card import GameBox, TreeSymbol


@dataclass(frozen=True)
class BlueprintRegistry:
    """All known blueprints, grouped by card type."""

    woody_plants: tuple[WoodyPlantBlueprint, ...]
    dwellers: tuple[DwellerBlueprint, ...]
    caves: tuple[CaveBlueprint, ...]

    def get_woody_plant(self, name: str) -> WoodyPlantBlueprint | None:
        for blueprint in self.woody_plants:
            if blueprint.name == name:
                return blueprint
        return None

    def find_non_deck_woody_plant(
        self,
        name: str,
        game_box: GameBox,
        tree_symbol: TreeSymbol | None,
    ) -> tuple[WoodyPlantBlueprint, CardVariant] | None:
        """
        Find a woody plant printing that is never part of the deck.

        Returns:
            (blueprint, variant) if `name` is a non-deck blueprint printed
            with the given game box and tree symbol, None otherwise
        """
        blueprint = self.get_woody_plant(name)
        if blueprint is None or blueprint.is_part_of_deck:
            return None

        variant = blueprint.find_variant(game_box, tree_symbol)
        if variant is None:
            return None

        return blueprint, variant


@lru_cache(maxsize=1)
def get_blueprint_registry() -> BlueprintRegistry:
    """Get the cached blueprint registry."""
    return BlueprintRegistry(
        woody_plants=WOODY_PLANTS,
        dwellers=DWELLERS,
        caves=CAVES,
    )
