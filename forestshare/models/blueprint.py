"""
Card Blueprints.

A blueprint describes a card as printed: its name and every variant
(game box and tree symbol) it was printed in, with the number of copies.
Blueprints are static; decks are built by materializing them.
"""

from dataclasses import dataclass

from forestshare.models.card import DwellerPosition, GameBox, TreeSymbol


@dataclass(frozen=True, slots=True)
class CardVariant:
    """One printing of a card."""

    game_box: GameBox
    tree_symbol: TreeSymbol | None = None
    count: int = 1

    def matches(self, game_box: GameBox, tree_symbol: TreeSymbol | None) -> bool:
        return self.game_box == game_box and self.tree_symbol == tree_symbol


@dataclass(frozen=True, slots=True)
class WoodyPlantBlueprint:
    """
    A tree or shrub as printed.

    Attributes:
        name: Card identifier
        variants: Printings of the card
        is_part_of_deck: False for cards that never enter the shuffled deck
            (e.g. saplings played face down). Such cards can still be
            imported straight from the blueprint.
    """

    name: str
    variants: tuple[CardVariant, ...]
    is_part_of_deck: bool = True

    def find_variant(
        self, game_box: GameBox, tree_symbol: TreeSymbol | None
    ) -> CardVariant | None:
        for variant in self.variants:
            if variant.matches(game_box, tree_symbol):
                return variant
        return None


@dataclass(frozen=True, slots=True)
class DwellerBlueprint:
    """A dweller card half as printed, bound to one position."""

    name: str
    position: DwellerPosition
    variants: tuple[CardVariant, ...]


@dataclass(frozen=True, slots=True)
class CaveBlueprint:
    """A cave as printed."""

    name: str
    game_box: GameBox
    count: int = 1
