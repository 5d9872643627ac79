"""Dweller blueprints.

Animals printed on the left/right halves of a card exist once per side,
since position is part of a dweller's identity.
"""

from forestshare.models.blueprint import CardVariant, DwellerBlueprint
from forestshare.models.card import DwellerPosition, GameBox, TreeSymbol

_BASE = GameBox.BASE
_ALPINE = GameBox.ALPINE
_EDGE = GameBox.WOODLAND_EDGE


def _dweller(
    name: str,
    position: DwellerPosition,
    variants: list[tuple[GameBox, TreeSymbol, int]],
) -> DwellerBlueprint:
    return DwellerBlueprint(
        name=name,
        position=position,
        variants=tuple(CardVariant(box, symbol, count) for box, symbol, count in variants),
    )


def _sides(
    name: str, variants: list[tuple[GameBox, TreeSymbol, int]]
) -> tuple[DwellerBlueprint, DwellerBlueprint]:
    return (
        _dweller(name, DwellerPosition.LEFT, variants),
        _dweller(name, DwellerPosition.RIGHT, variants),
    )


TOP_DWELLERS = (
    _dweller("RED_SQUIRREL", DwellerPosition.TOP, [(_BASE, TreeSymbol.OAK, 2)]),
    _dweller("CHAFFINCH", DwellerPosition.TOP, [(_BASE, TreeSymbol.BEECH, 2)]),
    _dweller("BULLFINCH", DwellerPosition.TOP, [(_BASE, TreeSymbol.BIRCH, 2)]),
    _dweller("TAWNY_OWL", DwellerPosition.TOP, [(_BASE, TreeSymbol.LINDEN, 2)]),
    _dweller("GOSHAWK", DwellerPosition.TOP, [(_BASE, TreeSymbol.SILVER_FIR, 1)]),
    _dweller("BEARDED_VULTURE", DwellerPosition.TOP, [(_ALPINE, TreeSymbol.LARCH, 1)]),
    _dweller("EURASIAN_JAY", DwellerPosition.TOP, [(_EDGE, TreeSymbol.SYCAMORE, 1)]),
)

BOTTOM_DWELLERS = (
    _dweller("CHANTERELLE", DwellerPosition.BOTTOM, [(_BASE, TreeSymbol.DOUGLAS_FIR, 2)]),
    _dweller("FLY_AGARIC", DwellerPosition.BOTTOM, [(_BASE, TreeSymbol.BIRCH, 2)]),
    _dweller("MOSS", DwellerPosition.BOTTOM, [(_BASE, TreeSymbol.HORSE_CHESTNUT, 3)]),
    _dweller("WILD_STRAWBERRIES", DwellerPosition.BOTTOM, [(_BASE, TreeSymbol.SYCAMORE, 2)]),
    _dweller("EDELWEISS", DwellerPosition.BOTTOM, [(_ALPINE, TreeSymbol.STONE_PINE, 2)]),
    _dweller("GENTIAN", DwellerPosition.BOTTOM, [(_ALPINE, TreeSymbol.LARCH, 2)]),
)

SIDE_DWELLERS = (
    *_sides("RED_FOX", [(_BASE, TreeSymbol.OAK, 2), (_BASE, TreeSymbol.BEECH, 1)]),
    *_sides("WILD_BOAR", [(_BASE, TreeSymbol.LINDEN, 2)]),
    *_sides("BROWN_BEAR", [(_BASE, TreeSymbol.SILVER_FIR, 1)]),
    *_sides("EUROPEAN_HARE", [(_BASE, TreeSymbol.BIRCH, 3), (_BASE, TreeSymbol.SYCAMORE, 1)]),
    *_sides("MARMOT", [(_ALPINE, TreeSymbol.STONE_PINE, 2)]),
    *_sides("CHAMOIS", [(_ALPINE, TreeSymbol.LARCH, 1)]),
    *_sides("EUROPEAN_WILDCAT", [(_EDGE, TreeSymbol.BEECH, 1)]),
)

DWELLERS: tuple[DwellerBlueprint, ...] = TOP_DWELLERS + BOTTOM_DWELLERS + SIDE_DWELLERS
