"""Tree and shrub blueprints."""

from forestshare.models.blueprint import CardVariant, WoodyPlantBlueprint
from forestshare.models.card import GameBox, TreeSymbol


def _tree(name: str, game_box: GameBox, count: int) -> WoodyPlantBlueprint:
    # Trees carry their own species as tree symbol
    return WoodyPlantBlueprint(
        name=name,
        variants=(CardVariant(game_box, TreeSymbol(name), count),),
    )


def _shrub(name: str, tree_symbols: list[TreeSymbol]) -> WoodyPlantBlueprint:
    return WoodyPlantBlueprint(
        name=name,
        variants=tuple(
            CardVariant(GameBox.WOODLAND_EDGE, tree_symbol) for tree_symbol in tree_symbols
        ),
    )


LINDEN = _tree("LINDEN", GameBox.BASE, 9)
OAK = _tree("OAK", GameBox.BASE, 7)
SILVER_FIR = _tree("SILVER_FIR", GameBox.BASE, 6)
BIRCH = _tree("BIRCH", GameBox.BASE, 10)
BEECH = _tree("BEECH", GameBox.BASE, 10)
SYCAMORE = _tree("SYCAMORE", GameBox.BASE, 6)
DOUGLAS_FIR = _tree("DOUGLAS_FIR", GameBox.BASE, 7)
HORSE_CHESTNUT = _tree("HORSE_CHESTNUT", GameBox.BASE, 11)

LARCH = _tree("LARCH", GameBox.ALPINE, 7)
STONE_PINE = _tree("STONE_PINE", GameBox.ALPINE, 7)

COMMON_HAZEL = _shrub(
    "COMMON_HAZEL",
    [TreeSymbol.LINDEN, TreeSymbol.BIRCH, TreeSymbol.BEECH, TreeSymbol.HORSE_CHESTNUT],
)
BLACKTHORN = _shrub(
    "BLACKTHORN",
    [TreeSymbol.OAK, TreeSymbol.SILVER_FIR, TreeSymbol.SYCAMORE],
)
ELDERBERRY = _shrub(
    "ELDERBERRY",
    [TreeSymbol.BIRCH, TreeSymbol.DOUGLAS_FIR, TreeSymbol.OAK],
)

# Any card played face down; never drawn from the deck
TREE_SAPLING = WoodyPlantBlueprint(
    name="TREE_SAPLING",
    variants=(CardVariant(GameBox.BASE, None),),
    is_part_of_deck=False,
)

WOODY_PLANTS: tuple[WoodyPlantBlueprint, ...] = (
    LINDEN,
    OAK,
    SILVER_FIR,
    BIRCH,
    BEECH,
    SYCAMORE,
    DOUGLAS_FIR,
    HORSE_CHESTNUT,
    LARCH,
    STONE_PINE,
    COMMON_HAZEL,
    BLACKTHORN,
    ELDERBERRY,
    TREE_SAPLING,
)
