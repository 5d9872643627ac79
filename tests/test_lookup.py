"""Tests for the two-tier card lookup."""

from forestshare.catalog.factory import create_game
from forestshare.catalog.registry import BlueprintRegistry, get_blueprint_registry
from forestshare.models.blueprint import CardVariant, WoodyPlantBlueprint
from forestshare.models.card import DwellerPosition, GameBox, TreeSymbol
from forestshare.models.game import Game
from forestshare.sharing.lookup import CardLookup, DeckIndex
from forestshare.sharing.schemas import CaveDto, DwellerCardDto, WoodyPlantCardDto


def _woody_plant_dto(
    name: str,
    tree_symbol: TreeSymbol | None = None,
    game_box: GameBox = GameBox.BASE,
) -> WoodyPlantCardDto:
    return WoodyPlantCardDto(
        name=name, game_box=game_box, tree_symbol=tree_symbol, dwellers=()
    )


def _dweller_dto(
    name: str, tree_symbol: TreeSymbol, position: DwellerPosition
) -> DwellerCardDto:
    return DwellerCardDto(
        name=name, game_box=GameBox.BASE, tree_symbol=tree_symbol, position=position
    )


class TestDeckIndex:
    def test_takes_matching_instance(self, base_game: Game) -> None:
        index = DeckIndex(base_game.deck)

        card = index.take_woody_plant(_woody_plant_dto("OAK", TreeSymbol.OAK))

        assert card is not None
        assert card.name == "OAK"
        assert card.tree_symbol == TreeSymbol.OAK

    def test_each_instance_taken_once(self, base_game: Game) -> None:
        index = DeckIndex(base_game.deck)
        dto = _dweller_dto("RED_SQUIRREL", TreeSymbol.OAK, DwellerPosition.TOP)

        first = index.take_dweller(dto)
        second = index.take_dweller(dto)
        third = index.take_dweller(dto)

        assert first is not None and second is not None
        assert first.handle != second.handle
        assert third is None

    def test_takes_in_deck_order(self, base_game: Game) -> None:
        index = DeckIndex(base_game.deck)
        oaks = [c for c in base_game.deck.woody_plants if c.name == "OAK"]

        taken = [index.take_woody_plant(_woody_plant_dto("OAK", TreeSymbol.OAK)) for _ in oaks]

        assert [c.handle for c in taken if c is not None] == [c.handle for c in oaks]

    def test_game_box_is_part_of_identity(self, base_game: Game) -> None:
        index = DeckIndex(base_game.deck)

        card = index.take_woody_plant(
            _woody_plant_dto("OAK", TreeSymbol.OAK, game_box=GameBox.ALPINE)
        )

        assert card is None

    def test_position_is_part_of_identity(self, base_game: Game) -> None:
        index = DeckIndex(base_game.deck)

        assert index.take_dweller(_dweller_dto("RED_FOX", TreeSymbol.OAK, DwellerPosition.LEFT))
        top = _dweller_dto("RED_FOX", TreeSymbol.OAK, DwellerPosition.TOP)
        assert index.take_dweller(top) is None

    def test_cave_matched_by_name(self, base_game: Game) -> None:
        index = DeckIndex(base_game.deck)

        assert index.take_cave(CaveDto(name="REGULAR_CAVE", card_count=12)) is not None
        assert index.take_cave(CaveDto(name="CRYSTAL_CAVE", card_count=0)) is None

    def test_indexes_are_independent(self, base_game: Game) -> None:
        dto = _woody_plant_dto("SILVER_FIR", TreeSymbol.SILVER_FIR)
        first = DeckIndex(base_game.deck)
        while first.take_woody_plant(dto) is not None:
            pass

        assert DeckIndex(base_game.deck).take_woody_plant(dto) is not None


class TestCardLookup:
    def test_deck_hit_returns_deck_instance(self, base_game: Game) -> None:
        lookup = CardLookup(base_game.deck)

        card = lookup.find_woody_plant(_woody_plant_dto("BEECH", TreeSymbol.BEECH))

        assert card is not None
        assert card in base_game.deck.woody_plants

    def test_registry_fallback_for_non_deck_plant(self, base_game: Game) -> None:
        lookup = CardLookup(base_game.deck)

        first = lookup.find_woody_plant(_woody_plant_dto("TREE_SAPLING"))
        second = lookup.find_woody_plant(_woody_plant_dto("TREE_SAPLING"))

        assert first is not None and second is not None
        assert first.handle != second.handle
        assert first not in base_game.deck.woody_plants

    def test_no_fallback_for_deck_plant_of_disabled_box(self, base_game: Game) -> None:
        lookup = CardLookup(base_game.deck)

        assert lookup.find_woody_plant(
            _woody_plant_dto("LARCH", TreeSymbol.LARCH, game_box=GameBox.ALPINE)
        ) is None

    def test_no_fallback_for_dwellers(self) -> None:
        game = create_game()
        lookup = CardLookup(game.deck)
        dto = DwellerCardDto(
            name="MARMOT",
            game_box=GameBox.ALPINE,
            tree_symbol=TreeSymbol.STONE_PINE,
            position=DwellerPosition.LEFT,
        )

        assert lookup.find_dweller(dto) is None

    def test_uses_given_registry(self, base_game: Game) -> None:
        registry = get_blueprint_registry()
        custom = BlueprintRegistry(
            woody_plants=(
                *registry.woody_plants,
                WoodyPlantBlueprint(
                    name="HEDGE",
                    variants=(CardVariant(GameBox.WOODLAND_EDGE, TreeSymbol.BEECH),),
                    is_part_of_deck=False,
                ),
            ),
            dwellers=registry.dwellers,
            caves=registry.caves,
        )
        dto = _woody_plant_dto("HEDGE", TreeSymbol.BEECH, game_box=GameBox.WOODLAND_EDGE)

        assert CardLookup(base_game.deck).find_woody_plant(dto) is None
        card = CardLookup(base_game.deck, custom).find_woody_plant(dto)
        assert card is not None
        assert card.game_box == GameBox.WOODLAND_EDGE
