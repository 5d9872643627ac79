"""
Live game state: the deck of available cards, players and their forests.

The deck lists the cards nobody has claimed yet. Adding a player claims
every card in their forest, so the same physical card can never end up
in two forests.
"""

from dataclasses import dataclass, field

from forestshare.models.card import Cave, DwellerCard, GameBox, WoodyPlantCard
from forestshare.models.failure import FailureKind, KnownError


@dataclass(frozen=True)
class Deck:
    """
    Cards available in a game.

    Attributes:
        woody_plants: Unclaimed tree and shrub cards
        dwellers: Unclaimed dweller cards
        caves: Unclaimed caves
    """

    woody_plants: tuple[WoodyPlantCard, ...] = ()
    dwellers: tuple[DwellerCard, ...] = ()
    caves: tuple[Cave, ...] = ()

    def without(self, handles: set[int]) -> "Deck":
        """Return a deck with the cards identified by `handles` removed."""
        return Deck(
            woody_plants=tuple(c for c in self.woody_plants if c.handle not in handles),
            dwellers=tuple(c for c in self.dwellers if c.handle not in handles),
            caves=tuple(c for c in self.caves if c.handle not in handles),
        )

    def cave_names(self) -> list[str]:
        """Distinct cave names in deck order."""
        return list(dict.fromkeys(cave.name for cave in self.caves))


@dataclass(frozen=True)
class Forest:
    """A player's woody plants (with attached dwellers) and cave."""

    cave: Cave
    woody_plants: tuple[WoodyPlantCard, ...] = ()

    def handles(self) -> set[int]:
        """Handles of every card in the forest, dwellers included."""
        handles = {self.cave.handle}
        for woody_plant in self.woody_plants:
            handles.add(woody_plant.handle)
            handles.update(dweller.handle for _, dweller in woody_plant.all_dwellers())
        return handles


@dataclass(frozen=True)
class Player:
    """A scored player."""

    name: str
    forest: Forest


@dataclass
class Game:
    """
    A scoring session.

    Attributes:
        game_boxes: Enabled game boxes
        deck: Cards not yet claimed by any player
        players: Players in the order they joined
    """

    game_boxes: tuple[GameBox, ...]
    deck: Deck
    players: list[Player] = field(default_factory=list)

    def has_player(self, name: str) -> bool:
        return any(player.name == name for player in self.players)

    def get_player(self, name: str) -> Player | None:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def add_player(self, player: Player) -> None:
        """
        Add a player and claim their cards from the deck.

        Raises:
            KnownError: If a player with the same name already exists
        """
        if self.has_player(player.name):
            raise KnownError(
                kind=FailureKind.DUPLICATE_PLAYER,
                message=f"Player '{player.name}' already exists in this game.",
                suggestion="Choose a different player name.",
                status_code=409,
            )
        self.players.append(player)
        self.deck = self.deck.without(player.forest.handles())
