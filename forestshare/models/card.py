"""
Catalog Card Models.

Cards are immutable values. Each instance carries a handle, an integer
that identifies one physical card within a deck. Copies made through
`with_dweller` or `with_card_count` keep the handle, so a card attached
to a player's forest can always be traced back to the deck entry it was
taken from.
"""

import itertools
from dataclasses import dataclass, field, replace
from enum import Enum

_handles = itertools.count(1)


def next_handle() -> int:
    """Allocate a process-wide unique card handle."""
    return next(_handles)


class GameBox(str, Enum):
    """A game box (base game or expansion) that contributes cards."""

    BASE = "BASE"
    ALPINE = "ALPINE"
    WOODLAND_EDGE = "WOODLAND_EDGE"
    EXPLORATION = "EXPLORATION"


class TreeSymbol(str, Enum):
    """Tree symbol printed in a card's corner."""

    LINDEN = "LINDEN"
    OAK = "OAK"
    SILVER_FIR = "SILVER_FIR"
    BIRCH = "BIRCH"
    BEECH = "BEECH"
    SYCAMORE = "SYCAMORE"
    DOUGLAS_FIR = "DOUGLAS_FIR"
    HORSE_CHESTNUT = "HORSE_CHESTNUT"
    LARCH = "LARCH"
    STONE_PINE = "STONE_PINE"


class DwellerPosition(str, Enum):
    """Side of a woody plant a dweller is attached to.

    Member order is the order dwellers are flattened in on export.
    """

    TOP = "TOP"
    RIGHT = "RIGHT"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"


@dataclass(frozen=True, slots=True)
class DwellerCard:
    """
    A dweller card half, attachable at one position.

    Attributes:
        name: Card identifier (e.g., "RED_SQUIRREL")
        game_box: Game box the card ships in
        tree_symbol: Tree symbol printed on the card, if any
        position: Position the card attaches at
        handle: Identity of this physical card
    """

    name: str
    game_box: GameBox
    tree_symbol: TreeSymbol | None
    position: DwellerPosition
    handle: int = field(default_factory=next_handle)


def empty_dwellers() -> dict[DwellerPosition, tuple[DwellerCard, ...]]:
    """Dweller mapping with every position present and empty."""
    return {position: () for position in DwellerPosition}


@dataclass(frozen=True, slots=True)
class WoodyPlantCard:
    """
    A tree or shrub card that hosts dwellers.

    Attributes:
        name: Card identifier (e.g., "OAK", "COMMON_HAZEL")
        game_box: Game box the card ships in
        tree_symbol: Tree symbol printed on the card, if any
        dwellers: Attached dwellers per position, in attachment order
        handle: Identity of this physical card
    """

    name: str
    game_box: GameBox
    tree_symbol: TreeSymbol | None = None
    dwellers: dict[DwellerPosition, tuple[DwellerCard, ...]] = field(
        default_factory=empty_dwellers
    )
    handle: int = field(default_factory=next_handle)

    def with_dweller(self, dweller: DwellerCard, position: DwellerPosition) -> "WoodyPlantCard":
        """Return a snapshot of this card with `dweller` appended at `position`."""
        dwellers = dict(self.dwellers)
        dwellers[position] = dwellers.get(position, ()) + (dweller,)
        return replace(self, dwellers=dwellers)

    def all_dwellers(self) -> list[tuple[DwellerPosition, DwellerCard]]:
        """Attached dwellers flattened in position order."""
        return [
            (position, dweller)
            for position in DwellerPosition
            for dweller in self.dwellers.get(position, ())
        ]


@dataclass(frozen=True, slots=True)
class Cave:
    """
    A cave card. Identified by name; card_count is a quantity.

    Attributes:
        name: Cave identifier (e.g., "REGULAR_CAVE")
        card_count: Number of cards the player has put into the cave
        handle: Identity of this physical card
    """

    name: str
    card_count: int = 0
    handle: int = field(default_factory=next_handle)

    def with_card_count(self, card_count: int) -> "Cave":
        """Return a copy of this cave holding `card_count` cards."""
        return replace(self, card_count=card_count)
