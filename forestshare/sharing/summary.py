"""
Human-readable summary of unavailable cards.

Turns the DTOs collected by a failed import into short display lines:
identical cards are grouped with a count, and the list is capped with an
overflow counter for whatever did not fit.
"""

from dataclasses import dataclass, field

from forestshare.config import MAX_UNAVAILABLE_CARD_LINES
from forestshare.sharing.reconciler import UnavailableCards
from forestshare.sharing.schemas import DwellerCardDto, WoodyPlantCardDto


@dataclass
class UnavailableCardsSummary:
    """
    Display lines for an UNAVAILABLE_CARDS failure.

    Attributes:
        lines: One line per distinct card, at most the configured cap
        remaining: Number of distinct cards left out of `lines`
    """

    lines: list[str] = field(default_factory=list)
    remaining: int = 0

    def as_items(self) -> list[str]:
        """Lines plus a trailing overflow line when cards were left out."""
        if self.remaining > 0:
            return [*self.lines, f"and {self.remaining} more..."]
        return list(self.lines)


def display_name(identifier: str) -> str:
    """Convert a catalog identifier to display text ("RED_SQUIRREL" -> "Red Squirrel")."""
    return identifier.replace("_", " ").title()


def _card_specifier(card: DwellerCardDto | WoodyPlantCardDto, extra: list[str]) -> str:
    name = display_name(card.name)

    details: list[str] = []
    if card.tree_symbol is not None:
        tree_symbol = display_name(card.tree_symbol.value)
        # Trees carry their own species as symbol; don't repeat it
        if tree_symbol != name:
            details.append(tree_symbol)
    details.extend(extra)

    if not details:
        return name
    return f"{name} ({', '.join(details)})"


def describe_unavailable_cards(unavailable: UnavailableCards) -> list[str]:
    """One specifier per unavailable entry: cave, then woody plants, then dwellers."""
    specifiers: list[str] = []
    if unavailable.cave is not None:
        specifiers.append(display_name(unavailable.cave.name))
    specifiers.extend(_card_specifier(w, []) for w in unavailable.woody_plants)
    specifiers.extend(
        _card_specifier(d, [display_name(d.position.value)]) for d in unavailable.dwellers
    )
    return specifiers


def summarize_unavailable_cards(
    unavailable: UnavailableCards,
    max_items: int = MAX_UNAVAILABLE_CARD_LINES,
) -> UnavailableCardsSummary:
    """
    Group and cap the unavailable-card specifiers.

    Groups keep first-seen order; a group of more than one card gets a
    "(Nx)" suffix.
    """
    counts: dict[str, int] = {}
    for specifier in describe_unavailable_cards(unavailable):
        counts[specifier] = counts.get(specifier, 0) + 1

    lines = [
        specifier if count == 1 else f"{specifier} ({count}x)"
        for specifier, count in counts.items()
    ]
    return UnavailableCardsSummary(
        lines=lines[:max_items],
        remaining=max(len(lines) - max_items, 0),
    )
