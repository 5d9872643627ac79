"""
Transport DTOs and their structural validation.

The DTOs mirror the catalog entities, stripped down to what is needed to
re-identify a card on the receiving side. On the wire every key is
camelCase and an absent tree symbol is omitted.

Validation here is purely structural. It runs before any catalog lookup
and never asks whether a referenced card exists.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from forestshare.models.card import DwellerPosition, GameBox, TreeSymbol
from forestshare.models.failure import SchemaError

# Number of individual validation errors quoted in SchemaError.detail
MAX_REPORTED_ERRORS = 3


class TransportModel(BaseModel):
    """Base for transport DTOs: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Wire representation, ready for the codec."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DwellerCardDto(TransportModel):
    name: StrictStr
    game_box: GameBox
    tree_symbol: TreeSymbol | None = None
    position: DwellerPosition


class WoodyPlantCardDto(TransportModel):
    name: StrictStr
    game_box: GameBox
    tree_symbol: TreeSymbol | None = None
    dwellers: tuple[DwellerCardDto, ...]


class CaveDto(TransportModel):
    name: StrictStr
    card_count: Annotated[StrictInt, Field(ge=0)]


class ForestDto(TransportModel):
    woody_plants: tuple[WoodyPlantCardDto, ...]
    cave: CaveDto


class PlayerDto(TransportModel):
    name: StrictStr
    forest: ForestDto


class PlayerExportDto(TransportModel):
    """
    Root transport object.

    Attributes:
        app_version: Version of the producing app
        game_boxes: Game boxes enabled on the producing side
        player: The exported player
    """

    app_version: StrictStr
    game_boxes: tuple[GameBox, ...]
    player: PlayerDto


def _describe_errors(error: ValidationError) -> str:
    parts = [
        f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors()[:MAX_REPORTED_ERRORS]
    ]
    if error.error_count() > MAX_REPORTED_ERRORS:
        parts.append(f"and {error.error_count() - MAX_REPORTED_ERRORS} more")
    return "; ".join(parts)


def validate_export_payload(raw: Any) -> PlayerExportDto:
    """
    Validate a decoded value against the export payload shape.

    Args:
        raw: Value returned by the codec (normally a dict)

    Returns:
        The validated PlayerExportDto

    Raises:
        SchemaError: On a missing field, a wrong primitive type, or an
            enum value outside the known game boxes, tree symbols or
            dweller positions
    """
    try:
        return PlayerExportDto.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(error_count=e.error_count(), detail=_describe_errors(e)) from e
