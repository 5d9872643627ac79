"""
Failure Classification: Import Outcomes and Response Envelope.

Every way a player import can fail is classified into exactly one
FailureKind. The reconciler is the only component that decides which
kind applies; everything downstream (API, UI) only maps kinds to text.

Failure kinds raised during import:
- INVALID_DATA: the scanned string could not be decoded at all
- INVALID_SCHEMA: the decoded value has the wrong shape
- APP_VERSION_MISMATCH: producer and receiver versions are incompatible
- GAME_BOXES_MISMATCH: producer and receiver enabled different expansions
- UNAVAILABLE_CARDS: the payload names cards the receiver's deck lacks

All of them are recoverable by re-scanning or adjusting the game setup.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Transport failures
    INVALID_DATA = "INVALID_DATA"
    INVALID_SCHEMA = "INVALID_SCHEMA"

    # Compatibility failures
    APP_VERSION_MISMATCH = "APP_VERSION_MISMATCH"
    GAME_BOXES_MISMATCH = "GAME_BOXES_MISMATCH"

    # Reconciliation failures
    UNAVAILABLE_CARDS = "UNAVAILABLE_CARDS"

    # Game bookkeeping
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_PLAYER = "DUPLICATE_PLAYER"

    # Unknown
    UNKNOWN = "UNKNOWN"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


# Standard messages, fixed and predictable, one per failure kind.

IMPORT_FAILURE_MESSAGES: dict[FailureKind, str] = {
    FailureKind.INVALID_DATA: "The scanned data is invalid.",
    FailureKind.INVALID_SCHEMA: "The scanned data is incompatible with this app version.",
    FailureKind.APP_VERSION_MISMATCH: "The player uses an incompatible app version.",
    FailureKind.GAME_BOXES_MISMATCH: "The player has selected different expansions than you.",
    FailureKind.UNAVAILABLE_CARDS: "Some cards are not available for import.",
    FailureKind.NOT_FOUND: "The requested game or player does not exist.",
    FailureKind.DUPLICATE_PLAYER: "A player with this name already exists.",
    FailureKind.UNKNOWN: "Something went wrong and the cause is unknown.",
}

IMPORT_FAILURE_SUGGESTIONS: dict[FailureKind, str] = {
    FailureKind.INVALID_DATA: "Scan the code again.",
    FailureKind.INVALID_SCHEMA: "Scan the code again, or check that both sides run this app.",
    FailureKind.APP_VERSION_MISMATCH: "Update the app on one of the devices.",
    FailureKind.GAME_BOXES_MISMATCH: "Select the same expansions on both devices.",
    FailureKind.UNAVAILABLE_CARDS: (
        "Free up or enable the listed cards and retry, or enter the player manually."
    ),
    FailureKind.NOT_FOUND: "Check the game id and player name.",
    FailureKind.DUPLICATE_PLAYER: "Choose a different player name.",
    FailureKind.UNKNOWN: "If this persists, please report the issue.",
}


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )
    items: list[str] = Field(
        default_factory=list,
        description="Itemised specifics, e.g. the cards that could not be imported",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for API endpoints that report classified outcomes.

    Every response is either a success carrying data, or a failure
    carrying a FailureDetail.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        detail: str | None = None,
        items: list[str] | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Message and suggestion are the standard ones for the kind;
        only the technical detail and the itemised list vary.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=IMPORT_FAILURE_MESSAGES[kind],
                detail=detail,
                suggestion=IMPORT_FAILURE_SUGGESTIONS[kind],
                items=items or [],
            ),
        )

    @classmethod
    def unknown_failure(
        cls,
        detail: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create an unknown failure response.

        This is the catch-all for unexpected exceptions.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message=IMPORT_FAILURE_MESSAGES[FailureKind.UNKNOWN],
                detail=detail,
                suggestion=IMPORT_FAILURE_SUGGESTIONS[FailureKind.UNKNOWN],
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(kind=self.kind, detail=self.detail or self.message)


class DecodeError(KnownError):
    """
    Raised when a transport string cannot be turned back into a value.

    Covers non-base64 input, a corrupt or truncated deflate stream,
    and text that is not valid JSON. Callers never need to tell these apart.
    """

    def __init__(self, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_DATA,
            message=IMPORT_FAILURE_MESSAGES[FailureKind.INVALID_DATA],
            detail=detail,
            suggestion=IMPORT_FAILURE_SUGGESTIONS[FailureKind.INVALID_DATA],
        )


class SchemaError(KnownError):
    """
    Raised when a decoded value does not have the export payload's shape.

    This is a purely structural verdict. Whether the referenced cards
    exist is decided later, by the reconciler.
    """

    def __init__(self, error_count: int, detail: str | None = None):
        self.error_count = error_count
        super().__init__(
            kind=FailureKind.INVALID_SCHEMA,
            message=IMPORT_FAILURE_MESSAGES[FailureKind.INVALID_SCHEMA],
            detail=detail,
            suggestion=IMPORT_FAILURE_SUGGESTIONS[FailureKind.INVALID_SCHEMA],
        )
