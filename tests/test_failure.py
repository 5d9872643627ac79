"""Tests for failure classification and the response envelope."""

import pytest

from forestshare.models.failure import (
    IMPORT_FAILURE_MESSAGES,
    IMPORT_FAILURE_SUGGESTIONS,
    ApiResponse,
    DecodeError,
    FailureKind,
    KnownError,
    OutcomeType,
    SchemaError,
)


class TestStandardMessages:
    @pytest.mark.parametrize("kind", list(FailureKind))
    def test_every_kind_has_message_and_suggestion(self, kind: FailureKind) -> None:
        assert IMPORT_FAILURE_MESSAGES[kind]
        assert IMPORT_FAILURE_SUGGESTIONS[kind]


class TestApiResponse:
    def test_success(self) -> None:
        response = ApiResponse.success({"name": "Alex"})

        assert response.outcome == OutcomeType.SUCCESS
        assert response.data == {"name": "Alex"}
        assert response.failure is None

    def test_known_failure_uses_standard_text(self) -> None:
        response = ApiResponse.known_failure(
            FailureKind.UNAVAILABLE_CARDS, items=["Larch", "and 2 more..."]
        )

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.data is None
        assert response.failure is not None
        assert response.failure.message == IMPORT_FAILURE_MESSAGES[FailureKind.UNAVAILABLE_CARDS]
        assert response.failure.items == ["Larch", "and 2 more..."]

    def test_known_failure_without_items(self) -> None:
        response = ApiResponse.known_failure(FailureKind.INVALID_DATA)

        assert response.failure is not None
        assert response.failure.items == []
        assert response.failure.detail is None

    def test_unknown_failure(self) -> None:
        response = ApiResponse.unknown_failure(detail="boom")

        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.UNKNOWN
        assert response.failure.detail == "boom"

    def test_serializes_kind_as_string(self) -> None:
        payload = ApiResponse.known_failure(FailureKind.INVALID_SCHEMA).model_dump(mode="json")

        assert payload["failure"]["kind"] == "INVALID_SCHEMA"
        assert payload["outcome"] == "known_failure"


class TestKnownErrors:
    def test_decode_error_is_invalid_data(self) -> None:
        error = DecodeError(detail="Not base64")

        assert isinstance(error, KnownError)
        assert error.kind == FailureKind.INVALID_DATA
        assert error.detail == "Not base64"

    def test_schema_error_carries_error_count(self) -> None:
        error = SchemaError(error_count=4, detail="player: Field required")

        assert error.kind == FailureKind.INVALID_SCHEMA
        assert error.error_count == 4

    def test_to_response_falls_back_to_message(self) -> None:
        error = KnownError(FailureKind.NOT_FOUND, message="Game 'x' not found")

        response = error.to_response()

        assert response.failure is not None
        assert response.failure.kind == FailureKind.NOT_FOUND
        assert response.failure.detail == "Game 'x' not found"
