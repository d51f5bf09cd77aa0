"""
Tests for validation results and service exceptions.
"""

import pytest

from flightdesk.services.exceptions import (
    EntityNotFoundError,
    FlightDeskError,
    InvalidSelectionError,
    ReferentialConflictError,
    ValidationFailedError,
)
from flightdesk.services.validation import (
    FailureReason,
    ValidationResult,
    referential_conflict_message,
)


class TestValidationResult:
    """Test cases for ValidationResult."""

    def test_success_is_valid(self):
        result = ValidationResult.success()

        assert result.is_valid
        assert result.reason is None
        assert result.message is None

    def test_failure_carries_reason_and_message(self):
        result = ValidationResult.failure(
            FailureReason.DUPLICATE_KEY, "An airport with code 'LIS' already exists.", field="code"
        )

        assert not result.is_valid
        assert result.reason is FailureReason.DUPLICATE_KEY
        assert result.message == "An airport with code 'LIS' already exists."
        assert result.field == "code"

    def test_result_is_immutable(self):
        result = ValidationResult.success()
        with pytest.raises(AttributeError):
            result.message = "changed"


class TestReferentialConflictMessage:

    def test_airport_message(self):
        assert referential_conflict_message("Airport", 3) == (
            "Cannot delete this airport. It has 3 associated flight(s)."
        )

    def test_aircraft_message(self):
        assert referential_conflict_message("Aircraft", 1) == (
            "Cannot delete this aircraft. It has 1 associated flight(s)."
        )


class TestExceptions:
    """Test cases for the service exception hierarchy."""

    def test_entity_not_found(self):
        """Test the not-found message and reason."""
        error = EntityNotFoundError("Airport", 42)

        assert isinstance(error, FlightDeskError)
        assert str(error) == "Airport with ID 42 not found"
        assert error.reason is FailureReason.REFERENCED_ENTITY_NOT_FOUND
        assert error.details == {"entity": "Airport", "id": 42}

    def test_invalid_selection_lists_missing_references(self):
        """Test the selection error keeps the submitted ids."""
        error = InvalidSelectionError(1, 2, 3, missing=["aircraft"])

        assert error.message == "Invalid airport or aircraft selection"
        assert error.details["aircraft_id"] == 3
        assert error.details["missing"] == ["aircraft"]

    def test_referential_conflict(self):
        """Test the blocked-delete error exposes the flight count."""
        error = ReferentialConflictError("Aircraft", 7, 2)

        assert error.flight_count == 2
        assert error.reason is FailureReason.REFERENTIAL_CONFLICT
        assert "2 associated flight(s)" in error.message

    def test_validation_failed_wraps_result(self):
        """Test the validation error exposes the failing result."""
        result = ValidationResult.failure(
            FailureReason.INVALID_FIELD, "Max range must be greater than zero.", field="max_range_km"
        )
        error = ValidationFailedError(result)

        assert error.result is result
        assert error.reason is FailureReason.INVALID_FIELD
        assert error.details == {"field": "max_range_km"}

    def test_to_dict(self):
        """Test exception serialization for API responses."""
        payload = EntityNotFoundError("Flight", 5).to_dict()

        assert payload == {
            "error": "ENTITY_NOT_FOUND",
            "reason": "referenced_entity_not_found",
            "message": "Flight with ID 5 not found",
            "details": {"entity": "Flight", "id": 5},
        }
