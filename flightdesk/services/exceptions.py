"""
flightdesk service exceptions.

Hard failures: operations that reference records which do not exist, deletes
blocked by dependent flights, and writes attempted with input that fails
validation.
"""

from typing import Optional, Dict, Any

from .validation import FailureReason, ValidationResult, referential_conflict_message


class FlightDeskError(Exception):
    """Base exception for service errors."""

    def __init__(
        self,
        message: str,
        code: str = "FLIGHTDESK_ERROR",
        reason: Optional[FailureReason] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.reason = reason
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "details": self.details,
        }


class EntityNotFoundError(FlightDeskError):
    """Raised when an operation targets an id that does not exist."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(
            message=f"{entity} with ID {entity_id} not found",
            code="ENTITY_NOT_FOUND",
            reason=FailureReason.REFERENCED_ENTITY_NOT_FOUND,
            details={"entity": entity, "id": entity_id}
        )


class InvalidSelectionError(FlightDeskError):
    """Raised when a flight's airports or aircraft cannot be resolved."""

    def __init__(
        self,
        departure_airport_id: int,
        destination_airport_id: int,
        aircraft_id: int,
        missing: Optional[list] = None
    ):
        super().__init__(
            message="Invalid airport or aircraft selection",
            code="INVALID_SELECTION",
            reason=FailureReason.REFERENCED_ENTITY_NOT_FOUND,
            details={
                "departure_airport_id": departure_airport_id,
                "destination_airport_id": destination_airport_id,
                "aircraft_id": aircraft_id,
                "missing": missing or [],
            }
        )


class ReferentialConflictError(FlightDeskError):
    """Raised when deleting a record that flights still reference."""

    def __init__(self, entity: str, entity_id: int, flight_count: int):
        super().__init__(
            message=referential_conflict_message(entity, flight_count),
            code="REFERENTIAL_CONFLICT",
            reason=FailureReason.REFERENTIAL_CONFLICT,
            details={"entity": entity, "id": entity_id, "flight_count": flight_count}
        )
        self.flight_count = flight_count


class ValidationFailedError(FlightDeskError):
    """Raised when a create or update is attempted with invalid input."""

    def __init__(self, result: ValidationResult):
        details = {"field": result.field} if result.field else {}
        super().__init__(
            message=result.message or "Validation failed",
            code="VALIDATION_FAILED",
            reason=result.reason,
            details=details
        )
        self.result = result


__all__ = [
    'FlightDeskError',
    'EntityNotFoundError',
    'InvalidSelectionError',
    'ReferentialConflictError',
    'ValidationFailedError',
]
