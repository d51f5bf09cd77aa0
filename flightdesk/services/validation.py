"""
Validation result type shared by the service layer.

Business-rule checks return a ValidationResult instead of raising: either a
success, or a typed reason with a message suitable for the end user.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Why a validation or an operation was rejected."""
    DUPLICATE_KEY = "duplicate_key"
    INVALID_FIELD = "invalid_field"
    REFERENCED_ENTITY_NOT_FOUND = "referenced_entity_not_found"
    REFERENTIAL_CONFLICT = "referential_conflict"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check."""
    reason: Optional[FailureReason] = None
    message: Optional[str] = None
    field: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, reason: FailureReason, message: str, field: Optional[str] = None) -> "ValidationResult":
        return cls(reason=reason, message=message, field=field)


def referential_conflict_message(entity: str, flight_count: int) -> str:
    """Message shown when a delete is blocked by referencing flights."""
    return f"Cannot delete this {entity.lower()}. It has {flight_count} associated flight(s)."


__all__ = ['FailureReason', 'ValidationResult', 'referential_conflict_message']
