"""
Business logic services for flightdesk.

This package contains the flight metric calculators, the validation result
type, the service exceptions and one service class per aggregate.
"""

from .calculations import (
    FlightMetrics,
    calculate_distance,
    calculate_fuel_required,
    calculate_flight_time,
    calculate_flight_metrics,
)
from .validation import FailureReason, ValidationResult
from .exceptions import (
    FlightDeskError,
    EntityNotFoundError,
    InvalidSelectionError,
    ReferentialConflictError,
    ValidationFailedError,
)
from .airport_service import AirportService
from .aircraft_service import AircraftService
from .flight_service import FlightService

__all__ = [
    'FlightMetrics',
    'calculate_distance',
    'calculate_fuel_required',
    'calculate_flight_time',
    'calculate_flight_metrics',
    'FailureReason',
    'ValidationResult',
    'FlightDeskError',
    'EntityNotFoundError',
    'InvalidSelectionError',
    'ReferentialConflictError',
    'ValidationFailedError',
    'AirportService',
    'AircraftService',
    'FlightService',
]
