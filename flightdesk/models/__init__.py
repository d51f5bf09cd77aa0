"""
flightdesk Pydantic models package.

This package contains the Pydantic v2 data-transfer models exchanged between
the service layer and its callers.
"""

# Enums
from .enums import FlightStatus

# Reference data models
from .airport import AirportModel
from .aircraft import AircraftModel

# Flight models
from .flight import (
    FlightModel,
    FlightReportItemModel,
    FlightReportModel,
    SelectOptionModel,
    FlightFormDataModel,
)

__all__ = [
    # Enums
    "FlightStatus",

    # Reference data
    "AirportModel",
    "AircraftModel",

    # Flights
    "FlightModel",
    "FlightReportItemModel",
    "FlightReportModel",
    "SelectOptionModel",
    "FlightFormDataModel",
]
