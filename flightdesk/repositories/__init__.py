"""
Repository interfaces for the flightdesk service layer.
"""

from .interfaces import (
    Repository,
    AirportRepository,
    AircraftRepository,
    FlightRepository,
)

__all__ = [
    'Repository',
    'AirportRepository',
    'AircraftRepository',
    'FlightRepository',
]
