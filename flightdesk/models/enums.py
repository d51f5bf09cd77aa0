"""
Enums for the flightdesk application.

This module contains the enumeration types shared by the database layer and
the data-transfer models.
"""

from enum import IntEnum


class FlightStatus(IntEnum):
    """Flight status enumeration, persisted as its integer value."""
    SCHEDULED = 0
    BOARDING = 1
    DEPARTED = 2
    IN_FLIGHT = 3
    LANDED = 4
    CANCELLED = 5

    @property
    def label(self) -> str:
        """Display name, e.g. ``InFlight``."""
        return "".join(part.capitalize() for part in self.name.split("_"))
