"""
Storage interfaces consumed by the service layer.

One abstract repository per aggregate. Services depend only on these
interfaces; ``flightdesk.database.repositories`` binds them to SQLAlchemy.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Basic CRUD operations shared by every aggregate."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with this id, or None."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persist a new entity and return it with its id assigned."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Persist changes made to an existing entity."""

    @abstractmethod
    def delete(self, entity_id: int) -> None:
        """Delete the entity with this id; missing ids are ignored."""

    @abstractmethod
    def exists(self, entity_id: int) -> bool:
        """Return True if an entity with this id is stored."""


class AirportRepository(Repository[Any]):
    """Airport storage."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Any]:
        """Return the airport holding this code, or None."""

    @abstractmethod
    def search_by_name_or_city(self, search_term: str) -> List[Any]:
        """Case-insensitive substring match on name, city or code."""


class AircraftRepository(Repository[Any]):
    """Aircraft storage."""

    @abstractmethod
    def get_by_registration_number(self, registration_number: str) -> Optional[Any]:
        """Return the aircraft holding this registration number, or None."""

    @abstractmethod
    def get_available_aircraft(self) -> List[Any]:
        """Return the aircraft that can be assigned to new flights."""


class FlightRepository(Repository[Any]):
    """Flight storage, with lookups that load related airports and aircraft."""

    @abstractmethod
    def get_by_id_with_details(self, flight_id: int) -> Optional[Any]:
        """The flight with its airports and aircraft loaded, or None."""

    @abstractmethod
    def get_all_with_details(self) -> List[Any]:
        """All flights, latest scheduled departure first."""

    @abstractmethod
    def get_flights_by_airport(self, airport_id: int) -> List[Any]:
        """Flights departing from or arriving at the airport."""

    @abstractmethod
    def get_flights_by_aircraft(self, aircraft_id: int) -> List[Any]:
        """Flights assigned to the aircraft."""

    @abstractmethod
    def get_by_flight_number(self, flight_number: str) -> Optional[Any]:
        """The first flight with this number, or None."""
