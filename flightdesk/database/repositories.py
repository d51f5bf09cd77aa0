"""
SQLAlchemy-backed repositories.

Each repository wraps a single Session and commits after every write, so one
service call maps to at most one committed row change.
"""

import logging
from typing import List, Optional, Type

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from ..repositories.interfaces import (
    AircraftRepository,
    AirportRepository,
    FlightRepository,
    Repository,
)
from .models import Aircraft, Airport, Flight

logger = logging.getLogger(__name__)


class SqlAlchemyRepository(Repository):
    """Generic CRUD repository over one mapped class."""

    model: Type = None

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, entity_id: int):
        return self.session.get(self.model, entity_id)

    def get_all(self) -> List:
        return self.session.query(self.model).order_by(self.model.id).all()

    def add(self, entity):
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        logger.debug(f"Added {entity!r}")
        return entity

    def update(self, entity) -> None:
        self.session.add(entity)
        self.session.commit()
        # Reload so relationships follow changed foreign keys
        self.session.refresh(entity)
        logger.debug(f"Updated {entity!r}")

    def delete(self, entity_id: int) -> None:
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()
        logger.debug(f"Deleted {self.model.__name__} {entity_id}")

    def exists(self, entity_id: int) -> bool:
        return self.session.query(self.model.id).filter(self.model.id == entity_id).first() is not None


class SqlAlchemyAirportRepository(SqlAlchemyRepository, AirportRepository):
    model = Airport

    def get_by_code(self, code: str) -> Optional[Airport]:
        return self.session.query(Airport).filter(Airport.code == code).first()

    def search_by_name_or_city(self, search_term: str) -> List[Airport]:
        pattern = f"%{search_term.lower()}%"
        return (
            self.session.query(Airport)
            .filter(or_(
                func.lower(Airport.name).like(pattern),
                func.lower(Airport.city).like(pattern),
                func.lower(Airport.code).like(pattern),
            ))
            .order_by(Airport.code)
            .all()
        )


class SqlAlchemyAircraftRepository(SqlAlchemyRepository, AircraftRepository):
    model = Aircraft

    def get_by_registration_number(self, registration_number: str) -> Optional[Aircraft]:
        return (
            self.session.query(Aircraft)
            .filter(Aircraft.registration_number == registration_number)
            .first()
        )

    def get_available_aircraft(self) -> List[Aircraft]:
        # No maintenance or scheduling data yet, so every aircraft is available
        return self.get_all()


class SqlAlchemyFlightRepository(SqlAlchemyRepository, FlightRepository):
    model = Flight

    def _with_details(self):
        return self.session.query(Flight).options(
            joinedload(Flight.departure_airport),
            joinedload(Flight.destination_airport),
            joinedload(Flight.aircraft),
        )

    def get_by_id_with_details(self, flight_id: int) -> Optional[Flight]:
        return self._with_details().filter(Flight.id == flight_id).first()

    def get_all_with_details(self) -> List[Flight]:
        return self._with_details().order_by(Flight.scheduled_departure.desc()).all()

    def get_flights_by_airport(self, airport_id: int) -> List[Flight]:
        return (
            self._with_details()
            .filter(or_(
                Flight.departure_airport_id == airport_id,
                Flight.destination_airport_id == airport_id,
            ))
            .all()
        )

    def get_flights_by_aircraft(self, aircraft_id: int) -> List[Flight]:
        return self._with_details().filter(Flight.aircraft_id == aircraft_id).all()

    def get_by_flight_number(self, flight_number: str) -> Optional[Flight]:
        return self._with_details().filter(Flight.flight_number == flight_number).first()


__all__ = [
    'SqlAlchemyRepository',
    'SqlAlchemyAirportRepository',
    'SqlAlchemyAircraftRepository',
    'SqlAlchemyFlightRepository',
]
