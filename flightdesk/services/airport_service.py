"""
Airport service.

CRUD operations on airports, the airport-code uniqueness rule and the delete
guard that keeps airports referenced by flights.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..database.models import Airport, utcnow
from ..database.repositories import SqlAlchemyAirportRepository, SqlAlchemyFlightRepository
from ..models.airport import AirportModel
from ..repositories.interfaces import AirportRepository, FlightRepository
from .exceptions import EntityNotFoundError, ReferentialConflictError, ValidationFailedError
from .validation import FailureReason, ValidationResult, referential_conflict_message

logger = logging.getLogger(__name__)


class AirportService:
    """Airport management on top of the airport and flight repositories."""

    def __init__(self, airport_repository: AirportRepository, flight_repository: FlightRepository):
        self.airport_repository = airport_repository
        self.flight_repository = flight_repository

    @classmethod
    def from_session(cls, session: Session) -> "AirportService":
        """Build the service over SQLAlchemy repositories sharing one session."""
        return cls(SqlAlchemyAirportRepository(session), SqlAlchemyFlightRepository(session))

    def get_by_id(self, airport_id: int) -> Optional[AirportModel]:
        airport = self.airport_repository.get_by_id(airport_id)
        return None if airport is None else AirportModel.model_validate(airport)

    def get_all(self) -> List[AirportModel]:
        return [AirportModel.model_validate(a) for a in self.airport_repository.get_all()]

    def get_by_code(self, code: str) -> Optional[AirportModel]:
        airport = self.airport_repository.get_by_code(code)
        return None if airport is None else AirportModel.model_validate(airport)

    def search(self, search_term: str) -> List[AirportModel]:
        """Airports whose name, city or code contains the term."""
        return [
            AirportModel.model_validate(a)
            for a in self.airport_repository.search_by_name_or_city(search_term)
        ]

    def exists(self, airport_id: int) -> bool:
        return self.airport_repository.exists(airport_id)

    def validate_airport(self, airport: AirportModel) -> ValidationResult:
        """Reject a code already held by a different airport."""
        existing = self.airport_repository.get_by_code(airport.code)
        if existing is not None and existing.id != airport.id:
            return ValidationResult.failure(
                FailureReason.DUPLICATE_KEY,
                f"An airport with code '{airport.code}' already exists.",
                field="code",
            )
        return ValidationResult.success()

    def validate_delete(self, airport_id: int) -> ValidationResult:
        """Reject deleting an airport that flights depart from or arrive at."""
        count = len(self.flight_repository.get_flights_by_airport(airport_id))
        if count > 0:
            return ValidationResult.failure(
                FailureReason.REFERENTIAL_CONFLICT,
                referential_conflict_message("Airport", count),
            )
        return ValidationResult.success()

    def create(self, airport: AirportModel) -> AirportModel:
        result = self.validate_airport(airport)
        if not result.is_valid:
            logger.warning(f"Rejected airport {airport.code}: {result.message}")
            raise ValidationFailedError(result)

        entity = Airport(
            code=airport.code,
            name=airport.name,
            city=airport.city,
            country=airport.country,
            latitude=airport.latitude,
            longitude=airport.longitude,
            created_at=utcnow(),
        )
        created = self.airport_repository.add(entity)
        logger.info(f"Created airport {created.code} (id={created.id})")
        return AirportModel.model_validate(created)

    def update(self, airport: AirportModel) -> None:
        entity = self.airport_repository.get_by_id(airport.id)
        if entity is None:
            raise EntityNotFoundError("Airport", airport.id)

        result = self.validate_airport(airport)
        if not result.is_valid:
            logger.warning(f"Rejected update of airport {airport.id}: {result.message}")
            raise ValidationFailedError(result)

        entity.code = airport.code
        entity.name = airport.name
        entity.city = airport.city
        entity.country = airport.country
        entity.latitude = airport.latitude
        entity.longitude = airport.longitude
        entity.updated_at = utcnow()

        self.airport_repository.update(entity)
        logger.info(f"Updated airport {entity.code} (id={airport.id})")

    def delete(self, airport_id: int) -> None:
        """
        Delete an airport.

        Raises:
            ReferentialConflictError: If any flight still references the airport
        """
        flights = self.flight_repository.get_flights_by_airport(airport_id)
        if flights:
            logger.warning(f"Refused to delete airport {airport_id}: {len(flights)} flight(s) reference it")
            raise ReferentialConflictError("Airport", airport_id, len(flights))

        self.airport_repository.delete(airport_id)
        logger.info(f"Deleted airport {airport_id}")
