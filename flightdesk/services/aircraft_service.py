"""
Aircraft service.

CRUD operations on aircraft, registration-number uniqueness, performance
figure checks and the delete guard for aircraft assigned to flights.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..database.models import Aircraft, utcnow
from ..database.repositories import SqlAlchemyAircraftRepository, SqlAlchemyFlightRepository
from ..models.aircraft import AircraftModel
from ..repositories.interfaces import AircraftRepository, FlightRepository
from .exceptions import EntityNotFoundError, ReferentialConflictError, ValidationFailedError
from .validation import FailureReason, ValidationResult, referential_conflict_message

logger = logging.getLogger(__name__)

# Performance fields that must be strictly positive, in check order
POSITIVE_FIELDS = (
    ("fuel_consumption_per_km", "Fuel consumption per km must be greater than zero."),
    ("max_range_km", "Max range must be greater than zero."),
    ("cruise_speed_kmh", "Cruise speed must be greater than zero."),
    ("takeoff_fuel_effort", "Takeoff fuel effort must be greater than zero."),
)


class AircraftService:
    """Aircraft management on top of the aircraft and flight repositories."""

    def __init__(self, aircraft_repository: AircraftRepository, flight_repository: FlightRepository):
        self.aircraft_repository = aircraft_repository
        self.flight_repository = flight_repository

    @classmethod
    def from_session(cls, session: Session) -> "AircraftService":
        return cls(SqlAlchemyAircraftRepository(session), SqlAlchemyFlightRepository(session))

    def get_by_id(self, aircraft_id: int) -> Optional[AircraftModel]:
        aircraft = self.aircraft_repository.get_by_id(aircraft_id)
        return None if aircraft is None else AircraftModel.model_validate(aircraft)

    def get_all(self) -> List[AircraftModel]:
        return [AircraftModel.model_validate(a) for a in self.aircraft_repository.get_all()]

    def get_by_registration_number(self, registration_number: str) -> Optional[AircraftModel]:
        aircraft = self.aircraft_repository.get_by_registration_number(registration_number)
        return None if aircraft is None else AircraftModel.model_validate(aircraft)

    def get_available_aircraft(self) -> List[AircraftModel]:
        return [AircraftModel.model_validate(a) for a in self.aircraft_repository.get_available_aircraft()]

    def exists(self, aircraft_id: int) -> bool:
        return self.aircraft_repository.exists(aircraft_id)

    def validate_aircraft(self, aircraft: AircraftModel) -> ValidationResult:
        """
        Check registration uniqueness, then each performance figure.

        Only the first failing check is reported.
        """
        existing = self.aircraft_repository.get_by_registration_number(aircraft.registration_number)
        if existing is not None and existing.id != aircraft.id:
            return ValidationResult.failure(
                FailureReason.DUPLICATE_KEY,
                f"An aircraft with registration number '{aircraft.registration_number}' already exists.",
                field="registration_number",
            )

        for field, message in POSITIVE_FIELDS:
            if getattr(aircraft, field) <= 0:
                return ValidationResult.failure(FailureReason.INVALID_FIELD, message, field=field)

        return ValidationResult.success()

    def validate_delete(self, aircraft_id: int) -> ValidationResult:
        count = len(self.flight_repository.get_flights_by_aircraft(aircraft_id))
        if count > 0:
            return ValidationResult.failure(
                FailureReason.REFERENTIAL_CONFLICT,
                referential_conflict_message("Aircraft", count),
            )
        return ValidationResult.success()

    def create(self, aircraft: AircraftModel) -> AircraftModel:
        result = self.validate_aircraft(aircraft)
        if not result.is_valid:
            logger.warning(f"Rejected aircraft {aircraft.registration_number}: {result.message}")
            raise ValidationFailedError(result)

        entity = Aircraft(
            model=aircraft.model,
            manufacturer=aircraft.manufacturer,
            registration_number=aircraft.registration_number,
            fuel_consumption_per_km=aircraft.fuel_consumption_per_km,
            takeoff_fuel_effort=aircraft.takeoff_fuel_effort,
            max_range_km=aircraft.max_range_km,
            cruise_speed_kmh=aircraft.cruise_speed_kmh,
            created_at=utcnow(),
        )
        created = self.aircraft_repository.add(entity)
        logger.info(f"Created aircraft {created.registration_number} (id={created.id})")
        return AircraftModel.model_validate(created)

    def update(self, aircraft: AircraftModel) -> None:
        entity = self.aircraft_repository.get_by_id(aircraft.id)
        if entity is None:
            raise EntityNotFoundError("Aircraft", aircraft.id)

        result = self.validate_aircraft(aircraft)
        if not result.is_valid:
            logger.warning(f"Rejected update of aircraft {aircraft.id}: {result.message}")
            raise ValidationFailedError(result)

        entity.model = aircraft.model
        entity.manufacturer = aircraft.manufacturer
        entity.registration_number = aircraft.registration_number
        entity.fuel_consumption_per_km = aircraft.fuel_consumption_per_km
        entity.takeoff_fuel_effort = aircraft.takeoff_fuel_effort
        entity.max_range_km = aircraft.max_range_km
        entity.cruise_speed_kmh = aircraft.cruise_speed_kmh
        entity.updated_at = utcnow()

        self.aircraft_repository.update(entity)
        logger.info(f"Updated aircraft {entity.registration_number} (id={aircraft.id})")

    def delete(self, aircraft_id: int) -> None:
        """
        Delete an aircraft.

        Raises:
            ReferentialConflictError: If any flight is assigned to the aircraft
        """
        flights = self.flight_repository.get_flights_by_aircraft(aircraft_id)
        if flights:
            logger.warning(f"Refused to delete aircraft {aircraft_id}: {len(flights)} flight(s) reference it")
            raise ReferentialConflictError("Aircraft", aircraft_id, len(flights))

        self.aircraft_repository.delete(aircraft_id)
        logger.info(f"Deleted aircraft {aircraft_id}")
