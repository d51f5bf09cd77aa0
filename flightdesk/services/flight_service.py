"""
Flight service.

Creates and updates flights by resolving their airports and aircraft and
deriving distance, fuel and flight time from them. Also builds the flight
report and the option lists for flight forms.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..database.models import Flight, utcnow
from ..database.repositories import (
    SqlAlchemyAircraftRepository,
    SqlAlchemyAirportRepository,
    SqlAlchemyFlightRepository,
)
from ..models.enums import FlightStatus
from ..models.flight import (
    FlightFormDataModel,
    FlightModel,
    FlightReportItemModel,
    FlightReportModel,
    SelectOptionModel,
)
from ..repositories.interfaces import AircraftRepository, AirportRepository, FlightRepository
from .calculations import (
    FlightMetrics,
    calculate_distance,
    calculate_flight_metrics,
    calculate_flight_time,
    calculate_fuel_required,
)
from .exceptions import EntityNotFoundError, InvalidSelectionError, ValidationFailedError
from .validation import FailureReason, ValidationResult

logger = logging.getLogger(__name__)


class FlightService:
    """
    Flight management and derived-metric orchestration.

    Every create and update resolves the three references again and
    recomputes the derived figures, even when none of them changed.
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        airport_repository: AirportRepository,
        aircraft_repository: AircraftRepository
    ):
        self.flight_repository = flight_repository
        self.airport_repository = airport_repository
        self.aircraft_repository = aircraft_repository

    @classmethod
    def from_session(cls, session: Session) -> "FlightService":
        """Build the service over SQLAlchemy repositories sharing one session."""
        return cls(
            SqlAlchemyFlightRepository(session),
            SqlAlchemyAirportRepository(session),
            SqlAlchemyAircraftRepository(session),
        )

    # Calculators, exposed for callers that only need the numbers
    calculate_distance = staticmethod(calculate_distance)
    calculate_fuel_required = staticmethod(calculate_fuel_required)
    calculate_flight_time = staticmethod(calculate_flight_time)

    def get_by_id(self, flight_id: int) -> Optional[FlightModel]:
        flight = self.flight_repository.get_by_id_with_details(flight_id)
        return None if flight is None else FlightModel.model_validate(flight)

    def get_all(self) -> List[FlightModel]:
        return [FlightModel.model_validate(f) for f in self.flight_repository.get_all_with_details()]

    def get_by_flight_number(self, flight_number: str) -> Optional[FlightModel]:
        flight = self.flight_repository.get_by_flight_number(flight_number)
        return None if flight is None else FlightModel.model_validate(flight)

    def exists(self, flight_id: int) -> bool:
        return self.flight_repository.exists(flight_id)

    def validate_flight(self, flight: FlightModel) -> ValidationResult:
        if flight.departure_airport_id == flight.destination_airport_id:
            return ValidationResult.failure(
                FailureReason.INVALID_FIELD,
                "Destination airport must be different from departure airport.",
                field="destination_airport_id",
            )
        return ValidationResult.success()

    def _resolve_metrics(self, flight: FlightModel) -> FlightMetrics:
        """
        Load the flight's airports and aircraft and derive its metrics.

        Raises:
            InvalidSelectionError: If any of the three references is missing
        """
        departure = self.airport_repository.get_by_id(flight.departure_airport_id)
        destination = self.airport_repository.get_by_id(flight.destination_airport_id)
        aircraft = self.aircraft_repository.get_by_id(flight.aircraft_id)

        missing = [
            name for name, entity in (
                ("departure_airport", departure),
                ("destination_airport", destination),
                ("aircraft", aircraft),
            ) if entity is None
        ]
        if missing:
            logger.warning(f"Flight {flight.flight_number} references missing {', '.join(missing)}")
            raise InvalidSelectionError(
                flight.departure_airport_id,
                flight.destination_airport_id,
                flight.aircraft_id,
                missing=missing,
            )

        return calculate_flight_metrics(departure, destination, aircraft)

    def _check(self, flight: FlightModel) -> None:
        result = self.validate_flight(flight)
        if not result.is_valid:
            logger.warning(f"Rejected flight {flight.flight_number}: {result.message}")
            raise ValidationFailedError(result)

    def create(self, flight: FlightModel) -> FlightModel:
        """
        Create a flight with derived distance, fuel and flight time.

        Raises:
            ValidationFailedError: If departure and destination are the same
            InvalidSelectionError: If an airport or the aircraft does not exist
        """
        self._check(flight)
        metrics = self._resolve_metrics(flight)

        entity = Flight(
            flight_number=flight.flight_number,
            departure_airport_id=flight.departure_airport_id,
            destination_airport_id=flight.destination_airport_id,
            aircraft_id=flight.aircraft_id,
            scheduled_departure=flight.scheduled_departure,
            actual_departure=flight.actual_departure,
            actual_arrival=flight.actual_arrival,
            distance_km=metrics.distance_km,
            fuel_required_liters=metrics.fuel_required_liters,
            estimated_flight_time_hours=metrics.estimated_flight_time_hours,
            status=int(flight.status),
            created_at=utcnow(),
        )

        created = self.flight_repository.add(entity)
        logger.info(
            f"Created flight {created.flight_number} (id={created.id}): "
            f"{metrics.distance_km:.1f} km, {metrics.fuel_required_liters:.1f} L, "
            f"{metrics.estimated_flight_time_hours:.2f} h"
        )
        return FlightModel.model_validate(created)

    def update(self, flight: FlightModel) -> None:
        """
        Update a flight and recompute its derived figures.

        Raises:
            EntityNotFoundError: If the flight does not exist
            ValidationFailedError: If departure and destination are the same
            InvalidSelectionError: If an airport or the aircraft does not exist
        """
        entity = self.flight_repository.get_by_id(flight.id)
        if entity is None:
            raise EntityNotFoundError("Flight", flight.id)

        self._check(flight)
        metrics = self._resolve_metrics(flight)

        entity.flight_number = flight.flight_number
        entity.departure_airport_id = flight.departure_airport_id
        entity.destination_airport_id = flight.destination_airport_id
        entity.aircraft_id = flight.aircraft_id
        entity.scheduled_departure = flight.scheduled_departure
        entity.actual_departure = flight.actual_departure
        entity.actual_arrival = flight.actual_arrival
        entity.distance_km = metrics.distance_km
        entity.fuel_required_liters = metrics.fuel_required_liters
        entity.estimated_flight_time_hours = metrics.estimated_flight_time_hours
        entity.status = int(flight.status)
        entity.updated_at = utcnow()

        self.flight_repository.update(entity)
        logger.info(f"Updated flight {entity.flight_number} (id={flight.id})")

    def delete(self, flight_id: int) -> None:
        self.flight_repository.delete(flight_id)
        logger.info(f"Deleted flight {flight_id}")

    def get_flight_report(self) -> FlightReportModel:
        """Report rows for every flight, with totals and averages."""
        flights = self.flight_repository.get_all_with_details()

        items = [
            FlightReportItemModel(
                flight_number=f.flight_number,
                departure_airport_code=f.departure_airport.code,
                departure_airport_name=f.departure_airport.name,
                destination_airport_code=f.destination_airport.code,
                destination_airport_name=f.destination_airport.name,
                aircraft_model=f.aircraft.model,
                aircraft_registration=f.aircraft.registration_number,
                scheduled_departure=f.scheduled_departure,
                distance_km=f.distance_km,
                estimated_flight_time_hours=f.estimated_flight_time_hours,
                fuel_required_liters=f.fuel_required_liters,
                status=FlightStatus(f.status).label,
            )
            for f in flights
        ]

        total_distance = sum(f.distance_km for f in flights)
        total_fuel = sum(f.fuel_required_liters for f in flights)
        count = len(flights)

        return FlightReportModel(
            flights=items,
            total_flights=count,
            total_distance_km=total_distance,
            total_fuel_liters=total_fuel,
            total_flight_time_hours=sum(f.estimated_flight_time_hours for f in flights),
            average_distance_km=total_distance / count if count else 0.0,
            average_fuel_liters=total_fuel / count if count else 0.0,
        )

    def get_flight_form_data(self) -> FlightFormDataModel:
        """Selectable airports and aircraft for building a flight."""
        airports = [
            SelectOptionModel(id=a.id, display=f"{a.code} - {a.name} ({a.city})")
            for a in self.airport_repository.get_all()
        ]
        aircraft = [
            SelectOptionModel(id=a.id, display=f"{a.model} - {a.registration_number}")
            for a in self.aircraft_repository.get_all()
        ]
        return FlightFormDataModel(
            departure_airports=airports,
            destination_airports=list(airports),
            aircraft=aircraft,
        )
