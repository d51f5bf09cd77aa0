"""
Tests for the flight service against mocked repositories.
"""

from datetime import datetime

import pytest

from flightdesk.models import FlightModel, FlightStatus
from flightdesk.services import (
    EntityNotFoundError,
    FailureReason,
    FlightService,
    InvalidSelectionError,
    ValidationFailedError,
    calculate_distance,
)

from .conftest import make_aircraft, make_airport, make_flight


@pytest.fixture
def jfk():
    return make_airport(airport_id=1, code="JFK", latitude=40.6413, longitude=-73.7781)


@pytest.fixture
def lhr():
    return make_airport(
        airport_id=2, code="LHR", name="Heathrow Airport", city="London",
        country="United Kingdom", latitude=51.4700, longitude=-0.4543,
    )


@pytest.fixture
def aircraft():
    return make_aircraft(aircraft_id=1, fuel_consumption_per_km=3.5, takeoff_fuel_effort=500.0,
                         cruise_speed_kmh=850.0)


@pytest.fixture
def service(flight_repository, airport_repository, aircraft_repository):
    return FlightService(flight_repository, airport_repository, aircraft_repository)


@pytest.fixture
def resolvable(airport_repository, aircraft_repository, jfk, lhr, aircraft):
    """Make airports 1 and 2 and aircraft 1 resolvable."""
    airport_repository.get_by_id.side_effect = {1: jfk, 2: lhr}.get
    aircraft_repository.get_by_id.side_effect = {1: aircraft}.get


def flight_model(flight_id=0, departure=1, destination=2, aircraft_id=1, **overrides):
    values = dict(
        id=flight_id,
        flight_number="BA178",
        departure_airport_id=departure,
        destination_airport_id=destination,
        aircraft_id=aircraft_id,
        scheduled_departure=datetime(2025, 7, 1, 18, 0),
    )
    values.update(overrides)
    return FlightModel(**values)


class TestCalculators:
    """Test cases for the calculators exposed on the service."""

    def test_fuel_required(self):
        assert FlightService.calculate_fuel_required(1000, 3.5, 500) == 4000

    def test_flight_time(self):
        assert FlightService.calculate_flight_time(800, 800) == 1.0

    def test_distance(self):
        assert FlightService.calculate_distance(38.7813, -9.1359, 38.7813, -9.1359) == 0.0


class TestValidateFlight:

    def test_same_airports(self, service):
        """Test that a flight cannot depart and arrive at the same airport."""
        result = service.validate_flight(flight_model(departure=1, destination=1))

        assert result.reason is FailureReason.INVALID_FIELD
        assert result.message == "Destination airport must be different from departure airport."
        assert result.field == "destination_airport_id"

    def test_different_airports(self, service):
        assert service.validate_flight(flight_model()).is_valid


class TestCreateFlight:
    """Test cases for flight creation and metric derivation."""

    def test_create_derives_metrics(self, service, flight_repository, resolvable, jfk, lhr):
        """Test that distance, fuel and time come from the calculators."""
        def assign_id(entity):
            entity.id = 11
            return entity

        flight_repository.add.side_effect = assign_id

        created = service.create(flight_model(distance_km=1.0, fuel_required_liters=1.0))

        distance = calculate_distance(jfk.latitude, jfk.longitude, lhr.latitude, lhr.longitude)
        assert created.id == 11
        assert created.distance_km == pytest.approx(distance)
        assert created.fuel_required_liters == pytest.approx(distance * 3.5 + 500.0)
        assert created.estimated_flight_time_hours == pytest.approx(distance / 850.0)
        assert created.status == FlightStatus.SCHEDULED
        flight_repository.add.assert_called_once()

    @pytest.mark.parametrize("departure, destination, aircraft_id, missing", [
        (3, 2, 1, ["departure_airport"]),
        (1, 3, 1, ["destination_airport"]),
        (1, 2, 9, ["aircraft"]),
        (3, 4, 9, ["departure_airport", "destination_airport", "aircraft"]),
    ])
    def test_create_with_missing_reference(self, service, flight_repository, resolvable,
                                           departure, destination, aircraft_id, missing):
        """Test that unresolvable references abort creation."""
        with pytest.raises(InvalidSelectionError) as exc_info:
            service.create(flight_model(departure=departure, destination=destination,
                                        aircraft_id=aircraft_id))

        assert str(exc_info.value) == "Invalid airport or aircraft selection"
        assert exc_info.value.details["missing"] == missing
        flight_repository.add.assert_not_called()

    def test_create_with_same_airports(self, service, flight_repository, airport_repository):
        """Test that the distinct-airport rule runs before any lookup."""
        with pytest.raises(ValidationFailedError):
            service.create(flight_model(departure=1, destination=1))

        airport_repository.get_by_id.assert_not_called()
        flight_repository.add.assert_not_called()


class TestUpdateFlight:
    """Test cases for flight updates."""

    def test_update_missing_flight(self, service, flight_repository):
        flight_repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError, match="Flight with ID 99 not found"):
            service.update(flight_model(flight_id=99))

        flight_repository.update.assert_not_called()

    def test_update_recomputes_metrics(self, service, flight_repository, resolvable, jfk, lhr):
        """Test that stale metrics are replaced even when references are unchanged."""
        entity = make_flight(flight_id=5, departure=jfk, destination=lhr,
                             distance_km=12.0, fuel_required_liters=34.0,
                             estimated_flight_time_hours=0.5)
        flight_repository.get_by_id.return_value = entity

        service.update(flight_model(flight_id=5, status=FlightStatus.BOARDING))

        distance = calculate_distance(jfk.latitude, jfk.longitude, lhr.latitude, lhr.longitude)
        assert entity.distance_km == pytest.approx(distance)
        assert entity.fuel_required_liters == pytest.approx(distance * 3.5 + 500.0)
        assert entity.estimated_flight_time_hours == pytest.approx(distance / 850.0)
        assert entity.status == int(FlightStatus.BOARDING)
        assert entity.updated_at is not None
        flight_repository.update.assert_called_once_with(entity)

    def test_update_with_missing_aircraft(self, service, flight_repository, resolvable, jfk, lhr):
        entity = make_flight(flight_id=5, departure=jfk, destination=lhr)
        flight_repository.get_by_id.return_value = entity

        with pytest.raises(InvalidSelectionError):
            service.update(flight_model(flight_id=5, aircraft_id=42))

        flight_repository.update.assert_not_called()

    def test_update_with_same_airports(self, service, flight_repository):
        flight_repository.get_by_id.return_value = make_flight(flight_id=5)

        with pytest.raises(ValidationFailedError):
            service.update(flight_model(flight_id=5, departure=2, destination=2))


class TestFlightReads:

    def test_get_by_id_includes_details(self, service, flight_repository, jfk, lhr, aircraft):
        flight_repository.get_by_id_with_details.return_value = make_flight(
            flight_id=1, departure=jfk, destination=lhr, aircraft=aircraft
        )

        flight = service.get_by_id(1)

        assert flight.departure_airport.code == "JFK"
        assert flight.destination_airport.code == "LHR"
        assert flight.aircraft.registration_number == "N123AB"

    def test_get_by_id_missing(self, service, flight_repository):
        flight_repository.get_by_id_with_details.return_value = None

        assert service.get_by_id(1) is None

    def test_delete(self, service, flight_repository):
        service.delete(3)

        flight_repository.delete.assert_called_once_with(3)


class TestFlightReport:
    """Test cases for the aggregated flight report."""

    def test_report_totals_and_averages(self, service, flight_repository, jfk, lhr, aircraft):
        flight_repository.get_all_with_details.return_value = [
            make_flight(1, "BA178", jfk, lhr, aircraft, FlightStatus.IN_FLIGHT,
                        distance_km=1000.0, fuel_required_liters=4000.0,
                        estimated_flight_time_hours=1.25),
            make_flight(2, "BA179", lhr, jfk, aircraft, FlightStatus.SCHEDULED,
                        distance_km=3000.0, fuel_required_liters=11000.0,
                        estimated_flight_time_hours=3.5),
        ]

        report = service.get_flight_report()

        assert report.total_flights == 2
        assert report.total_distance_km == 4000.0
        assert report.total_fuel_liters == 15000.0
        assert report.total_flight_time_hours == 4.75
        assert report.average_distance_km == 2000.0
        assert report.average_fuel_liters == 7500.0

        first = report.flights[0]
        assert first.flight_number == "BA178"
        assert first.departure_airport_code == "JFK"
        assert first.destination_airport_name == "Heathrow Airport"
        assert first.aircraft_registration == "N123AB"
        assert first.status == "InFlight"

    def test_empty_report(self, service, flight_repository):
        """Test that averages are zero when there are no flights."""
        flight_repository.get_all_with_details.return_value = []

        report = service.get_flight_report()

        assert report.flights == []
        assert report.total_flights == 0
        assert report.average_distance_km == 0.0
        assert report.average_fuel_liters == 0.0


class TestFlightFormData:

    def test_option_labels(self, service, airport_repository, aircraft_repository, jfk, lhr, aircraft):
        airport_repository.get_all.return_value = [jfk, lhr]
        aircraft_repository.get_all.return_value = [aircraft]

        form = service.get_flight_form_data()

        assert [o.display for o in form.departure_airports] == [
            "JFK - John F. Kennedy International Airport (New York)",
            "LHR - Heathrow Airport (London)",
        ]
        assert form.destination_airports == form.departure_airports
        assert form.aircraft[0].id == 1
        assert form.aircraft[0].display == "A320neo - N123AB"
