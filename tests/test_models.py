"""
Test suite for the Pydantic data-transfer models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from flightdesk.database.models import Airport
from flightdesk.models import (
    AircraftModel,
    AirportModel,
    FlightModel,
    FlightStatus,
    SelectOptionModel,
)


class TestFlightStatus:
    """Test cases for the FlightStatus enum."""

    def test_integer_values(self):
        assert [int(s) for s in FlightStatus] == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize("status, label", [
        (FlightStatus.SCHEDULED, "Scheduled"),
        (FlightStatus.IN_FLIGHT, "InFlight"),
        (FlightStatus.CANCELLED, "Cancelled"),
    ])
    def test_label(self, status, label):
        assert status.label == label


class TestAirportModel:
    """Test cases for AirportModel field rules."""

    def valid(self, **overrides):
        values = dict(code="LIS", name="Humberto Delgado Airport", city="Lisbon",
                      country="Portugal", latitude=38.7813, longitude=-9.1359)
        values.update(overrides)
        return values

    def test_new_airport_defaults(self):
        airport = AirportModel(**self.valid())

        assert airport.id == 0
        assert airport.created_at is None

    @pytest.mark.parametrize("overrides", [
        {"code": "LI"},
        {"code": "LISB"},
        {"name": ""},
        {"latitude": 90.5},
        {"latitude": -91},
        {"longitude": 180.1},
        {"longitude": -181},
    ])
    def test_invalid_fields(self, overrides):
        with pytest.raises(ValidationError):
            AirportModel(**self.valid(**overrides))

    def test_coordinate_bounds_inclusive(self):
        airport = AirportModel(**self.valid(latitude=-90, longitude=180))

        assert airport.latitude == -90

    def test_from_orm_instance(self):
        entity = Airport(id=3, code="OPO", name="Porto Airport", city="Porto",
                         country="Portugal", latitude=41.2481, longitude=-8.6814,
                         created_at=datetime(2025, 1, 1))

        airport = AirportModel.model_validate(entity)

        assert airport.id == 3
        assert airport.code == "OPO"


class TestAircraftModel:

    def test_non_positive_figures_are_left_to_the_service(self):
        """Test that positivity is not enforced at the model level."""
        aircraft = AircraftModel(model="E190", manufacturer="Embraer", registration_number="N1",
                                 fuel_consumption_per_km=0, takeoff_fuel_effort=0,
                                 max_range_km=0, cruise_speed_kmh=0)

        assert aircraft.cruise_speed_kmh == 0

    @pytest.mark.parametrize("field, limit", [
        ("fuel_consumption_per_km", 1000),
        ("takeoff_fuel_effort", 100000),
        ("max_range_km", 50000),
        ("cruise_speed_kmh", 3000),
    ])
    def test_performance_upper_bounds(self, field, limit):
        values = dict(model="E190", manufacturer="Embraer", registration_number="N1",
                      fuel_consumption_per_km=3, takeoff_fuel_effort=600,
                      max_range_km=4500, cruise_speed_kmh=820)

        assert getattr(AircraftModel(**{**values, field: limit}), field) == limit
        with pytest.raises(ValidationError):
            AircraftModel(**{**values, field: limit + 0.5})

    def test_registration_length(self):
        with pytest.raises(ValidationError):
            AircraftModel(model="E190", manufacturer="Embraer", registration_number="N" * 21,
                          fuel_consumption_per_km=1, takeoff_fuel_effort=1,
                          max_range_km=1, cruise_speed_kmh=1)


class TestFlightModel:

    def test_defaults(self):
        flight = FlightModel(flight_number="TP1", departure_airport_id=1, destination_airport_id=2,
                             aircraft_id=1, scheduled_departure=datetime(2025, 1, 1, 10, 0))

        assert flight.status is FlightStatus.SCHEDULED
        assert flight.distance_km == 0.0
        assert flight.actual_departure is None
        assert flight.departure_airport is None

    def test_status_from_integer(self):
        flight = FlightModel(flight_number="TP1", departure_airport_id=1, destination_airport_id=2,
                             aircraft_id=1, scheduled_departure=datetime(2025, 1, 1, 10, 0), status=4)

        assert flight.status is FlightStatus.LANDED

    def test_select_option(self):
        option = SelectOptionModel(id=1, display="LIS - Humberto Delgado Airport (Lisbon)")

        assert option.model_dump() == {"id": 1, "display": "LIS - Humberto Delgado Airport (Lisbon)"}
