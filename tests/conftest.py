"""
Shared pytest fixtures for the flightdesk test suite.
"""

import os
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from flightdesk.database.config import reset_database_config
from flightdesk.database.models import Aircraft, Airport, Flight, create_all_tables
from flightdesk.models.enums import FlightStatus
from flightdesk.repositories.interfaces import (
    AircraftRepository,
    AirportRepository,
    FlightRepository,
)
from flightdesk.utils.config import reset_config


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine with foreign keys enforced."""
    engine = create_engine("sqlite:///:memory:", echo=False)

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine, expire_on_commit=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def airport_repository():
    return MagicMock(spec=AirportRepository)


@pytest.fixture
def aircraft_repository():
    return MagicMock(spec=AircraftRepository)


@pytest.fixture
def flight_repository():
    return MagicMock(spec=FlightRepository)


@pytest.fixture
def isolated_settings(tmp_path):
    """Point the global configuration at a throwaway SQLite file."""
    db_file = tmp_path / "flightdesk_test.db"
    reset_config()
    reset_database_config()
    with patch.dict(os.environ, {"DATABASE_URL": f"sqlite:///{db_file}"}):
        yield db_file
    reset_config()
    reset_database_config()


def make_airport(airport_id=1, code="JFK", name="John F. Kennedy International Airport",
                 city="New York", country="United States",
                 latitude=40.6413, longitude=-73.7781):
    return Airport(
        id=airport_id,
        code=code,
        name=name,
        city=city,
        country=country,
        latitude=latitude,
        longitude=longitude,
        created_at=datetime(2025, 1, 1, 12, 0),
    )


def make_aircraft(aircraft_id=1, registration_number="N123AB", model="A320neo",
                  manufacturer="Airbus", fuel_consumption_per_km=3.5,
                  takeoff_fuel_effort=500.0, max_range_km=6300.0, cruise_speed_kmh=830.0):
    return Aircraft(
        id=aircraft_id,
        model=model,
        manufacturer=manufacturer,
        registration_number=registration_number,
        fuel_consumption_per_km=fuel_consumption_per_km,
        takeoff_fuel_effort=takeoff_fuel_effort,
        max_range_km=max_range_km,
        cruise_speed_kmh=cruise_speed_kmh,
        created_at=datetime(2025, 1, 1, 12, 0),
    )


def make_flight(flight_id=1, flight_number="TP1234", departure=None, destination=None,
                aircraft=None, status=FlightStatus.SCHEDULED, distance_km=0.0,
                fuel_required_liters=0.0, estimated_flight_time_hours=0.0):
    flight = Flight(
        id=flight_id,
        flight_number=flight_number,
        departure_airport_id=departure.id if departure is not None else 1,
        destination_airport_id=destination.id if destination is not None else 2,
        aircraft_id=aircraft.id if aircraft is not None else 1,
        scheduled_departure=datetime(2025, 6, 1, 9, 30),
        distance_km=distance_km,
        fuel_required_liters=fuel_required_liters,
        estimated_flight_time_hours=estimated_flight_time_hours,
        status=int(status),
        created_at=datetime(2025, 1, 2, 8, 0),
    )
    if departure is not None:
        flight.departure_airport = departure
    if destination is not None:
        flight.destination_airport = destination
    if aircraft is not None:
        flight.aircraft = aircraft
    return flight
