"""
SQLAlchemy database models for the flightdesk system.

This module defines the persistent records managed by the application:
- Airport: Airports identified by a unique 3-letter code, with coordinates
- Aircraft: Aircraft with a unique registration number and performance data
- Flight: Scheduled flights between two airports flown by one aircraft,
  carrying the derived distance, fuel and flight-time figures
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import declarative_base, relationship

from ..models.enums import FlightStatus

# Create the declarative base for all models
Base = declarative_base()


def utcnow() -> datetime:
    """Timezone-naive UTC timestamp used for audit columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Airport(Base):
    """
    Airport model representing airport reference data.

    Coordinates are stored in decimal degrees and feed the great-circle
    distance calculation for every flight touching this airport.
    """
    __tablename__ = 'airport'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Airport identification
    code = Column(String(3), unique=True, nullable=False, index=True)  # 3-letter code (e.g., 'LIS')
    name = Column(String(200), nullable=False, index=True)
    city = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False)

    # Position in decimal degrees
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    # Audit
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True)

    # Relationships - flights departing from and arriving at this airport
    departing_flights = relationship(
        "Flight",
        foreign_keys="Flight.departure_airport_id",
        back_populates="departure_airport",
        lazy="select"
    )
    arriving_flights = relationship(
        "Flight",
        foreign_keys="Flight.destination_airport_id",
        back_populates="destination_airport",
        lazy="select"
    )

    __table_args__ = (
        CheckConstraint('latitude >= -90 AND latitude <= 90', name='ck_airport_latitude'),
        CheckConstraint('longitude >= -180 AND longitude <= 180', name='ck_airport_longitude'),
    )

    def __repr__(self):
        return f"<Airport(id={self.id}, code='{self.code}', name='{self.name}', city='{self.city}')>"


class Aircraft(Base):
    """
    Aircraft model representing an individual airframe.

    Stores the performance figures used by the fuel and flight-time
    calculations.
    """
    __tablename__ = 'aircraft'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Aircraft identification
    model = Column(String(100), nullable=False)
    manufacturer = Column(String(100), nullable=False)
    registration_number = Column(String(20), unique=True, nullable=False, index=True)  # e.g., 'N123AB'

    # Performance data
    fuel_consumption_per_km = Column(Float, nullable=False)  # liters per km
    takeoff_fuel_effort = Column(Float, nullable=False)      # liters per takeoff
    max_range_km = Column(Float, nullable=False)
    cruise_speed_kmh = Column(Float, nullable=False)

    # Audit
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    flights = relationship("Flight", back_populates="aircraft", lazy="select")

    def __repr__(self):
        return (
            f"<Aircraft(id={self.id}, model='{self.model}', "
            f"registration='{self.registration_number}')>"
        )


class Flight(Base):
    """
    Flight model representing a scheduled flight.

    Distance, fuel and flight-time columns are always written by the flight
    service from the referenced airports and aircraft.
    """
    __tablename__ = 'flight'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Flight identification and schedule
    flight_number = Column(String(20), nullable=False, index=True)  # e.g., 'TP1234'
    departure_airport_id = Column(
        Integer, ForeignKey('airport.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    destination_airport_id = Column(
        Integer, ForeignKey('airport.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    aircraft_id = Column(
        Integer, ForeignKey('aircraft.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    scheduled_departure = Column(DateTime, nullable=False, index=True)
    actual_departure = Column(DateTime, nullable=True)
    actual_arrival = Column(DateTime, nullable=True)

    # Derived metrics
    distance_km = Column(Float, nullable=False, default=0.0)
    fuel_required_liters = Column(Float, nullable=False, default=0.0)
    estimated_flight_time_hours = Column(Float, nullable=False, default=0.0)

    # Stored as the integer value of FlightStatus
    status = Column(Integer, nullable=False, default=int(FlightStatus.SCHEDULED))

    # Audit
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    departure_airport = relationship(
        "Airport",
        foreign_keys=[departure_airport_id],
        back_populates="departing_flights",
        lazy="select"
    )
    destination_airport = relationship(
        "Airport",
        foreign_keys=[destination_airport_id],
        back_populates="arriving_flights",
        lazy="select"
    )
    aircraft = relationship("Aircraft", back_populates="flights", lazy="select")

    __table_args__ = (
        CheckConstraint(
            'departure_airport_id <> destination_airport_id',
            name='ck_flight_distinct_airports'
        ),
    )

    def __repr__(self):
        return (
            f"<Flight(id={self.id}, flight_number='{self.flight_number}', "
            f"from={self.departure_airport_id}, to={self.destination_airport_id})>"
        )


# Composite index for route and schedule lookups
Index('idx_flight_route_date', Flight.departure_airport_id, Flight.destination_airport_id, Flight.scheduled_departure)


def create_all_tables(engine):
    """
    Create all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine):
    """
    Drop all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.drop_all(bind=engine)


# Export all models and utilities
__all__ = [
    'Base',
    'Airport',
    'Aircraft',
    'Flight',
    'utcnow',
    'create_all_tables',
    'drop_all_tables'
]
