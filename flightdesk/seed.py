"""
Reproducible sample data for flightdesk.

Wipes the flight, aircraft and airport tables and fills them with Faker
generated records. Seeded flights get their distance, fuel and flight time
from the calculators, like flights created through the flight service.
"""

import logging
import string
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Tuple

from faker import Faker
from sqlalchemy.orm import Session

from .database.models import Aircraft, Airport, Flight
from .models.enums import FlightStatus
from .services.calculations import calculate_flight_metrics

logger = logging.getLogger(__name__)

MANUFACTURER_MODELS: Dict[str, Tuple[str, ...]] = {
    "Boeing": ("737-800", "737 MAX 8", "777-300ER", "787-9 Dreamliner"),
    "Airbus": ("A320neo", "A321", "A330-200", "A350-900"),
    "Embraer": ("E195-E2", "E190", "E175", "E145"),
    "Bombardier": ("CRJ-900", "CRJ-700", "Q400"),
    "ATR": ("ATR 72-600", "ATR 42-500"),
}

UPPERCASE = string.ascii_uppercase


@dataclass
class SeedSummary:
    """Counts of the records written by a seeding run."""
    airports: int
    aircraft: int
    flights: int


class DatabaseSeeder:
    """Generate airports, aircraft and flights with a fixed Faker seed."""

    def __init__(self, session: Session, seed: int = 123456, locale: str = "en_US"):
        self.session = session
        self.faker = Faker(locale)
        self.faker.seed_instance(seed)

    def seed(self, airports: int = 5, aircraft: int = 5, flights: int = 5) -> SeedSummary:
        """
        Replace all data with freshly generated records.

        Args:
            airports: Number of airports, at least two so flights have a route
            aircraft: Number of aircraft
            flights: Number of flights

        Returns:
            SeedSummary with the number of records created
        """
        if airports < 2:
            raise ValueError("At least two airports are needed to seed flights")

        self.clear()

        airport_rows = self._generate_airports(airports)
        self.session.add_all(airport_rows)
        self.session.commit()

        aircraft_rows = self._generate_aircraft(aircraft)
        self.session.add_all(aircraft_rows)
        self.session.commit()

        flight_rows = self._generate_flights(flights, airport_rows, aircraft_rows) if aircraft_rows else []
        self.session.add_all(flight_rows)
        self.session.commit()

        summary = SeedSummary(len(airport_rows), len(aircraft_rows), len(flight_rows))
        logger.info(
            f"Seeded {summary.airports} airports, {summary.aircraft} aircraft "
            f"and {summary.flights} flights"
        )
        return summary

    def clear(self) -> None:
        """Delete every flight, aircraft and airport, dependents first."""
        self.session.query(Flight).delete()
        self.session.query(Aircraft).delete()
        self.session.query(Airport).delete()
        self.session.commit()

    def _created_and_updated(self, years: int) -> Tuple[datetime, datetime]:
        created = self.faker.date_time_between(start_date=f"-{years}y", end_date="now")
        updated = self.faker.date_time_between(start_date=created, end_date="now")
        return created, updated

    def _generate_airports(self, count: int) -> List[Airport]:
        rows = []
        for _ in range(count):
            city = self.faker.city()
            created, updated = self._created_and_updated(2)
            rows.append(Airport(
                code=self.faker.unique.lexify("???", letters=UPPERCASE),
                name=f"{city} International Airport",
                city=city,
                country=self.faker.country()[:100],
                latitude=float(self.faker.latitude()),
                longitude=float(self.faker.longitude()),
                created_at=created,
                updated_at=updated,
            ))
        return rows

    def _generate_aircraft(self, count: int) -> List[Aircraft]:
        rows = []
        for _ in range(count):
            manufacturer = self.faker.random_element(list(MANUFACTURER_MODELS))
            registration = self.faker.unique.numerify("N###") + self.faker.lexify("??", letters=UPPERCASE)
            created, updated = self._created_and_updated(3)
            rows.append(Aircraft(
                manufacturer=manufacturer,
                model=self.faker.random_element(MANUFACTURER_MODELS[manufacturer]),
                registration_number=registration,
                fuel_consumption_per_km=self.faker.random.uniform(2.5, 5.5),
                takeoff_fuel_effort=self.faker.random.uniform(500, 2000),
                max_range_km=self.faker.random.uniform(3000, 15000),
                cruise_speed_kmh=self.faker.random.uniform(700, 950),
                created_at=created,
                updated_at=updated,
            ))
        return rows

    def _generate_flights(self, count: int, airports: List[Airport], aircraft: List[Aircraft]) -> List[Flight]:
        now = datetime.now()
        rows = []
        for _ in range(count):
            departure, destination = self.faker.random_sample(airports, length=2)
            plane = self.faker.random_element(aircraft)
            metrics = calculate_flight_metrics(departure, destination, plane)

            scheduled = self.faker.date_time_between(start_date="-30d", end_date="+60d")
            status = self.faker.random_element(list(FlightStatus))

            actual_departure = None
            actual_arrival = None
            if FlightStatus.DEPARTED <= status <= FlightStatus.LANDED and scheduled < now:
                actual_departure = scheduled + timedelta(minutes=self.faker.random_int(-30, 60))
                if status == FlightStatus.LANDED:
                    actual_arrival = actual_departure + timedelta(
                        hours=metrics.estimated_flight_time_hours,
                        minutes=self.faker.random_int(-20, 40),
                    )

            created, updated = self._created_and_updated(2)
            rows.append(Flight(
                flight_number=self.faker.lexify("??", letters=UPPERCASE) + str(self.faker.random_int(1000, 9999)),
                departure_airport_id=departure.id,
                destination_airport_id=destination.id,
                aircraft_id=plane.id,
                scheduled_departure=scheduled,
                actual_departure=actual_departure,
                actual_arrival=actual_arrival,
                distance_km=metrics.distance_km,
                fuel_required_liters=metrics.fuel_required_liters,
                estimated_flight_time_hours=metrics.estimated_flight_time_hours,
                status=int(status),
                created_at=created,
                updated_at=updated,
            ))
        return rows
