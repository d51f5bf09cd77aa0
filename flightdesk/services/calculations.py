"""
Flight metric calculations.

Pure functions with no storage dependency: great-circle distance between two
airports, fuel required for a flight and estimated flight time.
"""

import math
from dataclasses import dataclass

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance between two points using the Haversine formula.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometers
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_fuel_required(distance_km: float, fuel_consumption_per_km: float, takeoff_effort: float) -> float:
    """Fuel in liters: linear burn over the distance plus the fixed takeoff effort."""
    return distance_km * fuel_consumption_per_km + takeoff_effort


def calculate_flight_time(distance_km: float, cruise_speed_kmh: float) -> float:
    """Estimated flight time in hours at cruise speed."""
    # Cruise speed is validated as positive before an aircraft is stored
    return distance_km / cruise_speed_kmh


@dataclass(frozen=True)
class FlightMetrics:
    """Derived figures stored on every flight."""
    distance_km: float
    fuel_required_liters: float
    estimated_flight_time_hours: float


def calculate_flight_metrics(departure, destination, aircraft) -> FlightMetrics:
    """
    Derive distance, fuel and flight time for a route flown by an aircraft.

    Args:
        departure: Object with ``latitude`` and ``longitude``
        destination: Object with ``latitude`` and ``longitude``
        aircraft: Object with ``fuel_consumption_per_km``,
            ``takeoff_fuel_effort`` and ``cruise_speed_kmh``

    Returns:
        FlightMetrics for the route
    """
    distance = calculate_distance(
        departure.latitude, departure.longitude,
        destination.latitude, destination.longitude,
    )
    return FlightMetrics(
        distance_km=distance,
        fuel_required_liters=calculate_fuel_required(
            distance, aircraft.fuel_consumption_per_km, aircraft.takeoff_fuel_effort
        ),
        estimated_flight_time_hours=calculate_flight_time(distance, aircraft.cruise_speed_kmh),
    )


__all__ = [
    'EARTH_RADIUS_KM',
    'FlightMetrics',
    'calculate_distance',
    'calculate_fuel_required',
    'calculate_flight_time',
    'calculate_flight_metrics',
]
