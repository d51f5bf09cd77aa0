"""
Flight-related Pydantic models for the flightdesk application.

This module contains the flight data-transfer model, the aggregated flight
report and the option lists used to build flight forms.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .enums import FlightStatus
from .airport import AirportModel
from .aircraft import AircraftModel


class FlightModel(BaseModel):
    """
    Complete flight information.

    The distance, fuel and flight-time fields are filled by the flight
    service; values supplied by callers are ignored and recomputed.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(default=0, ge=0, description="Flight ID, 0 for a new flight")
    flight_number: str = Field(..., min_length=1, max_length=20, description="Flight number")
    departure_airport_id: int = Field(..., description="Departure airport ID")
    destination_airport_id: int = Field(..., description="Destination airport ID")
    aircraft_id: int = Field(..., description="Aircraft ID")
    scheduled_departure: datetime = Field(..., description="Scheduled departure time")
    actual_departure: Optional[datetime] = Field(None, description="Actual departure time")
    actual_arrival: Optional[datetime] = Field(None, description="Actual arrival time")
    distance_km: float = Field(default=0.0, description="Great-circle distance in km")
    fuel_required_liters: float = Field(default=0.0, description="Fuel required in liters")
    estimated_flight_time_hours: float = Field(default=0.0, description="Estimated flight time in hours")
    status: FlightStatus = Field(default=FlightStatus.SCHEDULED, description="Current flight status")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Optional related objects
    departure_airport: Optional[AirportModel] = None
    destination_airport: Optional[AirportModel] = None
    aircraft: Optional[AircraftModel] = None


class FlightReportItemModel(BaseModel):
    """One row of the flight report."""

    flight_number: str
    departure_airport_code: str
    departure_airport_name: str
    destination_airport_code: str
    destination_airport_name: str
    aircraft_model: str
    aircraft_registration: str
    scheduled_departure: datetime
    distance_km: float
    estimated_flight_time_hours: float
    fuel_required_liters: float
    status: str


class FlightReportModel(BaseModel):
    """Flight report with totals and averages over all flights."""

    flights: List[FlightReportItemModel] = Field(default_factory=list)
    total_flights: int = 0
    total_distance_km: float = 0.0
    total_fuel_liters: float = 0.0
    total_flight_time_hours: float = 0.0
    average_distance_km: float = 0.0
    average_fuel_liters: float = 0.0


class SelectOptionModel(BaseModel):
    """An id/label pair for selection lists."""

    id: int
    display: str


class FlightFormDataModel(BaseModel):
    """Selectable airports and aircraft for the flight form."""

    departure_airports: List[SelectOptionModel] = Field(default_factory=list)
    destination_airports: List[SelectOptionModel] = Field(default_factory=list)
    aircraft: List[SelectOptionModel] = Field(default_factory=list)
