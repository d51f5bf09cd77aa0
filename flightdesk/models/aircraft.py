"""
Aircraft-related Pydantic models for the flightdesk application.

Performance figures carry upper bounds here; the aircraft service rejects
non-positive values with a field-specific message.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class AircraftModel(BaseModel):
    """Aircraft information model."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(default=0, ge=0, description="Aircraft ID, 0 for a new aircraft")
    model: str = Field(..., min_length=1, max_length=100, description="Aircraft model")
    manufacturer: str = Field(..., min_length=1, max_length=100, description="Manufacturer")
    registration_number: str = Field(..., min_length=1, max_length=20, description="Registration number")
    fuel_consumption_per_km: float = Field(..., le=1000, description="Fuel consumption in liters per km")
    takeoff_fuel_effort: float = Field(..., le=100000, description="Fixed takeoff fuel in liters")
    max_range_km: float = Field(..., le=50000, description="Maximum range in km")
    cruise_speed_kmh: float = Field(..., le=3000, description="Cruise speed in km/h")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
