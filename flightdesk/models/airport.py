"""
Airport-related Pydantic models for the flightdesk application.

This module contains the airport data-transfer model with the field
constraints enforced at the edge of the service layer.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class AirportModel(BaseModel):
    """Airport information model."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(default=0, ge=0, description="Airport ID, 0 for a new airport")
    code: str = Field(..., min_length=3, max_length=3, description="3-letter airport code")
    name: str = Field(..., min_length=1, max_length=200, description="Airport name")
    city: str = Field(..., min_length=1, max_length=100, description="City")
    country: str = Field(..., min_length=1, max_length=100, description="Country")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
