"""
Request models for the geometry endpoints.
"""
from typing import List

from pydantic import Field

from src.models.ai import LatLngPoint
from src.models.common import CamelModel


class FlightPathRequest(CamelModel):
    start_lat: float = Field(..., ge=-90, le=90)
    start_lon: float = Field(..., ge=-180, le=180)
    end_lat: float = Field(..., ge=-90, le=90)
    end_lon: float = Field(..., ge=-180, le=180)
    num_points: int = Field(default=50, ge=1, le=1000)
    curved: bool = Field(default=False, description="Bezier arc instead of the great circle")
    curvature: float = Field(default=0.3, ge=0, le=1)


class SimplifyRequest(CamelModel):
    path: List[LatLngPoint] = Field(..., min_length=1)
    tolerance: float = Field(default=0.01, ge=0, description="Degrees")
