"""
Models module - Pydantic schemas for data validation.

This module defines:
- common.py   : Response envelopes and the camelCase base model
- fleet.py    : Vehicles, trips, saved routes, admin requests
- employee.py : Employees, profiles, expenses, odometer readings
- tour.py     : Tours, participants, route plans, emergency contacts, users
- ai.py       : AI endpoint inputs and validated LLM outputs
- geo.py      : Flight path and simplification requests
"""
from src.models.common import ApiResponse, CamelModel, ErrorResponse, HealthResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
]
