"""
Services module - Business logic layer.

Services sit between the API routes and the stores:
- FleetService    : vehicles, trips, saved routes, admin accounts (admin db)
- EmployeeService : employees, profiles, expenses, odometer readings (employee db)
- TourService     : tours, participants, route plans, contacts, users (SQL)
- AIService       : LLM prompt wrappers with fallbacks
"""
from src.services.ai_service import AIService, get_ai_service
from src.services.employee_service import EmployeeService, get_employee_service
from src.services.fleet_service import FleetService, get_fleet_service
from src.services.tour_service import TourService, get_tour_service

__all__ = [
    "AIService",
    "get_ai_service",
    "EmployeeService",
    "get_employee_service",
    "FleetService",
    "get_fleet_service",
    "TourService",
    "get_tour_service",
]
