"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- fleet.py        : Vehicles and trips
- saved_routes.py : Routes saved from the planner
- admin.py        : Initialization, admin seeding, fleet summary, connection test
- employees.py    : Employees, profiles, expenses
- odometer.py     : Odometer photo submissions and review
- tours.py        : Tours and participants
- planning.py     : Route plans, emergency contacts, users
- ai.py           : LLM-backed helpers
- chat.py         : Travel assistant
- geo.py          : Distance, airports, polylines
- health.py       : Health check endpoints
"""
from src.api.routes.admin import connection_router
from src.api.routes.admin import router as admin_router
from src.api.routes.ai import router as ai_router
from src.api.routes.chat import router as chat_router
from src.api.routes.employees import router as employees_router
from src.api.routes.fleet import router as fleet_router
from src.api.routes.geo import router as geo_router
from src.api.routes.health import router as health_router
from src.api.routes.odometer import router as odometer_router
from src.api.routes.planning import router as planning_router
from src.api.routes.saved_routes import router as saved_routes_router
from src.api.routes.tours import router as tours_router

__all__ = [
    "admin_router",
    "connection_router",
    "ai_router",
    "chat_router",
    "employees_router",
    "fleet_router",
    "geo_router",
    "health_router",
    "odometer_router",
    "planning_router",
    "saved_routes_router",
    "tours_router",
]
