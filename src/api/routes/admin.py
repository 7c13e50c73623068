"""
Admin Routes - Setup and maintenance endpoints.

- /api/admin/init-db        : create document-store indexes (and sample data)
- /api/admin/create-admin   : seed the default admin account
- /api/admin/fleet-summary  : pandas summary of vehicles, trips and expenses
- /api/admin/seed-employees : insert the staff roster
- /api/test-connection      : check both document databases
- /api/setup-fleet-data     : replace vehicles and profiles with the demo fleet
- /api/populate-all-data    : replace every dashboard collection with sample data
- /api/refresh-data         : dump collections by type
- /api/employee/seed        : insert one placeholder employee
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from src.core.logging_config import get_logger
from src.database.init_db import init_document_indexes
from src.database.mongo import MongoConnection, get_mongo
from src.database.seed import SampleData
from src.models.common import ApiResponse
from src.models.fleet import AdminSeedRequest, EmployeeSeedRequest, InitDbRequest, SeedEmployeesRequest
from src.services.fleet_service import FleetService, get_fleet_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
)

connection_router = APIRouter(
    prefix="/api",
    tags=["Admin"],
)


@router.get("/init-db", response_model=ApiResponse, summary="Describe database initialization")
async def init_db_usage() -> ApiResponse:
    return ApiResponse(
        data={
            "usage": "POST to this endpoint to initialize the databases",
            "options": {"includeSampleData": "boolean - whether to include sample data"},
        },
        message="Database initialization endpoint",
    )


@router.post(
    "/init-db",
    response_model=ApiResponse,
    summary="Initialize document-store indexes",
    description="""
    Creates the indexes of the admin and employee databases. With
    `includeSampleData` two vehicles and one employee profile are upserted.

    Index failures are collected in `errors` rather than aborting the run.
    """,
)
def init_db(
    payload: Optional[InitDbRequest] = Body(default=None),
    mongo: MongoConnection = Depends(get_mongo),
) -> ApiResponse:
    include_sample_data = payload.include_sample_data if payload else False
    logger.info(f"Initializing document databases (sample data: {include_sample_data})")

    results = init_document_indexes(mongo, include_sample_data=include_sample_data)
    return ApiResponse(data=results, message="Database initialization completed")


@router.post("/create-admin", response_model=ApiResponse, summary="Create the default admin account")
def create_admin(
    payload: Optional[AdminSeedRequest] = Body(default=None),
    service: FleetService = Depends(get_fleet_service),
) -> ApiResponse:
    payload = payload or AdminSeedRequest()
    admin, created = service.ensure_admin(payload.username, payload.password)
    message = "Admin user created successfully" if created else "Admin user already exists"
    return ApiResponse(data=admin, message=message)


@router.get("/create-admin", response_model=ApiResponse, summary="Get the default admin account")
def get_admin(service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.get_admin())


@router.get("/fleet-summary", response_model=ApiResponse, summary="Fleet totals for the dashboard")
def fleet_summary(service: FleetService = Depends(get_fleet_service)) -> ApiResponse:
    return ApiResponse(data=service.fleet_summary())


@connection_router.get("/test-connection", response_model=ApiResponse, summary="Check the document databases")
def test_connection(response: Response, mongo: MongoConnection = Depends(get_mongo)) -> ApiResponse:
    report = mongo.ping()
    healthy = report["adminDb"]["connected"] and report["employeeDb"]["connected"]
    if not healthy:
        response.status_code = 500
    return ApiResponse(
        success=healthy,
        data=report,
        message="Database connection test completed" if healthy else "Database connection test failed",
    )


def get_sample_data(mongo: MongoConnection = Depends(get_mongo)) -> SampleData:
    return SampleData(mongo)


@router.post("/seed-employees", response_model=ApiResponse, summary="Insert the staff roster")
def seed_employees(
    payload: Optional[SeedEmployeesRequest] = Body(default=None),
    sample_data: SampleData = Depends(get_sample_data),
) -> ApiResponse:
    clear_existing = payload.clear_existing if payload else False
    return ApiResponse(
        data=sample_data.seed_employees(clear_existing=clear_existing),
        message="Employees seeded successfully",
    )


@connection_router.get("/setup-fleet-data", response_model=ApiResponse, summary="Describe fleet data setup")
async def setup_fleet_data_usage() -> ApiResponse:
    return ApiResponse(
        data={
            "usage": "POST to this endpoint to set up fleet data",
            "description": "Replaces vehicles and employee profiles with three vehicles and two drivers",
        },
        message="Fleet data setup endpoint",
    )


@connection_router.post(
    "/setup-fleet-data",
    response_model=ApiResponse,
    summary="Replace vehicles and profiles with the demo fleet",
)
def setup_fleet_data(sample_data: SampleData = Depends(get_sample_data)) -> ApiResponse:
    return ApiResponse(data=sample_data.setup_fleet_data(), message="Fleet data setup completed")


@connection_router.get("/populate-all-data", response_model=ApiResponse, summary="Describe sample data population")
async def populate_all_data_usage() -> ApiResponse:
    return ApiResponse(
        data={
            "usage": "POST to this endpoint to populate all databases",
            "description": (
                "Clears vehicles, trips, routes, maintenance and fuel records, "
                "employee profiles and expenses, then inserts sample data"
            ),
        },
        message="Sample data population endpoint",
    )


@connection_router.post(
    "/populate-all-data",
    response_model=ApiResponse,
    summary="Replace every dashboard collection with sample data",
    description="""
    Destructive: every listed collection is emptied first. Insert failures
    are reported per category in `results` rather than aborting the run.
    """,
)
def populate_all_data(sample_data: SampleData = Depends(get_sample_data)) -> ApiResponse:
    return ApiResponse(data=sample_data.populate_all_data(), message="All data populated successfully")


@connection_router.get("/refresh-data", response_model=ApiResponse, summary="Dump collections by type")
def refresh_data(
    data_type: str = Query("all", alias="type"),
    sample_data: SampleData = Depends(get_sample_data),
) -> ApiResponse:
    data = sample_data.dump_collections(data_type)
    return ApiResponse(
        data={**data, "timestamp": datetime.utcnow().isoformat()},
        message="Data refreshed successfully",
    )


@connection_router.post("/employee/seed", response_model=ApiResponse, summary="Insert one placeholder employee")
def seed_employee(
    payload: Optional[EmployeeSeedRequest] = Body(default=None),
    sample_data: SampleData = Depends(get_sample_data),
) -> ApiResponse:
    payload = payload or EmployeeSeedRequest()
    return ApiResponse(
        data=sample_data.seed_employee(payload.name, payload.employee_id, payload.assigned_vehicle_id)
    )


@connection_router.get("/employee/seed", response_model=ApiResponse, summary="Count employees")
def employee_count(sample_data: SampleData = Depends(get_sample_data)) -> ApiResponse:
    return ApiResponse(data=sample_data.employee_count())
