"""
Employee Routes - Employee records, profiles and expense claims.

Endpoints:
- /api/employees          : list, create, update, delete (?id=)
- /api/employee/profile   : get (?employeeId=), create, update
- /api/employee/expenses  : list (filters), create, update, delete (?id=)
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.models.common import ApiResponse, ErrorResponse
from src.models.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    ExpenseCreate,
    ExpenseUpdate,
    ProfileUpdate,
)
from src.services.employee_service import EmployeeService, get_employee_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Employees"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
)


# ============================================================
# Employees
# ============================================================

@router.get("/employees", response_model=ApiResponse, summary="List employees, newest first")
def list_employees(service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    employees = service.list_employees()
    return ApiResponse(data=employees, count=len(employees))


@router.post("/employees", response_model=ApiResponse, status_code=201, summary="Add an employee")
def create_employee(payload: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    return ApiResponse(data=service.create_employee(payload), message="Employee created successfully")


@router.put("/employees", response_model=ApiResponse, summary="Update an employee")
def update_employee(payload: EmployeeUpdate, service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    return ApiResponse(data=service.update_employee(payload), message="Employee updated successfully")


@router.delete("/employees", response_model=ApiResponse, summary="Delete an employee")
def delete_employee(
    id: Optional[str] = Query(default=None),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    if not id:
        raise ValidationError("Employee ID is required", field="id")
    service.delete_employee(id)
    return ApiResponse(message="Employee deleted successfully")


# ============================================================
# Profiles
# ============================================================

@router.get("/employee/profile", response_model=ApiResponse, summary="Get an employee profile")
def get_profile(
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    return ApiResponse(data=service.get_profile(employee_id))


@router.post("/employee/profile", response_model=ApiResponse, status_code=201, summary="Create an employee profile")
def create_profile(payload: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    return ApiResponse(data=service.create_profile(payload), message="Profile created successfully")


@router.put("/employee/profile", response_model=ApiResponse, summary="Update an employee profile")
def update_profile(payload: ProfileUpdate, service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    return ApiResponse(data=service.update_profile(payload), message="Profile updated successfully")


# ============================================================
# Expenses
# ============================================================

@router.get("/employee/expenses", response_model=ApiResponse, summary="List expense claims")
def list_expenses(
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    status: Optional[str] = Query(default=None),
    trip_id: Optional[str] = Query(default=None, alias="tripId"),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    expenses = service.list_expenses(employee_id=employee_id, status=status, trip_id=trip_id)
    return ApiResponse(data=expenses, count=len(expenses))


@router.post(
    "/employee/expenses",
    response_model=ApiResponse,
    status_code=201,
    summary="Submit an expense claim",
    description="Required: `type`, `amount`, `date`, `employeeId`. New claims are always `pending`.",
)
def create_expense(payload: ExpenseCreate, service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    return ApiResponse(data=service.create_expense(payload), message="Expense created successfully")


@router.put("/employee/expenses", response_model=ApiResponse, summary="Update an expense claim")
def update_expense(payload: ExpenseUpdate, service: EmployeeService = Depends(get_employee_service)) -> ApiResponse:
    return ApiResponse(data=service.update_expense(payload), message="Expense updated successfully")


@router.delete("/employee/expenses", response_model=ApiResponse, summary="Delete an expense claim")
def delete_expense(
    id: Optional[str] = Query(default=None),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    if not id:
        raise ValidationError("Expense ID is required", field="id")
    service.delete_expense(id)
    return ApiResponse(message="Expense deleted successfully")
