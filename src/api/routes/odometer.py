"""
Odometer Routes - Photo submissions from drivers and admin review.

Submissions arrive as multipart forms: the photo plus the reading's
fields. `exifData` is a JSON string when present.
"""
import json
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from pydantic import ValidationError as SchemaValidationError

from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.models.common import ApiResponse
from src.models.employee import OdometerStatusUpdate, OdometerSubmission
from src.services.employee_service import EmployeeService, get_employee_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/odometer",
    tags=["Odometer"],
)


@router.post(
    "/submit",
    response_model=ApiResponse,
    status_code=201,
    summary="Submit an odometer reading",
    description="""
    Multipart form fields: `photo` (file), `odometerValue`, `vehicleId`,
    `latitude`, `longitude`, and optionally `timestamp`, `tripId`,
    `driverId`, `exifData` (JSON).

    The photo is stored under `uploads/odometer/` and the reading starts
    as `pending`.
    """,
)
def submit_reading(
    photo: Optional[UploadFile] = File(default=None),
    odometer_value: Optional[str] = Form(default=None, alias="odometerValue"),
    vehicle_id: Optional[str] = Form(default=None, alias="vehicleId"),
    latitude: Optional[str] = Form(default=None),
    longitude: Optional[str] = Form(default=None),
    timestamp: Optional[str] = Form(default=None),
    trip_id: Optional[str] = Form(default=None, alias="tripId"),
    driver_id: Optional[str] = Form(default=None, alias="driverId"),
    exif_data: Optional[str] = Form(default=None, alias="exifData"),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    required = {
        "photo": photo,
        "odometerValue": odometer_value,
        "vehicleId": vehicle_id,
        "latitude": latitude,
        "longitude": longitude,
    }
    missing = [name for name, value in required.items() if value in (None, "")]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", field=missing[0])

    try:
        exif = json.loads(exif_data) if exif_data else None
    except json.JSONDecodeError:
        raise ValidationError("exifData must be valid JSON", field="exifData")

    try:
        submission = OdometerSubmission(
            odometer_value=odometer_value,
            vehicle_id=vehicle_id,
            latitude=latitude,
            longitude=longitude,
            timestamp=timestamp,
            trip_id=trip_id,
            driver_id=driver_id or "current-user",
            exif_data=exif,
        )
    except SchemaValidationError as e:
        field = ".".join(str(part) for part in e.errors()[0]["loc"])
        raise ValidationError(f"Invalid request: {field} is invalid", field=field)

    try:
        content = photo.file.read()
    finally:
        photo.file.close()

    reading = service.submit_odometer(submission, content, photo.filename)
    return ApiResponse(data=reading, message="Odometer reading submitted successfully")


@router.get("/list", response_model=ApiResponse, summary="List odometer readings, newest first")
def list_readings(
    status: Optional[str] = Query(default=None),
    driver_id: Optional[str] = Query(default=None, alias="driverId"),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    readings = service.list_odometer(status=status, driver_id=driver_id)
    return ApiResponse(data=readings, count=len(readings))


@router.patch("/update-status", response_model=ApiResponse, summary="Approve or reject a reading")
def update_status(
    payload: OdometerStatusUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse:
    updated = service.update_odometer_status(payload)
    return ApiResponse(data=updated, message=f"Odometer reading {payload.status}")
