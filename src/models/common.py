"""
Shared response envelopes and base models.

Every resource endpoint answers with the same envelope:

    {"success": true, "data": ..., "message": "...", "count": N}

Errors use {"success": false, "error": "...", "code": "...", "details": ...}
(see src.core.exceptions).
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for document-store payloads.

    Fields are declared in snake_case and exchanged in camelCase
    (``plate_number`` <-> ``plateNumber``), which is how documents are stored.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    def to_document(self, exclude_unset: bool = False) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=exclude_unset)


class ApiResponse(BaseModel):
    """Standard success envelope."""
    success: bool = True
    data: Optional[Any] = None
    message: Optional[str] = None
    count: Optional[int] = None


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    checks: Optional[dict] = None


class ErrorResponse(BaseModel):
    """Standard error response model."""
    success: bool = False
    error: str
    code: str
    details: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
