"""
Portfolio Backend — Shared Pydantic Schemas
=============================================

What:  The response envelope every resource endpoint returns, the base
       class for request payloads, and the health/error response models.

Envelope contract (returned by every operation):
    success  bool            always present
    data     any             reads: a row, a list of rows or an aggregate
    message  str             writes and failures: human-readable outcome
    id       int             add: primary key of the inserted row

    Keys that were never set are left out of the JSON body, so a read
    returns {"success": true, "data": [...]} and an add returns
    {"success": true, "message": "Skill added successfully", "id": 7}.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

# Range of a 32-bit INTEGER column (PostgreSQL INTEGER)
DB_INT_MIN = -(2**31)
DB_INT_MAX = 2**31 - 1


class Envelope(BaseModel):
    """Uniform `{success, data|message, id}` response wrapper."""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    data: Optional[Any] = Field(default=None, description="Row, rows or aggregate for reads")
    message: Optional[str] = Field(default=None, description="Outcome of writes and failures")
    id: Optional[int] = Field(default=None, description="Primary key of a newly inserted row")


class Payload(BaseModel):
    """
    Base for request bodies (JSON objects or HTML form fields).

    - Unknown keys are ignored: the front-end posts whole form objects.
    - Blank strings count as "not provided", the way an empty form input does;
      they become None before type coercion, so "" never fails int parsing.
    - Integers must fit an INTEGER column; larger values fail validation
      instead of reaching the driver.
    """

    model_config = {"extra": "ignore", "str_strip_whitespace": True}

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("*", mode="after")
    @classmethod
    def fits_integer_column(cls, v: Any) -> Any:
        if isinstance(v, int) and not DB_INT_MIN <= v <= DB_INT_MAX:
            raise ValueError("integer out of range")
        return v


class ErrorResponse(BaseModel):
    """
    Failure envelope produced by the global exception handlers.

    Example:
        {
            "success": false,
            "message": "Name and profile_id are required",
            "error": "validation_error",
            "request_id": "1a2b3c4d"
        }
    """

    success: bool = Field(default=False)
    message: str = Field(description="Human-readable error description")
    error: str = Field(description="Machine-readable error code")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""

    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
