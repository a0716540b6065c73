"""Common Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema for store inputs: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


def not_blank(value: Optional[str]) -> Optional[str]:
    """Strip a display string and refuse an empty one."""
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class DeleteResult(BaseModel):
    """Outcome of a delete, shared by both stores."""

    success: bool
    message: str

    def __bool__(self) -> bool:
        return self.success


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str
    error_code: Optional[str] = None
    details: dict = {}


class HealthResponse(BaseModel):
    status: str
    app: str
