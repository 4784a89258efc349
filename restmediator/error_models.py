"""
Error response models for the transport boundary.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import HTTPError


class ErrorResponse(BaseModel):
    """Standard error response body.

    The core never writes an error body itself; the transport boundary turns
    a raised ``HTTPError`` into one of these.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "NO_CONTENT_TYPE_PROVIDED",
                "status": 400,
            }
        }
    )

    error: str = Field(
        ...,
        description="Human-readable error message describing what went wrong"
    )

    status: Optional[int] = Field(
        None,
        description="HTTP status code the error was answered with"
    )

    def model_dump_json(self, **kwargs):
        """Serialize with ``exclude_none`` on by default for cleaner bodies."""
        kwargs.setdefault('exclude_none', True)
        return super().model_dump_json(**kwargs)

    @classmethod
    def from_http_error(cls, error: HTTPError) -> "ErrorResponse":
        """Create an ErrorResponse from a raised HTTPError."""
        return cls(error=error.message, status=int(error.status_code))
