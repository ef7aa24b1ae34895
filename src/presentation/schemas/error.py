"""Pydantic schema for API error responses."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Body of every 4xx/5xx response raised from a domain exception."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "STORAGE_UNAVAILABLE",
                    "message": "Service temporarily unavailable. Please try again.",
                    "request_id": "5f0c6e1e-3d1f-4d8e-9a57-1c2b7a0e9f11",
                },
                {
                    "error": "INVALID_BRANCH",
                    "message": "Invalid branch ID: atlantis",
                    "request_id": "5f0c6e1e-3d1f-4d8e-9a57-1c2b7a0e9f12",
                },
            ]
        }
    )

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable explanation")
    request_id: str | None = Field(None, description="X-Request-ID of the failed request")
