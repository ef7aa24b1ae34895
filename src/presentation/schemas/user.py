"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreateSchema(BaseModel):
    """Schema for POST /v1/users request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "email": "rahim@example.com",
                    "display_name": "Rahim Uddin",
                    "branch_id": "main",
                    "firebase_uid": "fb-uid-123",
                }
            ]
        }
    )
    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Email address, stored lower-cased",
    )
    display_name: str = Field(..., min_length=1, max_length=255)
    branch_id: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Branch the user belongs to",
        examples=["main"],
    )
    firebase_uid: str = Field(..., min_length=1, max_length=128)
    role: str = Field(
        "user",
        description="One of: super admin, admin, account, reservation, user",
    )

    @field_validator("display_name", "branch_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("value cannot be empty or whitespace")
        return v.strip()


class UserResponseSchema(BaseModel):
    """Schema for a user in API responses."""

    id: str = Field(..., description="UUID of the user record")
    unique_id: str = Field(
        ...,
        description="Branch-scoped human-readable ID",
        examples=["DH-0001"],
    )
    display_name: str
    email: str
    role: str = Field(..., examples=["user"])
    branch_id: str
    branch_name: str
    created_at: str = Field(..., description="ISO 8601 creation timestamp")
