"""Branch-related Pydantic schemas."""

from pydantic import BaseModel, Field


class BranchSchema(BaseModel):
    """Schema for a branch in listings."""

    branch_id: str = Field(..., description="Branch slug", examples=["main"])
    branch_name: str = Field(..., description="Display name", examples=["Main Office"])
    branch_location: str = Field(..., examples=["Dhaka, Bangladesh"])
    branch_code: str = Field(
        ...,
        description="Short code used as the unique ID prefix",
        examples=["DH"],
    )


class BranchListResponseSchema(BaseModel):
    """Schema for GET /v1/branches/active response."""

    branches: list[BranchSchema] = Field(
        ...,
        description="Active branches ordered by name",
    )
