"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from src.application.dto import RegisterUserRequest, UserResponse
from src.application.services import UserService
from src.core.dependencies import get_user_service
from src.presentation.schemas import (
    ErrorResponseSchema,
    UserCreateSchema,
    UserResponseSchema,
)

user_router = APIRouter(
    prefix="/users",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request or branch"},
        503: {"model": ErrorResponseSchema, "description": "Counter store unavailable"},
    },
)


def _to_schema(response: UserResponse) -> UserResponseSchema:
    return UserResponseSchema(
        id=response.id,
        unique_id=response.unique_id,
        display_name=response.display_name,
        email=response.email,
        role=response.role,
        branch_id=response.branch_id,
        branch_name=response.branch_name,
        created_at=response.created_at,
    )


@user_router.post(
    "",
    response_model=UserResponseSchema,
    status_code=201,
    summary="Create User",
    description="""
    Create a user under an active branch.

    The user is assigned the next unique ID of the branch, e.g. DH-0001.
    """,
    responses={
        201: {"description": "User created"},
        409: {"model": ErrorResponseSchema, "description": "Email already registered"},
    },
)
async def create_user(
    request: UserCreateSchema,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponseSchema:
    dto = RegisterUserRequest(
        email=request.email,
        display_name=request.display_name,
        branch_id=request.branch_id,
        firebase_uid=request.firebase_uid,
        role=request.role,
    )

    response = await user_service.register_user(dto)

    return _to_schema(response)


@user_router.get(
    "/{unique_id}",
    response_model=UserResponseSchema,
    summary="Get User",
    responses={
        404: {"model": ErrorResponseSchema, "description": "User not found"},
    },
)
async def get_user(
    unique_id: Annotated[
        str,
        Path(min_length=1, max_length=32, description="Unique ID, e.g. DH-0001"),
    ],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponseSchema:
    response = await user_service.get_user(unique_id)

    return _to_schema(response)
