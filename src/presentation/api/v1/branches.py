"""Branch API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.services import BranchService
from src.core.dependencies import get_branch_service
from src.presentation.schemas import BranchListResponseSchema, BranchSchema

branch_router = APIRouter(prefix="/branches")


@branch_router.get(
    "/active",
    response_model=BranchListResponseSchema,
    summary="List Active Branches",
    description="Returns active branches ordered by name.",
)
async def list_active_branches(
    branch_service: Annotated[BranchService, Depends(get_branch_service)],
) -> BranchListResponseSchema:
    branches = await branch_service.list_active_branches()

    return BranchListResponseSchema(
        branches=[
            BranchSchema(
                branch_id=b.branch_id,
                branch_name=b.branch_name,
                branch_location=b.branch_location,
                branch_code=b.branch_code,
            )
            for b in branches
        ]
    )
