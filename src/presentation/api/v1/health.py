"""Health check endpoint for service monitoring."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src import __version__
from src.infrastructure.database import get_db_session

logger = structlog.get_logger(__name__)

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    database: str = "ok"


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and its counter store.",
)
async def health_check(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> HealthResponse:
    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("health_database_unreachable", error=str(e))
        return HealthResponse(status="degraded", version=__version__, database="unavailable")

    return HealthResponse(status="healthy", version=__version__)
