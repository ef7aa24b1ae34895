"""
ERP Dashboard API - application entry point.

Wires the branch registry, user signup and the branch-scoped sequence
allocator (DH-0001, BOG-0002, ...) into a FastAPI app.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from src import __version__
from src.application.services import BranchService
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.infrastructure.database import db_manager
from src.infrastructure.repositories import (
    PostgresBranchRepository,
    PostgresCounterRepository,
)
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

logger = structlog.get_logger(__name__)


async def seed_default_branches() -> int:
    """Insert missing default branches together with their counters."""
    async with db_manager.session() as session:
        service = BranchService(
            branch_repository=PostgresBranchRepository(session),
            counter_repository=PostgresCounterRepository(db_manager.sessionmaker),
        )
        return await service.seed_default_branches()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, engine, schema, default branches.
    Shutdown: dispose of the engine.
    """
    setup_logging()
    db_manager.init()
    await db_manager.create_all()

    if settings.seed_default_branches:
        await seed_default_branches()

    logger.info("application_started", app=settings.app_name, version=__version__)
    try:
        yield
    finally:
        await db_manager.close()
        logger.info("application_stopped")


app = FastAPI(
    title="ERP Dashboard API",
    description="Branches, users and atomic branch-scoped unique IDs",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Added last so it runs first: the request ID is bound before logging starts
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=get_metrics(), media_type=get_metrics_content_type())


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port, reload=settings.debug)
