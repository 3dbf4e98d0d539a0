"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from app.api.routes import router as api_router
from app.core.config import Settings, settings
from app.core.database import init_db
from app.core.exception_handlers import register_exception_handlers
from app.core.logging import configure_logging
from app.schemas.health import RootResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Check the database once at startup; an unreachable database is fatal."""
    try:
        await run_in_threadpool(init_db)
    except SQLAlchemyError as e:
        logger.critical("Database connection failed: %s", e)
        raise SystemExit(1) from e
    logger.info("Server ready [%s]", settings.APP_ENV)
    yield


def create_app(app_settings: Settings = settings, check_db: bool = True) -> FastAPI:
    """Build the application. Tests pass check_db=False and override get_db."""
    configure_logging(app_settings)

    application = FastAPI(
        title="Taskboard API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan if check_db else None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.CORS_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(api_router, prefix=app_settings.API_PREFIX)

    @application.get("/", response_model=RootResponse)
    def root() -> RootResponse:
        """Root route; minimal payload for discovery."""
        return RootResponse(message="Visit API documentation at /docs")

    return application


app = create_app()
