"""Application configuration and router setup."""

from contextlib import asynccontextmanager
import logging

import fastapi
from fastapi.middleware import cors
from fastapi.openapi.utils import get_openapi

from components.core import init_db
from components.core.config import get_settings
from components.core.logger import setup_logging
from restapi.endpoints import (
    app_setting,
    auth,
    budget_year,
    category,
    dashboard,
    health_check,
    plan,
    report,
    transaction,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    logger.info("Initializing database...")
    await init_db.db_manager.create_all()
    logger.info("Database ready")
    yield


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.DEBUG)

    app = fastapi.FastAPI(
        title=settings.APP_NAME,
        description="Budget planning and cash realization tracking",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Initialize database
    init_db.init_db(app)

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("CORS allow_origins=%s", settings.CORS_ORIGINS)

    # Include routers
    app.include_router(health_check.router)
    app.include_router(auth.router)
    app.include_router(budget_year.router)
    app.include_router(category.router)
    app.include_router(plan.router)
    app.include_router(transaction.router)
    app.include_router(app_setting.router)
    app.include_router(dashboard.router)
    app.include_router(report.router)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=settings.APP_NAME,
            version="1.0.0",
            description="Budget planning and cash realization tracking",
            routes=app.routes,
        )
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app
