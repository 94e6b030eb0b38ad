"""
Main application module.

This module builds the FastAPI application exposing the employee, banking and
student enrollment portals over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from portals.database.mongo import MongoConnection, ensure_indexes
from portals.middleware.error_handler import add_error_handlers
from portals.routes.accounts import router as accounts_router
from portals.routes.employees import router as employees_router
from portals.routes.enrollment import router as enrollment_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB connection on startup and close it on shutdown."""
    logger.info("Starting up application...")
    app.state.mongo.open()
    ensure_indexes(app.state.mongo)
    logger.info("Application startup complete")
    try:
        yield
    finally:
        logger.info("Shutting down application...")
        app.state.mongo.close()
        logger.info("Application shutdown complete")


def create_app(connection: Optional[MongoConnection] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        connection: Connection to use instead of one built from settings.
            It is opened at startup and closed at shutdown either way.

    Returns:
        FastAPI: The configured application
    """
    app = FastAPI(
        title="Portals API",
        description="Employee, banking and student enrollment portals backed by MongoDB",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.mongo = connection or MongoConnection()

    add_error_handlers(app)

    app.include_router(employees_router)
    app.include_router(accounts_router)
    app.include_router(enrollment_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
