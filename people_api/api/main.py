"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Middleware configuration (audit, security headers, CORS)
3. Exception handlers (not found / invalid data as JSON)
4. Router registration (people, health, then the fallback page)
5. Startup/shutdown events

Run with: uvicorn people_api.api.main:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from people_api import __version__
from people_api.api.routing import resolve_action
from people_api.api.routes import fallback_router, health_router, people_router
from people_api.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from people_api.core.config import Settings, get_settings
from people_api.core.exceptions import InvalidDataError, PeopleApiException
from people_api.core.logging_config import get_logger, setup_logging
from people_api.store import get_person_store


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: log configuration, seed the store with sample people
    - Shutdown: log how many people were held
    """
    app_settings: Settings = app.state.settings
    store = get_person_store()

    logger.info(f"Starting {app_settings.app_name} {__version__} in {app_settings.app_env} mode")
    logger.info(f"Collection path: {app_settings.collection_path}")
    logger.info(f"Static page: {app_settings.static_index_path}")
    logger.info(f"Audit Logging: {app_settings.enable_audit_logging}")

    if app_settings.seed_sample_data and len(store) == 0:
        store.seed()

    yield  # Application runs here

    logger.info(f"Shutting down {app_settings.app_name} with {len(store)} people in memory")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use. Defaults to the environment settings.

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or get_settings()

    app = FastAPI(
        title=f"{app_settings.app_name} API",
        description="""
        CRUD over an in-memory collection of people.

        ## Endpoints

        - **GET** collection: list people
        - **GET** collection/{id}: get one person
        - **POST** collection: create a person (server assigns the id)
        - **PUT** collection: update name and age of the person in the body
        - **DELETE** collection/{id}: delete a person

        Any other request receives the static HTML client page.
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if app_settings.enable_docs else None,
        redoc_url="/redoc" if app_settings.enable_docs else None,
        openapi_url="/openapi.json" if app_settings.enable_docs else None,
    )
    app.state.settings = app_settings

    # ============================================================
    # Middleware Configuration (Order matters!)
    # ============================================================

    app.add_middleware(SecurityHeadersMiddleware)

    if app_settings.enable_audit_logging:
        collection_path = app_settings.collection_path
        app.add_middleware(
            AuditMiddleware,
            route_classifier=lambda method, path: resolve_action(
                method, path, collection_path
            ).value,
        )
        logger.debug("Audit logging middleware enabled")

    if app_settings.is_development():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.debug("CORS configured for development (all origins allowed)")

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report a missing or malformed body as invalid data."""
        error = InvalidDataError(details=str(exc.errors()))
        logger.info(f"Invalid data for {request.method} {request.url.path}: {error.details}")
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_dict()
        )

    @app.exception_handler(PeopleApiException)
    async def people_api_exception_handler(request: Request, exc: PeopleApiException):
        """Handle all application exceptions (not found, invalid data, ...)."""
        logger.debug(f"{exc.error_code} for {request.method} {request.url.path}: {exc.details}")
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict()
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        Detailed error information is only included in development mode.
        """
        logger.exception(f"Unhandled exception: {exc}")

        return JSONResponse(
            status_code=500,
            content={
                "message": "internal error",
                "details": str(exc) if app_settings.is_development() else None,
            }
        )

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(people_router, prefix=app_settings.collection_path)
    app.include_router(health_router)
    # Catch-all, must stay last
    app.include_router(fallback_router)

    return app


app = create_app(settings)


def run() -> None:
    """Start the server with uvicorn using the environment settings."""
    uvicorn.run(
        "people_api.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
    )


if __name__ == "__main__":
    run()
