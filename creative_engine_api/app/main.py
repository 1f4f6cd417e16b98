"""
Main entrypoint for the Creative Engine API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn creative_engine_api.app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import validation_exception_handler
from .core.logging_config import setup_logging
from .core.storage import init_storage


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the routers and
    # services can log during startup.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # The web front end calls the unversioned ``/api`` paths; ``/api/v1``
    # exposes the same endpoints for versioned clients.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Seed the DNA and exemplars files on first run.
        init_storage()

    return app


app = create_app()
