"""Hello API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApiError → {"error": message} responses
    - Logging configured on startup via lifespan context manager
    - run() exits non-zero when the listen address cannot be bound

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - uvicorn log_config disabled so its records share our root handler
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routes import greeting, person
from app.config import get_settings
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Hello API started")
    yield
    logger.info("Hello API shutting down")


app = FastAPI(title="Hello API", version="1.0.0", lifespan=lifespan)

# Routes: explicit registration
app.include_router(greeting.router)
app.include_router(person.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn until terminated."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    server = uvicorn.Server(uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    ))
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    try:
        server.run()
    except SystemExit as exc:
        # uvicorn exits with 1 when the socket cannot be bound
        if exc.code:
            logger.error(
                f"Server error: could not serve on "
                f"{settings.host}:{settings.port}",
            )
        raise
    if not server.started:
        logger.error("Server error: startup did not complete")
        sys.exit(1)
    logger.info("Server shut down gracefully")
