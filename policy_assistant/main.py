"""
FastAPI application entry point.

Initializes FastAPI app, registers routers and middleware, serves the chat UI,
and builds the service container during lifespan startup.

Dependencies: fastapi, uvicorn, policy_assistant.api, policy_assistant.observability, policy_assistant.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from policy_assistant import __version__
from policy_assistant.api import api_router
from policy_assistant.api.deps import ServiceContainer
from policy_assistant.api.routers.upload import NO_FILE_MESSAGE
from policy_assistant.configs import Settings, get_settings
from policy_assistant.observability.logger import configure_logging
from policy_assistant.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

# Third-party clients read GOOGLE_API_KEY and friends from the process environment.
load_dotenv()

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

INVALID_REQUEST_MESSAGE = "Invalid request."
VALIDATION_MESSAGES = {"/upload": NO_FILE_MESSAGE}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the service container once (unless one was injected) and closes
    its clients on shutdown.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    services = getattr(app.state, "services", None)
    if services is None:
        try:
            services = ServiceContainer(settings)
            services.warm_up()
        except Exception as e:
            logger.exception(
                "Failed to initialize application resources",
                extra={"error": str(e)},
            )
            raise
        app.state.services = services
    logger.info("Application startup complete: all resources initialized")

    yield

    await services.aclose()
    logger.info("Application shutdown")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """
    Malformed request bodies are client errors.

    A multipart "file" field that is not a file upload counts as no file.
    """
    logger.info(
        "Rejected malformed request",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    message = VALIDATION_MESSAGES.get(request.url.path, INVALID_REQUEST_MESSAGE)
    return PlainTextResponse(message, status_code=400)


def create_app(
    settings: Settings | None = None,
    services: ServiceContainer | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings (cached environment settings if None)
        services: Pre-built service container, mainly for tests

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Policy PDF Assistant",
        description="Upload a policy PDF and ask questions answered from its content",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if services is not None:
        app.state.services = services

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router)
    app.mount("/ui", StaticFiles(directory=str(STATIC_DIR), html=True), name="ui")

    @app.get("/", include_in_schema=False)
    async def redirect_to_ui() -> RedirectResponse:
        return RedirectResponse(url="/ui/")

    return app


app = create_app()


def run() -> None:
    """Start uvicorn with the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "policy_assistant.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
