from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import TaskError
from .registry import TaskRegistry, build_registry
from .routers import tasks as tasks_router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

STATUS_TEXT = "API is running 🚀"

openapi_tags = [
    {"name": "health", "description": "Service status endpoint."},
    {
        "name": "tasks",
        "description": "Create, list, toggle and delete in-memory tasks.",
    },
]


async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    """
    Render registry errors as {"error": <message>} with the error's status code.
    """
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request bodies that cannot be parsed.

    Response format:
        {
            "error": "Invalid request body",
            "detail": [... pydantic/fastapi error details ...]
        }
    """
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, registry: Optional[TaskRegistry] = None) -> FastAPI:
    """
    Build the application and the registry it owns.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        registry: Registry to serve; a fresh one is built from settings when omitted.

    Returns:
        A configured FastAPI instance whose registry is at app.state.registry.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Task API",
        description="In-memory task list with create, list, toggle and delete operations.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else build_registry(settings)

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskError, task_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # PUBLIC_INTERFACE
    @app.get("/", summary="Status", tags=["health"], response_class=PlainTextResponse)
    def status_text() -> str:
        """
        Status endpoint.

        Returns:
            A plain text string confirming the service is up.
        """
        return STATUS_TEXT

    app.include_router(tasks_router.router)
    logger.debug("Application created (id strategy: %s)", settings.id_strategy)
    return app


# ASGI entry point for `python -m task_api` and `uvicorn task_api.main:app`.
# Settings are read from the environment when this module is imported.
app = create_app()
