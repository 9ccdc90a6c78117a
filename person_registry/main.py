"""FastAPI application entry point.

Person Registry - person record management through HTML forms.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from person_registry.routes import api_router
from person_registry.schemas import ErrorResponse
from person_registry.services.persons import PersonNotFoundError
from person_registry.settings import Settings, get_settings
from person_registry.stores.database import Database

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the database handle on startup and disposes it on shutdown.
    """
    settings: Settings = app.state.settings
    database = Database.from_settings(settings)
    app.state.database = database

    try:
        if settings.create_tables_on_startup:
            await database.create_tables()
        await database.ping()
        logger.info("Database connected")
    except Exception:
        logger.exception("Database init failed")

    yield

    await database.dispose()
    app.state.database = None


def _error_response(status_code: int, code: str, message: str, detail: dict | None = None) -> JSONResponse:
    body = ErrorResponse.build(code, message, detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Person record management",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    @app.exception_handler(PersonNotFoundError)
    async def person_not_found_handler(request: Request, exc: PersonNotFoundError) -> JSONResponse:
        return _error_response(
            404,
            "PERSON_NOT_FOUND",
            str(exc),
            {"id": exc.person_id},
        )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(
            500,
            "INTERNAL_ERROR",
            str(exc) if settings.debug else "Internal server error",
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "person_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
