# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .api import folders_router, health_router, notes_router
from .config import get_settings
from .core.exceptions import NotefulError, StoreError, UnauthorizedError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables, dispose_engine
from .middleware.auth import require_api_token, settings_for

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Noteful application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )
    if not settings.api_token:
        logger.warning("API_TOKEN is empty; every /api request will be rejected")

    # Allow tests to skip touching the real DB (e.g., when using SQLite in-memory)
    if os.getenv("NOTEFUL_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTEFUL_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Noteful application")
    await dispose_engine()


def _error_body(message: str) -> dict:
    return {"error": {"message": message}}


def _describe_validation_error(exc: RequestValidationError) -> str:
    """First validation problem as "Invalid '<field>' in request <location>"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed request body"
    loc = [str(part) for part in first.get("loc", ())]
    location = loc[0] if loc else "body"
    field = loc[-1] if len(loc) > 1 else location
    return f"Invalid '{field}' in request {location}"


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    # the only error body that is a bare string
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def noteful_error_handler(request: Request, exc: NotefulError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(
            f"Store failure during {exc.operation}",
            extra={"path": request.url.path, **exc.context},
        )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # an undecodable body must not hide a missing token
    if require_api_token.guards(request):
        try:
            require_api_token.verify(request, settings_for(request))
        except UnauthorizedError as auth_error:
            return await unauthorized_handler(request, auth_error)

    message = _describe_validation_error(exc)
    logger.debug(message, extra={"path": request.url.path, "errors": exc.errors()})
    return JSONResponse(status_code=400, content=_error_body(message))


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Unhandled database error", exc_info=exc, extra={"path": request.url.path})
    return JSONResponse(status_code=500, content=_error_body("server error"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc, extra={"path": request.url.path})
    return JSONResponse(status_code=500, content=_error_body("server error"))


def register_exception_handlers(app: FastAPI) -> None:
    """Map application errors onto the two JSON error shapes."""
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(NotefulError, noteful_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


app = FastAPI(
    title=settings.app_name,
    description="Folders and notes API",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "X-Request-ID"],
)

# Include routers
app.include_router(folders_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": "Noteful API"}


# Basic unprefixed health endpoint for load balancers
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("noteful.main:app", host=settings.host, port=settings.port, reload=settings.reload)
