"""
Northwind Orders - Main FastAPI Application.

REST API over the Northwind order repository.
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from northwind.infrastructure.database import close_database, init_database
from northwind.infrastructure.logging import configure_logging
from northwind.settings import get_app_settings

from webapi.v1.endpoints import orders


logger = logging.getLogger(__name__)
settings = get_app_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and dispose it on shutdown."""
    configure_logging(settings.logging)
    await init_database(settings.database)
    logger.info(f"✅ {settings.api.title} started")
    try:
        yield
    finally:
        await close_database()
        logger.info(f"{settings.api.title} stopped")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.api.title,
    description="Northwind order management API",
    version=settings.api.version,
    lifespan=lifespan,
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Location"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed payloads and parameters as 400."""
    logger.warning(f"Invalid request {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": _validation_errors(exc)},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions without leaking internals."""
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def _validation_errors(exc: RequestValidationError) -> list:
    """Validation errors reduced to location and message."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# Include routers
app.include_router(orders.router, prefix=settings.api.prefix)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
