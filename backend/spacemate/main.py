"""SpaceMate: FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from spacemate.api.deps import get_memory_store
from spacemate.api.v1.amenities import router as amenities_router
from spacemate.api.v1.bookings import router as bookings_router
from spacemate.api.v1.properties import router as properties_router
from spacemate.config import settings
from spacemate.errors import SpaceMateError

# Configure root logger so all spacemate.* loggers output to stderr.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    if settings.storage_backend == "sql":
        from spacemate.database import async_session_factory, create_tables
        from spacemate.seed_data import seed_database

        await create_tables()
        if settings.seed_demo_data:
            async with async_session_factory() as session:
                inserted = await seed_database(session)
                await session.commit()
            if inserted:
                logger.info("Seeded database with %d demo properties", inserted)
    else:
        get_memory_store(app)
    logger.info("%s started with %s storage", settings.app_name, settings.storage_backend)
    yield
    # Shutdown: dispose engine connections
    if settings.storage_backend == "sql":
        from spacemate.database import engine

        await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Marketplace for booking hotels and office spaces, paid in cash on arrival.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SpaceMateError)
async def domain_error_handler(request: Request, exc: SpaceMateError) -> JSONResponse:
    """Render domain errors as ``{"detail": ...}`` with their status code."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal server error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report missing or malformed request fields as 400 with a readable detail."""
    problems = []
    for error in exc.errors():
        # drop the "body"/"query"/"path" prefix from the location
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(problems) or "Invalid request"},
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log storage failures in full but never leak their details."""
    logger.error("Storage failure during %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Routers
app.include_router(properties_router)
app.include_router(bookings_router)
app.include_router(amenities_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
