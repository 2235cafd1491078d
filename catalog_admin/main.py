"""FastAPI application entry point.

Server-rendered admin for categories and products.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from catalog_admin import __version__
from catalog_admin.api.routes import categories_router, health_router, products_router
from catalog_admin.api.templating import render
from catalog_admin.config import settings
from catalog_admin.core.errors import CatalogError, NotFoundError
from catalog_admin.infra.database import close_db_engine, create_tables, verify_db_connection
from catalog_admin.infra.logging import bind_request_context, get_logger, setup_logging
from catalog_admin.schemas.common import ErrorResponse

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Create missing tables (when enabled)
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Catalog admin starting",
        environment=settings.environment,
        version=__version__,
    )

    if settings.db_create_tables:
        try:
            await create_tables()
        except Exception as e:
            logger.warning("Failed to create tables", error=str(e))

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Catalog admin shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


app = FastAPI(
    title="Catalog Admin",
    description="Category and product administration",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its status and duration."""
    bind_request_context(method=request.method, path=request.url.path)
    start_time = time.time()
    response = await call_next(request)
    duration_ms = int((time.time() - start_time) * 1000)

    logger.info(
        "Request handled",
        status_code=response.status_code,
        duration_ms=duration_ms,
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


def _render_not_found(request: Request, message: str) -> Response:
    return render(
        request,
        "errors/not_found.html",
        {"message": message},
        status_code=status.HTTP_404_NOT_FOUND,
    )


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> Response:
    """Render application errors that escaped a route."""
    if isinstance(exc, NotFoundError):
        logger.info("Entity not found", entity=exc.entity, entity_id=exc.entity_id, path=request.url.path)
        return _render_not_found(request, exc.message)

    logger.warning("Unhandled catalog error", error=exc.message, path=request.url.path)
    return render(
        request,
        "errors/error.html",
        {"message": exc.message},
        status_code=exc.status_code,
    )


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Show the not-found page for unmatched routes (including missing or non-numeric ids)."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _render_not_found(request, "Page not found")
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            error_type=type(exc).__name__,
        ).model_dump(),
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(categories_router, prefix="/categories", tags=["Categories"])
app.include_router(products_router, prefix="/products", tags=["Products"])


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Land on the product list."""
    return RedirectResponse(url="/products", status_code=status.HTTP_303_SEE_OTHER)
