"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop_explorer import __version__
from shop_explorer.api.middleware import CORSHeadersMiddleware
from shop_explorer.api.responses import error_response
from shop_explorer.api.routes import functions, health, stores, viewer
from shop_explorer.config import settings
from shop_explorer.database import dispose_engine

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("application_startup", env=settings.app_env)
    yield
    await dispose_engine()
    logger.info("application_shutdown")


# Create FastAPI app
app = FastAPI(
    title="Shop Explorer",
    description="Multi-store Shopify data explorer",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(CORSHeadersMiddleware)


# === Error envelope ===


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = jsonable_encoder(exc.errors(), exclude={"ctx", "url"})
    return error_response("Invalid request.", 400, details)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_exception", path=request.url.path)
    return error_response("Internal server error", 500)


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(
    functions.router,
    prefix="/functions/v1",
    tags=["Functions"],
)
app.include_router(
    stores.router,
    prefix="/api/v1",
    tags=["Stores"],
)
app.include_router(
    viewer.router,
    prefix="/api/v1",
    tags=["Data Viewer"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Shop Explorer",
        "version": __version__,
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shop_explorer.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
