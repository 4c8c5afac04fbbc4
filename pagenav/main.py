"""Pagination Navigator API."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pagenav.api.middleware.logging import LoggingMiddleware
from pagenav.api.v1.endpoints import health
from pagenav.api.v1.router import api_router
from pagenav.core.config import settings
from pagenav.core.logging import get_logger, log_event, setup_logging
from pagenav.exceptions import ConfigurationError, RenderError

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version}",
        extra={
            "environment": settings.environment.value,
            "link_style": settings.link_style.value,
        },
    )

    yield

    logger.info("Shutting down")


app = FastAPI(
    title=f"{settings.app_name} API",
    version=settings.app_version,
    description="Pagination navigation sequences for paged result sets",
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan,
)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    log_event(
        logger, "warning", "pager_configuration_rejected",
        path=request.url.path, error=exc.message, **exc.details,
    )
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "details": exc.details},
    )


@app.exception_handler(RenderError)
async def render_error_handler(request: Request, exc: RenderError):
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message, "details": exc.details},
    )


# Configure middleware
app.add_middleware(LoggingMiddleware)

if settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

# Register routes
app.include_router(health.router, tags=["health"])
app.include_router(api_router, prefix=settings.api_prefix)

if __name__ == "__main__":
    uvicorn.run(
        "pagenav.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.value.lower(),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
