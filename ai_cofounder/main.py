"""
Main FastAPI application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_cofounder.config import get_settings
from ai_cofounder.routes import (
    auth_router,
    cofounders_router,
    ideas_router,
    system_router,
    validation_router,
)
from ai_cofounder.core.providers import registry
from ai_cofounder.core.exceptions import AppException
from ai_cofounder.database import init_db, close_db

# Import providers to register them
import ai_cofounder.providers  # noqa: F401


# Configure logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format=settings.log_format
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment.value}")
    logger.info(f"Default LLM Provider: {settings.default_llm_provider}")

    await init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await registry.cleanup_all()
    await close_db()
    logger.info("Cleanup complete")


app = FastAPI(
    title=settings.app_name,
    description="AI co-founder for student founders: business plan generation, "
                "idea validation content and co-founder matching.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# Exception handler for custom exceptions
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle application-specific exceptions."""
    if exc.status_code >= 500:
        logger.error(f"Application error: {exc.code} - {exc.message}")
    else:
        logger.info(f"Request rejected: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


origins = settings.parsed_allowed_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(auth_router)
app.include_router(cofounders_router)
app.include_router(ideas_router)
app.include_router(validation_router)
app.include_router(system_router)


@app.get("/info")
async def app_info():
    """Get application information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment.value,
        "available_providers": {
            "llm": registry.names(),
        },
        "default_llm": settings.default_llm_provider
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ai_cofounder.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
