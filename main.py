#!/usr/bin/env python3
"""
Jobly API - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from jobly.api.routes import api_router
from jobly.core.config import settings
from jobly.core.errors import register_exception_handlers
from jobly.db.database import create_db_and_tables

# Setup logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info(f"{settings.app_name} v{settings.version} ready")
    yield


async def root():
    """Root endpoint"""
    return {"message": settings.app_name, "version": settings.version}


async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "jobly-api"}


def create_app(api_prefix: Optional[str] = None) -> FastAPI:
    """Build the app; ``api_prefix`` defaults to ``settings.api_prefix``"""
    app = FastAPI(
        title=settings.app_name,
        description="Job board API: list, search and manage job postings",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    prefix = settings.api_prefix if api_prefix is None else api_prefix
    app.include_router(api_router, prefix=prefix)

    app.add_api_route("/", root, methods=["GET"])
    app.add_api_route("/health", health_check, methods=["GET"])
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
