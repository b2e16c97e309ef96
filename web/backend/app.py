#!/usr/bin/env python3
"""
Career Guidance Platform - FastAPI Application

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config_loader import get_config
from database.init_db import init_db
from .exceptions import register_exception_handlers
from .rate_limit import add_rate_limit_handlers
from .routers import (
    admin_router,
    auth_router,
    companies_router,
    institution_router,
    institutions_router,
    students_router,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup, retrying while the database comes up."""
    init_db()
    yield
    logger.info("Shutting down Career Guidance API")


# Create FastAPI app
app = FastAPI(
    title="Career Guidance API",
    description="Admissions, job matching and notifications for students, institutions and companies",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.web.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(auth_router)
app.include_router(students_router)
app.include_router(institutions_router)
app.include_router(institution_router)
app.include_router(companies_router)
app.include_router(admin_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "career-guidance-api"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Career Guidance API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
