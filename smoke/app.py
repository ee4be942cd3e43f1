"""
Main FastAPI application.

This module creates the HTTP surface of the smoke test: a read-only
healthcheck and an endpoint that runs the full smoke test on demand.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from .errors.handlers import register_exception_handlers
from .routes import api_router

load_dotenv()

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown initiated")
    from .services.db.connector import close_connections
    close_connections()
    logger.info("Supabase client released")


app = FastAPI(
    title="Supabase Smoke Test",
    description="Connectivity and CRUD smoke test for a Supabase project",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": "Supabase Smoke Test",
        "message": "POST /api/v1/smoke to run the smoke test",
        "docs": "/docs",
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
