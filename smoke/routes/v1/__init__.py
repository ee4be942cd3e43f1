"""V1 API routes."""

import logging

from fastapi import APIRouter

from .healthcheck import router as healthcheck_router
from .smoke import router as smoke_router

logger = logging.getLogger(__name__)


def create_router() -> APIRouter:
    """Create API router with all endpoints"""
    router = APIRouter()

    router.include_router(healthcheck_router)
    router.include_router(smoke_router)

    logger.info("All API endpoints registered")

    return router
