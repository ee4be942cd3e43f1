"""Healthcheck endpoint for the V1 API."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends

from ...config.settings import get_settings, require_supabase_config

router = APIRouter()


@router.get("/healthcheck")
def healthcheck(settings=Depends(get_settings)) -> dict[str, Any]:
    """Return the API status and Supabase connectivity.

    The probe is read-only: it reads the most recent entry and never writes.
    """
    status = "healthy"
    api_status = "up"
    backend_status = "unknown"

    try:
        from ...services.db import connector as db_connector

        supabase_url, supabase_key = require_supabase_config(settings)
        client = db_connector.get_client(supabase_url, supabase_key)
        db_connector.select_recent(client, limit=1)
        backend_status = "connected"
    except Exception as e:
        backend_status = f"error: {str(e)}"
        status = "degraded"

    return {
        "status": status,
        "components": {
            "api": api_status,
            "backend": backend_status,
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
