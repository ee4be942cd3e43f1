"""On-demand smoke test endpoint for the V1 API."""

import logging

from fastapi import APIRouter, Depends, status

from ...config.settings import get_settings, require_supabase_config
from ...models.journal import SmokeResult
from ...services.db import connector as db_connector
from ...services.smoke import run_smoke_test

logger = logging.getLogger(__name__)

router = APIRouter(tags=["smoke"])


@router.post("/smoke", response_model=SmokeResult, status_code=status.HTTP_201_CREATED)
def run_smoke(settings=Depends(get_settings)) -> SmokeResult:
    """
    Run the full smoke test: anonymous sign-in, insert one entry, read back
    the three most recent entries.

    Every call writes a new row to the journal table.

    Returns: \n
        SmokeResult with the user id, inserted rows and recent rows

    Raises: \n
        ConfigurationError: If SUPABASE_URL or SUPABASE_ANON_KEY is not configured
        AuthenticationError: If the anonymous sign-in fails
        InsertError: If the insert fails
        SelectError: If reading back recent entries fails
    """
    supabase_url, supabase_key = require_supabase_config(settings)
    client = db_connector.new_client(supabase_url, supabase_key)
    result = run_smoke_test(client)
    logger.info(f"Smoke test passed, inserted {len(result.inserted)} row(s)")
    return result
