"""
The smoke test chain.

Stages run in order and each one gates the next: anonymous sign-in, insert
of one journal entry, read back of the most recent entries. A failing stage
raises and nothing after it runs.
"""

import logging
from collections.abc import Callable
from typing import Any

from supabase import Client

from ..models.journal import SmokeResult, build_smoke_entry
from .db import connector as db_connector

logger = logging.getLogger(__name__)

STAGE_AUTH = "auth"
STAGE_INSERT = "insert"
STAGE_SELECT = "select"

Reporter = Callable[[str, Any], None]


def run_smoke_test(client: Client, report: Reporter | None = None) -> SmokeResult:
    """
    Run the sign-in, insert and select stages against the backend.

    Args:
        client: The Supabase client
        report: Optional callback invoked as ``report(stage, value)`` after
            each stage succeeds, before the next one starts

    Returns:
        SmokeResult with the user id, the inserted rows and the recent rows

    Raises:
        AuthenticationError: If the anonymous sign-in fails
        InsertError: If the insert fails
        SelectError: If the select fails
    """
    logger.info("Signing in anonymously")
    user_id = db_connector.sign_in_anonymously(client)
    logger.info(f"Signed in as {user_id}")
    if report:
        report(STAGE_AUTH, user_id)

    entry = build_smoke_entry()
    logger.info(f"Inserting entry: {entry.text}")
    inserted = db_connector.insert_entry(client, entry)
    if report:
        report(STAGE_INSERT, inserted)

    logger.info("Reading recent entries")
    recent = db_connector.select_recent(client)
    logger.info(f"Read {len(recent or [])} recent entries")
    if report:
        report(STAGE_SELECT, recent)

    return SmokeResult(user_id=user_id, inserted=inserted or [], recent=recent or [])
