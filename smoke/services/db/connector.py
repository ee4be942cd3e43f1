"""
Backend connector for Supabase.

This module provides functions to create a Supabase client and run the
remote calls the smoke test needs: anonymous sign-in, inserting a journal
entry and reading back the most recent entries.
"""

from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from ...errors.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InsertError,
    SelectError,
)
from ...models.journal import JOURNAL_TABLE, ORDER_COLUMN, RECENT_LIMIT, JournalEntryCreate


def describe_error(error: Exception) -> dict[str, Any]:
    """
    Build a JSON-serializable payload from an error raised by the client.

    Postgrest errors expose ``json()`` and auth errors expose ``to_dict()``;
    whichever is available is merged into the payload.
    """
    payload: dict[str, Any] = {"type": type(error).__name__, "info": str(error)}
    for attr in ("json", "to_dict"):
        method = getattr(error, attr, None)
        if not callable(method):
            continue
        try:
            extra = method()
        except Exception:
            continue
        if isinstance(extra, dict):
            payload.update({k: v for k, v in extra.items() if v is not None})
        break
    return payload


def new_client(supabase_url: str, supabase_key: str) -> Client:
    """
    Create a Supabase client that is not shared.

    Signing in stores the session on the client, which then sends that
    user's token on every later request. Runs that sign in get their own
    client so the session never leaks into other callers.

    Args:
        supabase_url: The Supabase project URL
        supabase_key: The anon API key

    Returns:
        A Supabase client

    Raises:
        ConfigurationError: If the client library rejects the URL or key
    """
    try:
        return create_client(supabase_url, supabase_key)
    except Exception as e:
        raise ConfigurationError(
            message="Failed to create Supabase client", details=describe_error(e)
        ) from e


@lru_cache(maxsize=1)
def get_client(supabase_url: str, supabase_key: str) -> Client:
    """
    Get or create the shared Supabase client.
    The client is cached using lru_cache so a process reuses one handle.
    It must only be used for calls made with the anon key; never sign in
    with it.

    Raises:
        ConfigurationError: If the client library rejects the URL or key
    """
    return new_client(supabase_url, supabase_key)


def close_connections():
    """
    Drop the cached client.
    This should be called when shutting down the application.
    """
    get_client.cache_clear()


def sign_in_anonymously(client: Client) -> str | None:
    """
    Start an anonymous session.

    Returns:
        The id of the anonymous user, or None when the response carries no user

    Raises:
        AuthenticationError: If the sign-in fails
    """
    try:
        response = client.auth.sign_in_anonymously()
    except Exception as e:
        raise AuthenticationError(details=describe_error(e)) from e

    user = getattr(response, "user", None)
    return getattr(user, "id", None)


def insert_entry(client: Client, entry: JournalEntryCreate) -> list[dict]:
    """
    Insert a journal entry and return the inserted rows.

    The insert asks for the representation back (the client default), so the
    response carries the rows as stored, including server-assigned columns.

    Raises:
        InsertError: If the insert fails
    """
    try:
        response = client.table(JOURNAL_TABLE).insert(entry.model_dump()).execute()
    except Exception as e:
        raise InsertError(details=describe_error(e)) from e

    return response.data


def select_recent(client: Client, limit: int = RECENT_LIMIT) -> list[dict]:
    """
    Read the most recent journal entries, newest first.

    Args:
        client: The Supabase client
        limit: Maximum number of rows to return (default: 3)

    Raises:
        SelectError: If the query fails
    """
    try:
        response = (
            client.table(JOURNAL_TABLE)
            .select("*")
            .order(ORDER_COLUMN, desc=True)
            .limit(limit)
            .execute()
        )
    except Exception as e:
        raise SelectError(details=describe_error(e)) from e

    return response.data
