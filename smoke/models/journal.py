"""
Data models for journal entries.

This module defines Pydantic models for the rows written and read by the
smoke test, and the result returned once every stage has run.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

JOURNAL_TABLE = "journal_entries"
ORDER_COLUMN = "created_at"
RECENT_LIMIT = 3
SMOKE_PREFIX = "smoke "


class JournalEntryCreate(BaseModel):
    """Payload for inserting a journal entry."""

    text: str = Field(..., description="The entry text")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v):
        """Validate that text is a non-empty string."""
        if not v:
            raise ValueError("Entry text must be a non-empty string")
        return v


class JournalEntry(BaseModel):
    """A journal entry row as returned by the backend."""

    id: Any = Field(None, description="Identifier assigned by the backend")
    text: str | None = Field(None, description="The entry text")
    created_at: str | None = Field(
        None, description="Server-assigned creation timestamp"
    )

    model_config = {
        "extra": "allow",
        "json_schema_extra": {
            "example": {
                "id": 1,
                "text": "smoke 2024-01-01T00:00:00.000Z",
                "created_at": "2024-01-01T00:00:00.000Z",
            }
        },
    }


class SmokeResult(BaseModel):
    """Outcome of a full smoke test run."""

    user_id: str | None = Field(None, description="Anonymous user id, if any")
    inserted: list[JournalEntry] = Field(..., description="Rows returned by the insert")
    recent: list[JournalEntry] = Field(..., description="Most recent rows")


def smoke_timestamp(now: datetime | None = None) -> str:
    """Format a UTC timestamp as ISO-8601 with milliseconds and a Z suffix."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_smoke_entry(now: datetime | None = None) -> JournalEntryCreate:
    return JournalEntryCreate(text=f"{SMOKE_PREFIX}{smoke_timestamp(now)}")
