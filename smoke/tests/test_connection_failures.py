"""Tests for backend connection failure scenarios."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from smoke.app import app
from smoke.errors.exceptions import AuthenticationError, InsertError, SelectError
from smoke.models.journal import JournalEntryCreate
from smoke.services.db.connector import (
    close_connections,
    get_client,
    insert_entry,
    select_recent,
    sign_in_anonymously,
)


class TestConnectionFailures:
    """Test suite for backend connection failure handling."""

    def test_sign_in_with_connection_timeout(self):
        """Test sign-in behavior when the auth server times out."""
        mock_client = MagicMock()
        mock_client.auth.sign_in_anonymously.side_effect = TimeoutError("Connection timeout")

        with pytest.raises(AuthenticationError) as exc_info:
            sign_in_anonymously(mock_client)

        assert exc_info.value.details["type"] == "TimeoutError"

    def test_insert_with_network_error(self):
        """Test insert behavior when the network fails."""
        mock_client = MagicMock()
        mock_client.table.return_value.insert.return_value.execute.side_effect = (
            ConnectionError("Network unreachable")
        )

        with pytest.raises(InsertError, match="Insert error"):
            insert_entry(mock_client, JournalEntryCreate(text="smoke x"))

    def test_insert_with_permission_failure(self):
        """Test insert behavior when row level security rejects the row."""
        mock_client = MagicMock()
        mock_client.table.return_value.insert.side_effect = PermissionError(
            "new row violates row-level security policy"
        )

        with pytest.raises(InsertError) as exc_info:
            insert_entry(mock_client, JournalEntryCreate(text="smoke x"))

        assert "row-level security" in exc_info.value.details["info"]

    def test_select_with_missing_table(self):
        """Test select behavior when the table does not exist."""
        mock_client = MagicMock()
        mock_client.table.side_effect = ValueError(
            'relation "public.journal_entries" does not exist'
        )

        with pytest.raises(SelectError, match="Select error"):
            select_recent(mock_client)

    def test_client_recovery_after_failure(self, mocker):
        """Test that a new client can be created after creation failed."""
        call_count = 0

        def side_effect_create(*args, **kwargs):
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                raise ConnectionError("First connection failed")
            return MagicMock()

        mocker.patch(
            "smoke.services.db.connector.create_client",
            side_effect=side_effect_create,
        )

        with pytest.raises(Exception):
            get_client("https://example.supabase.co", "anon-key")

        close_connections()

        assert get_client("https://example.supabase.co", "anon-key") is not None
        assert call_count == 2

    def test_repeated_failures_through_endpoint(self, supabase_env, mocker):
        """Test that each request reports the failure when the backend is down."""
        mock_client = MagicMock()
        mock_client.auth.sign_in_anonymously.side_effect = ConnectionError(
            "Connection refused"
        )
        mocker.patch(
            "smoke.services.db.connector.create_client", return_value=mock_client
        )

        with TestClient(app) as client:
            responses = [client.post("/api/v1/smoke") for _ in range(3)]

        for resp in responses:
            assert resp.status_code == 502
            assert resp.json()["details"]["info"] == "Connection refused"
