"""
Custom exceptions for the smoke test.

This module defines the exceptions raised by the smoke test stages. They are
rendered by the CLI and by the exception handlers of the HTTP app.
"""

from typing import Any


class BaseAppException(Exception):
    """Base exception for all application exceptions."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(BaseAppException):
    """Exception raised when a configuration value is missing or invalid."""

    def __init__(
        self,
        message: str = "Missing or invalid configuration",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, status_code=500, details=details)


class RemoteCallError(BaseAppException):
    """Exception raised when a call to the Supabase backend fails."""

    def __init__(
        self,
        message: str = "Backend call failed",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, status_code=502, details=details)


class AuthenticationError(RemoteCallError):
    """Exception raised when the anonymous sign-in fails."""

    def __init__(
        self,
        message: str = "Auth error",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, details=details)


class InsertError(RemoteCallError):
    """Exception raised when inserting the smoke entry fails."""

    def __init__(
        self,
        message: str = "Insert error",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, details=details)


class SelectError(RemoteCallError):
    """Exception raised when reading back recent entries fails."""

    def __init__(
        self,
        message: str = "Select error",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, details=details)
