# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns the one Supabase client the application talks through.
# Database reads/writes (PostgREST) and Storage calls both go through it.
#
# The client is created from explicit settings at startup and then reused:
#
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client(settings)
#
# It also knows how PostgREST reports "no row" so callers can tell a missing
# record apart from a real failure.
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from supabase import create_client, Client

if TYPE_CHECKING:
    from app.config import Settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST: .single() matched zero rows
NO_ROWS_CODE = "PGRST116"
# Postgres: invalid text representation (e.g. a malformed uuid)
INVALID_TEXT_CODE = "22P02"


class SupabaseClientError(Exception):
    """
    Error during Supabase client setup.

    Provides an actionable message: what failed and how to fix it.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Holder for the shared Supabase client.

    One client instance is shared across the application. It is created on
    the first call to get_client() with the settings passed in.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls, settings: Settings) -> Client:
        """
        Get or create the singleton Supabase client.

        Args:
            settings: Application settings with SUPABASE_URL and SUPABASE_KEY

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used on shutdown and in tests)."""
        cls._instance = None


def error_code(exc: Exception) -> str | None:
    """
    Extract the PostgREST/Postgres error code from a client exception.

    postgrest raises APIError with a `code` attribute; older clients only put
    the code in the message, so fall back to searching the text.
    """
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    text = str(exc)
    for known in (NO_ROWS_CODE, INVALID_TEXT_CODE):
        if known in text:
            return known
    return None


def error_message(exc: Exception) -> str:
    """Best human-readable message from a client exception."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


def is_missing_row(exc: Exception) -> bool:
    """True when the error means the requested row doesn't exist."""
    return error_code(exc) in (NO_ROWS_CODE, INVALID_TEXT_CODE)
