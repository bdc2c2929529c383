# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Shared Supabase client and PostgREST error helpers
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import (
    SupabaseClient,
    SupabaseClientError,
    error_code,
    error_message,
    is_missing_row,
)

__all__ = [
    "SupabaseClient",
    "SupabaseClientError",
    "error_code",
    "error_message",
    "is_missing_row",
]
