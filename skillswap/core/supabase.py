"""Supabase client singleton for database operations."""

from functools import lru_cache
from typing import Any

from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client, create_client
from supabase.lib.client_options import SyncClientOptions
from supabase_auth import SyncMemoryStorage

from skillswap.core.config import get_settings

# PostgREST error code returned by .single() when the query matched no rows
NO_ROWS_CODE = "PGRST116"


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton for database operations.

    Uses the secret key for backend operations, which bypasses RLS at the
    PostgREST level. The services re-check every row-level policy before
    reading or writing on behalf of a principal.

    IMPORTANT: Do NOT use this client for auth operations that change the
    session - use create_auth_client() instead.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )


def create_auth_client() -> Client:
    """Create a fresh Supabase client for auth operations.

    Each call creates a new isolated client instance so sign-out calls never
    touch the singleton used for table access.

    Returns:
        Client: Fresh Supabase client instance with isolated session storage.
    """
    settings = get_settings()
    options = SyncClientOptions(
        storage=SyncMemoryStorage(),
        auto_refresh_token=False,
        persist_session=False,
    )
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
        options=options,
    )


def is_no_rows_error(error: PostgrestAPIError) -> bool:
    """Check whether a PostgREST error only means "no matching row"."""
    return error.code == NO_ROWS_CODE


def fetch_single(query: Any) -> dict[str, Any] | None:
    """Execute a single-row query, mapping the no-row case to None.

    Absence of a row is an expected branch (e.g. "no profile yet") and is not
    surfaced as an error. Any other PostgREST failure propagates.

    Args:
        query: A PostgREST query builder already narrowed with filters.

    Returns:
        dict | None: The row, or None when nothing matched.
    """
    try:
        response = query.single().execute()
    except PostgrestAPIError as e:
        if is_no_rows_error(e):
            return None
        raise

    return response.data if response and response.data else None


APPLICATION_TABLES = ("profiles", "skill_requests")


async def check_database_connection() -> dict[str, Any]:
    """Check that every application table answers a one-row select.

    Returns:
        dict: 'healthy' flag and, on failure, the table and error message.
    """
    client = get_supabase_client()
    for table in APPLICATION_TABLES:
        try:
            client.table(table).select("id").limit(1).execute()
        except Exception as e:
            return {"healthy": False, "error": f"{table}: {e}"}
    return {"healthy": True}
