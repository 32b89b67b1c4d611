"""
Database client factory for Supabase.

The service-role client backs the document store handle that the
application opens at startup (see api.dependencies.ServiceContainer).
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .store import DocumentStore

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The backend performs all reads and writes on behalf of callers, so it
    always uses the service role.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set BMS_SUPABASE_URL and BMS_SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def open_document_store() -> DocumentStore:
    """
    Open the process-scoped document store handle.

    Returns:
        DocumentStore wrapping the service-role client
    """
    return DocumentStore(get_supabase_client())


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Called on shutdown, and by tests when configuration changes.
    """
    global _service_client
    _service_client = None
