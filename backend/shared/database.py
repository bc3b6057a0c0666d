"""
Database client factory for Supabase.

The blog stores users and posts in Supabase Postgres and talks to it
through the service-role client. Row Level Security is not relied upon;
ownership is enforced by the posts service.
"""

from supabase import create_client, Client

from .config import Settings


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role key.

    Args:
        settings: Application settings carrying the Supabase URL and key

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the Supabase URL or key is not configured
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
