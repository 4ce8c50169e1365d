# storefront/core/supabase_client.py
from supabase import create_client, Client

from storefront.core.config import get_settings

settings = get_settings()


def create_visitor_client() -> Client:
    """
    Create a fresh Supabase client with the anon/public key.

    One client is created per visitor: the client keeps the signed-in
    session in memory and forwards its access token to PostgREST and
    Storage, so sharing it between visitors would share their login.

    Note: This client respects RLS.
    """
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
