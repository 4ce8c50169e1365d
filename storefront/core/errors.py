# storefront/core/errors.py
import httpx
from supabase import AuthError, PostgrestAPIError, StorageException

# Everything the Supabase client can raise for a failed remote call:
# table errors, storage errors, auth errors, and transport failures.
REMOTE_ERRORS: tuple[type[Exception], ...] = (
    PostgrestAPIError,
    StorageException,
    AuthError,
    httpx.HTTPError,
)
