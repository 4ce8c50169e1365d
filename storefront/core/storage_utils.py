# storefront/core/storage_utils.py
import uuid

from supabase import Client

from storefront.core.config import get_settings

settings = get_settings()

BUCKET = settings.PRODUCT_IMAGE_BUCKET
FOLDER = settings.PRODUCT_IMAGE_FOLDER


def upload_to_storage(
    client: Client,
    path: str,
    file_bytes: bytes,
    content_type: str,
) -> str:
    """
    Upload raw bytes to Supabase Storage and return a public URL.

    Args:
        client: the visitor's Supabase client (uploads run under its session).
        path: Full object path inside the bucket.
              Example: "product-images/<uuid4>.png"
        file_bytes: File content in bytes.
        content_type: MIME type stored with the object.

    Returns:
        Public URL to the uploaded file.

    Raises:
        Any exception raised by Supabase client if upload fails.
    """
    bucket = client.storage.from_(BUCKET)
    bucket.upload(path, file_bytes, {"content-type": content_type})
    return bucket.get_public_url(path)


def delete_from_storage(client: Client, path: str) -> None:
    """
    Delete a file from Supabase Storage by its object path.

    Example path (relative to bucket):
        'product-images/<uuid4>.png'
    """
    # Supabase Python client expects a list of paths.
    client.storage.from_(BUCKET).remove([path])


def object_path_from_public_url(url: str) -> str | None:
    """
    Derive the object path of a product image from its public URL.

    Only the final path segment is kept (query string dropped) and placed
    back under the product image folder:
        https://<proj>.supabase.co/storage/v1/object/public/products/product-images/a.png
        -> 'product-images/a.png'
    """
    name = url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    if not name:
        return None
    return f"{FOLDER}/{name}"


def generate_filename(original_name: str) -> str:
    """
    Generate a random filename using UUID4, keeping the original extension.

    Args:
        original_name: client-side filename (e.g. "sofa.photo.png")

    Returns:
        A filename like "<uuid4>.png"
    """
    ext = original_name.split(".")[-1]
    return f"{uuid.uuid4()}.{ext}"
