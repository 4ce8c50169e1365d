# storefront/state/image_dropzone.py
import logging
from typing import Callable

from fastapi import status
from supabase import Client

from storefront.core.errors import REMOTE_ERRORS
from storefront.core.notify import Notifier
from storefront.core.storage_utils import FOLDER, generate_filename, upload_to_storage

logger = logging.getLogger(__name__)


class ImageDropzone:
    """
    Single-image upload widget backing the admin product form.

    - Only image/* content types are accepted; anything else is rejected
      before touching Storage.
    - Each accepted file goes to "<folder>/<uuid4>.<ext>" and the public
      URL is handed to `on_image_uploaded` exactly once.
    - Uploads are not serialized: a second upload while one is running
      races, and whichever finishes last owns `preview`.
    - `clear()` reports "" to the callback but leaves the object in
      Storage.
    """

    def __init__(
        self,
        client: Client,
        notifier: Notifier,
        on_image_uploaded: Callable[[str], None],
    ):
        self.client = client
        self.notifier = notifier
        self.on_image_uploaded = on_image_uploaded
        self.preview: str | None = None
        self.uploading = False

    @staticmethod
    def is_image(content_type: str | None) -> bool:
        return bool(content_type) and content_type.startswith("image/")

    def accept(self, filename: str, content_type: str | None, data: bytes) -> str:
        """
        Validate and upload one file.

        Returns:
            The public URL of the stored image.

        Raises:
            HTTPException(400): not an image file.
            HTTPException(502): Storage rejected the upload.
        """
        if not self.is_image(content_type):
            raise self.notifier.fail(
                "Please upload an image file",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        path = f"{FOLDER}/{generate_filename(filename)}"
        self.uploading = True
        try:
            url = upload_to_storage(self.client, path, data, content_type)
        except REMOTE_ERRORS as e:
            logger.error(f"Error uploading image to {path}: {e}")
            self.preview = None
            raise self.notifier.fail("Error uploading image")
        finally:
            self.uploading = False

        self.preview = url
        self.on_image_uploaded(url)
        self.notifier.success("Image uploaded successfully!")
        return url

    def clear(self) -> None:
        self.preview = None
        self.on_image_uploaded("")
