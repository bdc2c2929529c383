# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Uploads product images to a Supabase Storage bucket and removes them again.
# Uploaded objects are named "<epoch-ms>-<sanitized-name>.<ext>" so two
# uploads of "photo.jpg" never collide.
# =============================================================================

import logging
import re
import time
from typing import Any, Callable
from urllib.parse import urlparse

from supabase import Client

from app.exceptions import InvalidReferenceError, StorageError
from core.models.product import ImageFile
from lib.supabase_client import error_message

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def build_object_name(filename: str, timestamp_ms: int) -> str:
    """
    Build a collision-resistant object name for an upload.

    The part before the first dot has every non-alphanumeric character
    replaced with "_" and is lower-cased. The text after the last dot is
    kept as sent, so "archive.tar.gz" keeps only "gz".

    Example:
        build_object_name("My Lamp (1).JPG", 1718000000000)
        -> "1718000000000-my_lamp__1_.JPG"
    """
    stem = filename.split(".")[0]
    _, dot, extension = filename.rpartition(".")
    if not dot:
        extension = ""

    sanitized = _UNSAFE_CHARS.sub("_", stem).lower()
    name = f"{timestamp_ms}-{sanitized}"
    return f"{name}.{extension}" if extension else name


def object_name_from_url(url: str) -> str:
    """
    Extract the object name (last path segment) from a public URL.

    Raises:
        InvalidReferenceError: If the URL has no trailing segment
    """
    path = urlparse(url).path
    name = path.split("/")[-1] if path else ""
    if not name:
        raise InvalidReferenceError(url)
    return name


class StorageService:
    """
    Service for product image storage.

    Args:
        client: Supabase client
        bucket: Bucket holding product images
        cache_control: max-age in seconds sent with each upload
        clock: Returns the current time in seconds (swappable in tests)
    """

    def __init__(
        self,
        client: Client,
        bucket: str,
        cache_control: str = "3600",
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.bucket = bucket
        self.cache_control = cache_control
        self.clock = clock

    def upload_image(self, image: ImageFile) -> str:
        """
        Upload an image and return its public URL.

        Args:
            image: Validated image file

        Returns:
            Public URL of the stored object

        Raises:
            StorageError: If the storage provider rejects the upload
        """
        object_name = build_object_name(image.filename, int(self.clock() * 1000))
        bucket = self.client.storage.from_(self.bucket)

        try:
            bucket.upload(
                path=object_name,
                file=image.content,
                file_options={
                    "cache-control": self.cache_control,
                    "content-type": image.content_type,
                },
            )
        except Exception as e:
            logger.error(f"Storage upload failed for {object_name}: {e}")
            raise StorageError(error_message(e))

        logger.info(f"Uploaded image to storage: {self.bucket}/{object_name} ({image.size} bytes)")
        return bucket.get_public_url(object_name)

    def delete_image(self, url: str) -> Any:
        """
        Delete a previously uploaded image by its public URL.

        Args:
            url: Public URL returned by upload_image

        Returns:
            The provider's acknowledgement (list of removed objects)

        Raises:
            InvalidReferenceError: If no object name can be read from the URL
            StorageError: If the storage provider rejects the delete
        """
        object_name = object_name_from_url(url)

        try:
            response = self.client.storage.from_(self.bucket).remove([object_name])
        except Exception as e:
            logger.error(f"Failed to delete {object_name}: {e}")
            raise StorageError(error_message(e))

        logger.info(f"Deleted image from storage: {self.bucket}/{object_name}")
        return response
