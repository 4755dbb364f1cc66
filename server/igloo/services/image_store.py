"""
Local storage for test images.

Images live in ``settings.upload_dir`` and are referenced from test records
by their public URL, ``/uploads/<filename>``.
"""
import logging
import os
import secrets
import time
from typing import BinaryIO, Optional

from igloo.config import settings
from igloo.errors import ValidationError

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"
DEFAULT_EXTENSION = ".png"
MAX_EXTENSION_LENGTH = 6


def safe_extension(original_name: Optional[str]) -> str:
    """Lowercase extension of the uploaded name, or ``.png`` if missing or too long."""
    ext = os.path.splitext(original_name or "")[1].lower()
    if ext and len(ext) <= MAX_EXTENSION_LENGTH:
        return ext
    return DEFAULT_EXTENSION


def generate_filename(original_name: Optional[str]) -> str:
    """``<epoch millis>-<random hex><ext>``"""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{safe_extension(original_name)}"


def url_for(filename: str) -> str:
    return f"{UPLOADS_URL_PREFIX}/{filename}"


def path_for_url(image_url: Optional[str]) -> Optional[str]:
    """
    Map an ``/uploads/<name>`` URL back to a path inside the upload dir.

    Returns None for empty values and for names that try to leave the dir.
    """
    if not image_url:
        return None
    filename = str(image_url)
    prefix = UPLOADS_URL_PREFIX + "/"
    if filename.startswith(prefix):
        filename = filename[len(prefix):]
    if not filename or ".." in filename or "/" in filename or "\\" in filename:
        return None
    return os.path.join(settings.upload_dir, filename)


def validate_image(content_type: Optional[str], size: int) -> None:
    if not (content_type or "").startswith("image/"):
        raise ValidationError("Only image uploads are allowed")
    if size > settings.max_upload_bytes:
        raise ValidationError(f"Image exceeds {settings.max_upload_size_mb}MB limit")


def save_image(original_name: Optional[str], content_type: Optional[str], stream: BinaryIO) -> str:
    """
    Validate and write an uploaded image, returning its public URL.

    Raises:
        ValidationError: if the upload is not an image or is too large
    """
    # One extra byte is enough to tell that the limit was exceeded
    data = stream.read(settings.max_upload_bytes + 1)
    validate_image(content_type, len(data))

    os.makedirs(settings.upload_dir, exist_ok=True)
    filename = generate_filename(original_name)
    with open(os.path.join(settings.upload_dir, filename), "wb") as f:
        f.write(data)

    logger.info("Stored image %s (%d bytes)", filename, len(data))
    return url_for(filename)


def delete_image(image_url: Optional[str]) -> bool:
    """
    Best-effort removal of a stored image.

    Failures are logged and reported as False, never raised.
    """
    try:
        path = path_for_url(image_url)
        if path is None or not os.path.exists(path):
            return False
        os.remove(path)
        logger.info("Deleted image %s", image_url)
        return True
    except OSError as e:
        logger.warning("Could not delete file %s: %s", image_url, e)
        return False
