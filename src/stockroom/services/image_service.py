"""Item image attachment.

An item's image is stored as a single string: a public URL in production
(Supabase Storage) or a file URI in development. The form dialog lets the
user pick a local file or paste a URL; both go through validation here.

Rules for local files:
- the file must exist
- its type, guessed from the extension, must be an image type
- it must be at most 5MB
"""

import logging
import mimetypes
from pathlib import Path
from typing import Union
from urllib.parse import urlparse
import uuid

from stockroom.services.exceptions import ImageValidationError, RepositoryError
from stockroom.services.logging_utils import get_service_logger, log_operation
from stockroom.utils.constants import IMAGE_EXTENSIONS, MAX_IMAGE_BYTES

logger = get_service_logger(__name__)

PathLike = Union[str, Path]


def guess_image_type(path: PathLike) -> str:
    """Return the image MIME type for a file name, or '' if it is not an image."""
    path = Path(path)
    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        return ""
    mime, _ = mimetypes.guess_type(path.name)
    if not mime or not mime.startswith("image/"):
        return ""
    return mime


def validate_image_file(path: PathLike) -> Path:
    """
    Check that a local file can be attached as an item image.

    Returns:
        The file path as a Path

    Raises:
        ImageValidationError: If the file is missing, not an image, or too large
    """
    path = Path(path)
    if not path.is_file():
        raise ImageValidationError([f"Image: File not found: {path}"])
    if not guess_image_type(path):
        raise ImageValidationError(["Image: Please select an image file"])
    size = path.stat().st_size
    if size > MAX_IMAGE_BYTES:
        limit_mb = MAX_IMAGE_BYTES // (1024 * 1024)
        raise ImageValidationError([f"Image: File must be at most {limit_mb}MB"])
    return path


def validate_image_url(url: str) -> str:
    """
    Check a pasted image URL.

    Returns:
        The stripped URL

    Raises:
        ImageValidationError: If it is not an http(s) URL with a host
    """
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ImageValidationError(["Image: Please enter a valid http(s) URL"])
    return url


def storage_object_name(path: PathLike) -> str:
    """Unique object name keeping the original extension, e.g. 'a1b2....png'."""
    return f"{uuid.uuid4().hex}{Path(path).suffix.lower()}"


def upload_image(client, bucket: str, path: PathLike) -> str:
    """
    Upload a local image to Supabase Storage.

    Args:
        client: supabase.Client
        bucket: Storage bucket name
        path: Local image file

    Returns:
        Public URL of the uploaded object

    Raises:
        ImageValidationError: If the file is not an acceptable image
        RepositoryError: If the upload fails
    """
    path = validate_image_file(path)
    object_name = storage_object_name(path)
    content_type = guess_image_type(path)

    try:
        storage = client.storage.from_(bucket)
        storage.upload(object_name, path.read_bytes(), {"content-type": content_type})
        public_url = storage.get_public_url(object_name)
    except Exception as e:
        log_operation(
            logger,
            operation="upload_image",
            outcome="error",
            level=logging.ERROR,
            bucket=bucket,
            error=str(e),
        )
        raise RepositoryError("upload", bucket, str(e), original_error=e) from e

    log_operation(
        logger,
        operation="upload_image",
        outcome="success",
        bucket=bucket,
        object_name=object_name,
    )
    return public_url


def local_image_reference(path: PathLike) -> str:
    """
    File URI for an image kept on this machine (development backend).

    Raises:
        ImageValidationError: If the file is not an acceptable image
    """
    return validate_image_file(path).resolve().as_uri()
