"""
Validation Utilities
====================
Functions for validating and decoding request input.
"""
import base64
import binascii
import re
from typing import Tuple, Optional

from werkzeug.datastructures import FileStorage

from ae_lingo.config import config


DATA_URL_PATTERN = re.compile(r'^data:(?P<mime>[^;,]*)(?P<params>(;[^;,]*)*),(?P<data>.*)$', re.DOTALL)


def validate_text(text: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Validate typed query text.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if text is None or not text.strip():
        return False, "Text is required"
    return True, None


def validate_image_payload(data: bytes, mime_type: Optional[str]) -> Tuple[bool, Optional[str], int]:
    """
    Validate an image payload before translation.

    Returns:
        Tuple of (is_valid, error_message, http_status)
    """
    if not data:
        return False, "No image provided", 400

    if not (mime_type or '').lower().startswith('image/'):
        return False, f"Unsupported file type: {mime_type or 'unknown'}", 415

    max_size = config.image.max_upload_bytes
    if len(data) > max_size:
        return False, f"Image too large. Maximum size: {config.image.max_upload_mb}MB", 413

    return True, None, 200


def read_uploaded_image(file: FileStorage) -> Tuple[bytes, Optional[str]]:
    """
    Read an uploaded image file.

    Returns:
        Tuple of (data, mime_type)
    """
    if not file or not file.filename:
        return b"", None
    return file.read(), file.mimetype


def decode_image_data(value: str, mime_type: Optional[str] = None) -> Tuple[bytes, Optional[str]]:
    """
    Decode a pasted image given as a data URL or bare base64.

    Args:
        value: ``data:image/png;base64,...`` or plain base64 text
        mime_type: MIME type to use when ``value`` is not a data URL

    Returns:
        Tuple of (data, mime_type)

    Raises:
        ValueError: if the payload is not valid base64
    """
    value = (value or '').strip()
    match = DATA_URL_PATTERN.match(value)
    if match:
        mime_type = match.group('mime') or mime_type
        if ';base64' not in match.group('params'):
            raise ValueError("Only base64 data URLs are supported")
        value = match.group('data')

    try:
        data = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e

    return data, mime_type
