"""
AE Lingo - Utility Functions
"""
from ae_lingo.utils.validators import (
    validate_text,
    validate_image_payload,
    read_uploaded_image,
    decode_image_data
)
from ae_lingo.utils.logging import (
    LogBuffer,
    AppLogger,
    get_logger,
    debug_print
)

__all__ = [
    "validate_text",
    "validate_image_payload",
    "read_uploaded_image",
    "decode_image_data",
    "LogBuffer",
    "AppLogger",
    "get_logger",
    "debug_print"
]
