"""
Image Preprocessing
===================
Bounds screenshots to a maximum pixel dimension and re-encodes them as JPEG
before they are uploaded to the model.

Preprocessing is an optimization only: when an image cannot be decoded the
original bytes are sent unchanged with the configured fallback MIME type.
"""
import io
from typing import Optional, Tuple

from PIL import Image, ImageOps

from ae_lingo.config import config
from ae_lingo.exceptions import InvalidInputKindError
from ae_lingo.models.translation import ProcessedImage
from ae_lingo.utils.logging import get_logger


OUTPUT_MIME_TYPE = 'image/jpeg'
BACKGROUND_COLOR = (255, 255, 255)


def ensure_image_mime(mime_type: Optional[str]) -> str:
    """
    Check that a MIME type denotes an image.

    Raises:
        InvalidInputKindError: if it does not
    """
    normalized = (mime_type or '').strip().lower()
    if not normalized.startswith('image/'):
        raise InvalidInputKindError(f"Expected an image, got '{mime_type or 'unknown'}'")
    return normalized


def scaled_dimensions(width: int, height: int, max_dimension: int) -> Tuple[int, int]:
    """
    Dimensions after bounding the longer side to ``max_dimension``.

    Images already within the bound are returned unchanged.
    """
    if width <= max_dimension and height <= max_dimension:
        return width, height
    ratio = min(max_dimension / width, max_dimension / height)
    # Round half up
    new_width = max(1, int(width * ratio + 0.5))
    new_height = max(1, int(height * ratio + 0.5))
    return new_width, new_height


class ImageProcessor:
    """Base image processor."""

    def process(self, data: bytes, mime_type: str) -> ProcessedImage:
        raise NotImplementedError


class PassThroughImageProcessor(ImageProcessor):
    """Sends images exactly as received."""

    def process(self, data: bytes, mime_type: str) -> ProcessedImage:
        mime_type = ensure_image_mime(mime_type)
        return ProcessedImage(data=data, mime_type=mime_type, reencoded=False)


class PillowImageProcessor(ImageProcessor):
    """Downscales and re-encodes images with Pillow."""

    def __init__(
        self,
        max_dimension: int = None,
        quality: float = None,
        fallback_mime_type: str = None
    ):
        self.max_dimension = max_dimension or config.image.max_dimension
        self.quality = quality if quality is not None else config.image.jpeg_quality
        self.fallback_mime_type = fallback_mime_type or config.image.fallback_mime_type
        self.logger = get_logger().translation_logger

    @property
    def jpeg_quality(self) -> int:
        """Pillow quality on its 1-95 scale."""
        return max(1, min(95, int(round(self.quality * 100))))

    def process(self, data: bytes, mime_type: str) -> ProcessedImage:
        """
        Normalize an image payload.

        Args:
            data: Raw image bytes
            mime_type: Declared MIME type of ``data``

        Returns:
            JPEG-encoded ProcessedImage, or the original bytes on decode failure

        Raises:
            InvalidInputKindError: if ``mime_type`` is not an image type
        """
        ensure_image_mime(mime_type)

        try:
            return self._reencode(data)
        # PIL plugins raise SyntaxError on some truncated files
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            self.logger.warning(
                f"Image preprocessing failed ({e}); sending {len(data)} original bytes "
                f"as {self.fallback_mime_type}"
            )
            return ProcessedImage(
                data=data,
                mime_type=self.fallback_mime_type,
                reencoded=False
            )

    def _reencode(self, data: bytes) -> ProcessedImage:
        with Image.open(io.BytesIO(data)) as source:
            source.load()
            # Match how browsers draw photos carrying an EXIF orientation
            img = ImageOps.exif_transpose(source)
            original_size = img.size
            width, height = scaled_dimensions(img.width, img.height, self.max_dimension)

            rgba = img.convert('RGBA')
            if (width, height) != original_size:
                rgba = rgba.resize((width, height), Image.Resampling.LANCZOS)

        # Transparent areas would turn black under JPEG
        canvas = Image.new('RGB', (width, height), BACKGROUND_COLOR)
        canvas.paste(rgba, mask=rgba.getchannel('A'))

        buffer = io.BytesIO()
        canvas.save(buffer, format='JPEG', quality=self.jpeg_quality)
        encoded = buffer.getvalue()

        self.logger.debug(
            f"Image {original_size[0]}x{original_size[1]} -> {width}x{height}, "
            f"{len(data)} -> {len(encoded)} bytes"
        )
        return ProcessedImage(
            data=encoded,
            mime_type=OUTPUT_MIME_TYPE,
            width=width,
            height=height
        )


def get_image_processor() -> ImageProcessor:
    """Get the configured image processor."""
    if config.image.preprocess_enabled:
        return PillowImageProcessor()
    return PassThroughImageProcessor()
