"""
Unit Tests for Image Preprocessing
==================================
"""
import io

import pytest
from PIL import Image

from ae_lingo.exceptions import InvalidInputKindError
from ae_lingo.services.image_processor import (
    PillowImageProcessor,
    PassThroughImageProcessor,
    ensure_image_mime,
    scaled_dimensions
)
from tests.conftest import make_image_bytes


def open_image(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


class TestScaledDimensions:
    """Test dimension bounding."""

    def test_within_bound_unchanged(self):
        assert scaled_dimensions(800, 600, 1024) == (800, 600)
        assert scaled_dimensions(1024, 1024, 1024) == (1024, 1024)

    def test_landscape_bounded_by_width(self):
        assert scaled_dimensions(4000, 3000, 1024) == (1024, 768)

    def test_portrait_bounded_by_height(self):
        assert scaled_dimensions(1000, 2048, 1024) == (500, 1024)

    def test_aspect_ratio_within_one_pixel(self):
        for width, height in [(3000, 1000), (1999, 1333), (5000, 37), (1025, 1024)]:
            new_w, new_h = scaled_dimensions(width, height, 1024)
            assert max(new_w, new_h) == 1024
            assert abs(new_h - new_w * height / width) <= 1

    def test_never_below_one_pixel(self):
        assert scaled_dimensions(100000, 10, 1024) == (1024, 1)


class TestEnsureImageMime:
    """Test MIME type checks."""

    def test_accepts_image_types(self):
        assert ensure_image_mime('image/png') == 'image/png'
        assert ensure_image_mime(' IMAGE/JPEG ') == 'image/jpeg'

    @pytest.mark.parametrize('mime_type', ['text/plain', 'application/pdf', '', None])
    def test_rejects_non_images(self, mime_type):
        with pytest.raises(InvalidInputKindError):
            ensure_image_mime(mime_type)


class TestPillowImageProcessor:
    """Test the Pillow-backed normalizer."""

    def test_small_image_keeps_dimensions(self):
        processor = PillowImageProcessor(max_dimension=1024)
        result = processor.process(make_image_bytes(640, 480), 'image/png')

        assert result.mime_type == 'image/jpeg'
        assert (result.width, result.height) == (640, 480)
        assert open_image(result.data).size == (640, 480)
        assert result.reencoded

    def test_large_screenshot_is_bounded(self):
        processor = PillowImageProcessor(max_dimension=1024)
        result = processor.process(make_image_bytes(4000, 3000), 'image/png')

        img = open_image(result.data)
        assert result.mime_type == 'image/jpeg'
        assert img.format == 'JPEG'
        assert max(img.size) <= 1024
        assert img.size == (1024, 768)
        assert len(result.data) > 0

    def test_output_is_near_fixed_point(self):
        processor = PillowImageProcessor(max_dimension=1024)
        first = processor.process(make_image_bytes(2500, 1400), 'image/png')
        second = processor.process(first.data, first.mime_type)

        assert (second.width, second.height) == (first.width, first.height)

    def test_transparent_areas_become_white(self):
        processor = PillowImageProcessor()
        data = make_image_bytes(16, 16, mode='RGBA', color=(0, 0, 0, 0))
        result = processor.process(data, 'image/png')

        pixel = open_image(result.data).convert('RGB').getpixel((8, 8))
        assert all(channel >= 245 for channel in pixel)

    def test_palette_image_is_converted(self):
        buffer = io.BytesIO()
        Image.new('P', (50, 20), 3).save(buffer, format='GIF')
        result = PillowImageProcessor().process(buffer.getvalue(), 'image/gif')

        assert result.mime_type == 'image/jpeg'
        assert (result.width, result.height) == (50, 20)

    def test_exif_orientation_is_applied(self):
        exif = Image.Exif()
        exif[0x0112] = 6  # rotated 90 degrees clockwise
        buffer = io.BytesIO()
        Image.new('RGB', (40, 20), (10, 120, 200)).save(buffer, format='JPEG', exif=exif)
        result = PillowImageProcessor().process(buffer.getvalue(), 'image/jpeg')

        assert (result.width, result.height) == (20, 40)
        assert open_image(result.data).size == (20, 40)

    def test_corrupt_image_falls_back_to_original_bytes(self):
        processor = PillowImageProcessor(fallback_mime_type='image/png')
        data = b'\x89PNG\r\n\x1a\nnot really a png'
        result = processor.process(data, 'image/png')

        assert result.data == data
        assert result.mime_type == 'image/png'
        assert not result.reencoded
        assert result.width is None

    def test_non_image_is_rejected(self):
        with pytest.raises(InvalidInputKindError):
            PillowImageProcessor().process(b'hello', 'text/plain')

    def test_quality_maps_to_pillow_scale(self):
        assert PillowImageProcessor(quality=0.8).jpeg_quality == 80
        assert PillowImageProcessor(quality=1.0).jpeg_quality == 95


class TestPassThroughImageProcessor:
    """Test the pass-through path."""

    def test_returns_input_unchanged(self):
        data = make_image_bytes(4000, 10)
        result = PassThroughImageProcessor().process(data, 'image/png')

        assert result.data == data
        assert result.mime_type == 'image/png'
        assert not result.reencoded

    def test_still_checks_kind(self):
        with pytest.raises(InvalidInputKindError):
            PassThroughImageProcessor().process(b'{}', 'application/json')
