import pytest

from plantscan.shared.core.exceptions import FileTooLargeError, InvalidFileTypeError
from plantscan.shared.utils.validators import validate_image_upload
from tests.conftest import make_image


@pytest.mark.parametrize("fmt, mime", [
    ("PNG", "image/png"),
    ("JPEG", "image/jpeg"),
    ("GIF", "image/gif"),
    ("WEBP", "image/webp"),
])
def test_supported_formats_are_detected(fmt, mime):
    assert validate_image_upload(make_image(fmt)) == mime


def test_declared_type_is_only_a_hint(png_bytes):
    assert validate_image_upload(png_bytes, filename="photo.jpg", content_type="image/jpeg") == "image/png"
    assert validate_image_upload(png_bytes, content_type="application/octet-stream") == "image/png"


def test_empty_file_is_rejected():
    with pytest.raises(InvalidFileTypeError):
        validate_image_upload(b"")


def test_oversized_file_is_rejected(png_bytes):
    with pytest.raises(FileTooLargeError) as exc_info:
        validate_image_upload(png_bytes, max_size=len(png_bytes) - 1)
    assert exc_info.value.status_code == 413


def test_disallowed_content_type(png_bytes):
    with pytest.raises(InvalidFileTypeError):
        validate_image_upload(png_bytes, content_type="application/pdf")


def test_disallowed_extension(png_bytes):
    with pytest.raises(InvalidFileTypeError):
        validate_image_upload(png_bytes, filename="plant.exe")


def test_corrupt_bytes():
    with pytest.raises(InvalidFileTypeError):
        validate_image_upload(b"\x89PNG\r\n\x1a\nnot really", filename="broken.png")


def test_unsupported_pillow_format():
    with pytest.raises(InvalidFileTypeError):
        validate_image_upload(make_image("BMP"))
