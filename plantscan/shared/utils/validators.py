# 📄 File: plantscan/shared/utils/validators.py
#
# 🧭 Purpose (Layman Explanation):
# Checks that the photo the user picked is really a picture we can send for
# identification, not an empty or broken file.
#
# 🧪 Purpose (Technical Summary):
# Image upload validation: size limits, MIME/extension allow-lists and
# Pillow-based integrity verification returning the detected content type.
#
# 🔗 Dependencies:
# PIL (image verification), mimetypes, plantscan.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# Scan controller capture step

import io
import mimetypes
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from plantscan.shared.core.exceptions import FileTooLargeError, InvalidFileTypeError

# File validation constants
ALLOWED_IMAGE_TYPES = {'image/jpeg', 'image/png', 'image/webp', 'image/gif'}
ALLOWED_IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif'}

# Pillow format name -> MIME type
PIL_FORMAT_MIME = {
    'JPEG': 'image/jpeg',
    'PNG': 'image/png',
    'WEBP': 'image/webp',
    'GIF': 'image/gif',
}


def validate_image_upload(
    data: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    max_size: Optional[int] = None,
) -> str:
    """
    Validate an uploaded image and return its detected MIME type.

    The declared content type and extension are only hints: the bytes
    themselves must open as one of the supported formats.

    Args:
        data: Raw image bytes
        filename: Original filename, if the client sent one
        content_type: MIME type declared by the client
        max_size: Maximum accepted size in bytes

    Returns:
        Detected MIME type (one of ``ALLOWED_IMAGE_TYPES``)

    Raises:
        InvalidFileTypeError: Empty, unreadable or unsupported image
        FileTooLargeError: Image larger than ``max_size``
    """
    if not data:
        raise InvalidFileTypeError("File is empty", filename=filename)

    if max_size is not None and len(data) > max_size:
        raise FileTooLargeError(
            max_size_mb=round(max_size / (1024 * 1024), 2),
            actual_size_mb=round(len(data) / (1024 * 1024), 2),
            filename=filename,
        )

    if content_type and content_type != 'application/octet-stream' and content_type not in ALLOWED_IMAGE_TYPES:
        raise InvalidFileTypeError(
            "Only JPEG, PNG, WebP, and GIF images are allowed",
            filename=filename,
            expected_types=sorted(ALLOWED_IMAGE_TYPES),
            actual_type=content_type,
        )

    if filename:
        extension = Path(filename).suffix.lower()
        if extension and extension not in ALLOWED_IMAGE_EXTENSIONS:
            guessed, _ = mimetypes.guess_type(filename)
            raise InvalidFileTypeError(
                f"Image file extension '{extension}' is not allowed",
                filename=filename,
                expected_types=sorted(ALLOWED_IMAGE_TYPES),
                actual_type=guessed,
            )

    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidFileTypeError(f"Invalid image file: {e}", filename=filename)

    detected = PIL_FORMAT_MIME.get(image_format or '')
    if detected is None:
        raise InvalidFileTypeError(
            f"Unsupported image format: {image_format}",
            filename=filename,
            expected_types=sorted(ALLOWED_IMAGE_TYPES),
            actual_type=image_format,
        )

    return detected
