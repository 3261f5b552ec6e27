from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

from app.domain.entities import Attachment
from app.domain.errors import AttachmentRejected, AttachmentTooLarge
from app.domain.services import sanitize_filename

logger = logging.getLogger(__name__)

# Pillow format name -> MIME type
ALLOWED_FORMATS = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}


def detect_image_format(data: bytes) -> str | None:
    """
    Identify the image format from the bytes themselves.
    Returns the Pillow format name, or None if nothing matches.
    """
    if not data:
        return None
    try:
        with Image.open(io.BytesIO(data), formats=list(ALLOWED_FORMATS)) as img:
            return img.format
    except (UnidentifiedImageError, OSError, ValueError):
        return None


def check_attachment(
    data: bytes,
    filename: str | None,
    *,
    default_filename: str,
    max_bytes: int | None = None,
) -> Attachment:
    """
    Accept only JPEG/PNG/WebP content, whatever the client claims the file is.
    """
    if max_bytes is not None and len(data) > max_bytes:
        raise AttachmentTooLarge(max_bytes)

    detected = detect_image_format(data)
    if detected not in ALLOWED_FORMATS:
        logger.info(
            "attachment rejected",
            extra={"declared_name": filename, "detected": detected},
        )
        raise AttachmentRejected()

    return Attachment(
        filename=sanitize_filename(filename, default_filename),
        data=data,
        mime_type=ALLOWED_FORMATS[detected],
    )
