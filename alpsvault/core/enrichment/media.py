"""
Local media helpers: data URIs and embedded audio cover art.
"""

import base64
from io import BytesIO

from tinytag import TinyTag

from alpsvault.models.capture import FileCapture
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def to_data_uri(data: bytes, media_type: str | None = None) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{media_type or DEFAULT_MEDIA_TYPE};base64,{encoded}"


def extract_cover_art(file: FileCapture) -> str | None:
    """
    Embedded cover image of an audio file as a data URI.

    Returns None when the file has no picture or its tags can't be read.
    """
    try:
        tag = TinyTag.get(filename=file.name, file_obj=BytesIO(file.data), image=True)
        image = tag.images.any
    except Exception as e:
        logger.warning(f"Could not read audio tags of {file.name}, skipping cover art: {e}")
        return None

    if image is None or not image.data:
        return None
    return to_data_uri(image.data, image.mime_type or "image/jpeg")
