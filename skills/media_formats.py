"""Advisory file-extension checks for media URLs.

A mismatch only logs a warning; the message is still sent. Matching is a plain
suffix check on the whole URL, so URLs with query strings will warn too.
"""

import re
import logging

logger = logging.getLogger("MediaFormats")

SUPPORTED_FORMATS = {
    "image": ("png", "jpg", "jpeg", "gif"),
    "video": ("mp4", "ogg", "avi", "mov", "webm"),
    "audio": ("aac", "m4a", "wav", "mp4"),
}

_PATTERNS = {
    media_type: re.compile(r"\.(" + "|".join(exts) + r")$", re.IGNORECASE)
    for media_type, exts in SUPPORTED_FORMATS.items()
}


def check_media_format(url: str, media_type: str) -> bool:
    """Return True if *url* ends in a known extension for *media_type*."""
    pattern = _PATTERNS.get(media_type)
    if pattern is None:
        return True
    if pattern.search(url):
        return True
    logger.warning(
        "%s URL does not look like a supported format (%s): %s",
        media_type.capitalize(), ", ".join(SUPPORTED_FORMATS[media_type]), url,
    )
    return False
