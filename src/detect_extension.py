"""Logic for detecting the shared extension of a combined request path."""

import logging

from src.constants import RECOGNIZED_EXTENSIONS

logger = logging.getLogger(__name__)


def detect_extension(request_path: str) -> str:
    """Return the recognized extension the path ends with, or "" if none.

    Extensions are checked in declaration order and the first match wins.
    Matching is case-sensitive, so ``/a.CSS`` has no extension.
    """
    for ext in RECOGNIZED_EXTENSIONS:
        if request_path.endswith(ext):
            logger.debug("Detected extension: %s", ext)
            return ext
    logger.debug("No recognized extension for: %s", request_path)
    return ""
