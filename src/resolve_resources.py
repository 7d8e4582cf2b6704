"""Resolve a combined request path into the resource locations it names."""

import logging
import posixpath

from src.constants import PATH_SEPARATOR, SEGMENT_DELIMITER
from src.detect_extension import detect_extension

logger = logging.getLogger(__name__)


def resolve_resources(request_path: str, context_prefix: str = "") -> list[str]:
    """Split a combined request path into absolute resource locations.

    ``/app/js/a,b,/lib/c,../d.js`` with prefix ``/app`` resolves to
    ``/js/a.js``, ``/js/b.js``, ``/lib/c.js`` and ``/d.js``.

    Absolute segments (leading ``/``) are taken as-is. Relative segments are
    joined onto the directory of the previously resolved location, starting
    from ``/``. The result keeps first-occurrence order and holds each
    location once.
    """
    extension = detect_extension(request_path)

    bare = request_path
    if context_prefix:
        bare = bare.replace(context_prefix, "", 1)
    if extension:
        bare = bare.removesuffix(extension)

    resources: dict[str, None] = {}
    current_dir = PATH_SEPARATOR

    for segment in bare.split(SEGMENT_DELIMITER):
        if not segment:
            continue
        if segment.startswith(PATH_SEPARATOR):
            location = segment + extension
        else:
            joined = posixpath.normpath(posixpath.join(current_dir, segment))
            location = joined + extension
        current_dir = posixpath.dirname(location) or PATH_SEPARATOR
        logger.debug(
            "Adding path: %s (path for next relative resource will be: %s)",
            location,
            current_dir,
        )
        resources.setdefault(location, None)

    logger.debug("Found %d resources to process and merge.", len(resources))
    return list(resources)
