"""Fetch and concatenate resolved resources."""

import logging
from collections.abc import Callable, Iterable

from src.constants import DEFAULT_ENCODING
from src.merge_outcome import MergeOutcome

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], bytes | None]


def merge_resources(
    locations: Iterable[str],
    fetch: Fetcher,
    encoding: str = DEFAULT_ENCODING,
) -> MergeOutcome:
    """Concatenate the content of ``locations`` in order.

    A location the fetcher reports as absent contributes nothing. An
    ``OSError`` or ``ValueError`` while fetching one resource is logged and
    recorded, and the remaining resources are still merged.
    """
    chunks: list[bytes] = []
    resources: list[str] = []
    missing: list[str] = []
    failed: list[str] = []

    for location in locations:
        resources.append(location)
        logger.debug("Processing resource: %s", location)
        try:
            data = fetch(location)
        except (OSError, ValueError):
            logger.exception("Error while reading resource: %s", location)
            failed.append(location)
            continue
        if data is None:
            logger.debug("Resource not found: %s", location)
            missing.append(location)
            continue
        chunks.append(data)

    content = b"".join(chunks).decode(encoding, errors="replace")
    return MergeOutcome(
        content=content, resources=resources, missing=missing, failed=failed
    )
