"""Orchestration of cache lookup, resolution and merging for one request."""

import logging

from src.constants import DEFAULT_ENCODING
from src.merge_cache import MergeCache
from src.merge_resources import Fetcher, merge_resources
from src.resolve_resources import resolve_resources

logger = logging.getLogger(__name__)


def serve_merged(
    request_path: str,
    context_prefix: str,
    cache: MergeCache,
    fetch: Fetcher,
    *,
    cache_enabled: bool = True,
    clear_signal: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Return the merged content for a combined request path.

    The cache is keyed on the raw ``request_path``, so a hit skips resolution
    and fetching entirely. ``clear_signal`` empties the cache first, whether
    or not this request uses it.
    """
    if clear_signal:
        cache.clear()

    if cache_enabled:
        cached = cache.get(request_path)
        if cached is not None:
            logger.debug("Cache hit: %s", request_path)
            return cached
        logger.debug("Cache miss: %s", request_path)

    locations = resolve_resources(request_path, context_prefix)
    outcome = merge_resources(locations, fetch, encoding)
    if outcome.failed:
        logger.warning(
            "%d of %d resources failed for %s: %s",
            len(outcome.failed),
            len(outcome.resources),
            request_path,
            ", ".join(outcome.failed),
        )
    logger.debug(
        "Merged %d resources for %s (%d missing)",
        len(outcome.resources) - len(outcome.missing) - len(outcome.failed),
        request_path,
        len(outcome.missing),
    )

    if cache_enabled:
        logger.debug("Updating cache for: %s", request_path)
        cache.put(request_path, outcome.content)

    return outcome.content
