"""Derive per-request cache flags from the query string."""

from dataclasses import dataclass
from urllib.parse import parse_qs

from src.constants import PARAM_DEBUG, PARAM_EXPIRE_CACHE, PARAM_SKIP_CACHE


@dataclass(frozen=True)
class RequestFlags:
    """Cache behaviour requested for a single combined request."""

    cache_enabled: bool
    clear_signal: bool


def parse_request_flags(query: str, use_cache: bool = True) -> RequestFlags:
    """Read ``_skipcache_``, ``_dbg_`` and ``_expirecache_`` from ``query``.

    Only the presence of a parameter matters, so ``?_dbg_`` and ``?_dbg_=0``
    both bypass the cache.
    """
    params = parse_qs(query, keep_blank_values=True)
    skip = PARAM_SKIP_CACHE in params or PARAM_DEBUG in params
    return RequestFlags(
        cache_enabled=use_cache and not skip,
        clear_signal=PARAM_EXPIRE_CACHE in params,
    )
