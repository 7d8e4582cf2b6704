"""MIME type and caching headers for merged responses."""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

from src.constants import (
    DEFAULT_ENCODING,
    EXT_CSS,
    EXT_JS,
    EXT_JSON,
    HEADER_CONTENT_TYPE,
    HEADER_EXPIRES,
    HEADER_LAST_MODIFIED,
    MIME_CSS,
    MIME_JS,
    MIME_JSON,
)


def mime_type_for(path: str) -> str | None:
    """Return the MIME type for a request path, ignoring case."""
    lower = path.lower()
    # .json before .js
    if lower.endswith(EXT_JSON):
        return MIME_JSON
    if lower.endswith(EXT_JS):
        return MIME_JS
    if lower.endswith(EXT_CSS):
        return MIME_CSS
    return None


def build_response_headers(
    path: str,
    expires_minutes: int,
    now: datetime | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> list[tuple[str, str]]:
    """Build Content-Type, Expires and Last-Modified headers.

    ``expires_minutes`` is relative to ``now``; a negative value puts the
    expiry in the past.
    """
    now = now or datetime.now(timezone.utc)
    headers: list[tuple[str, str]] = []
    mime = mime_type_for(path)
    if mime:
        headers.append((HEADER_CONTENT_TYPE, f"{mime}; charset={encoding}"))
    expires = now + timedelta(minutes=expires_minutes)
    headers.append((HEADER_EXPIRES, format_datetime(expires, usegmt=True)))
    headers.append((HEADER_LAST_MODIFIED, format_datetime(now, usegmt=True)))
    return headers
