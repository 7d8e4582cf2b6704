"""Shared constants for combined resource requests."""

EXT_JS = ".js"
EXT_JSON = ".json"
EXT_CSS = ".css"

# Detection order matters only for overlapping suffixes.
RECOGNIZED_EXTENSIONS: tuple[str, ...] = (EXT_JS, EXT_JSON, EXT_CSS)

MIME_JS = "text/javascript"
MIME_JSON = "application/json"
MIME_CSS = "text/css"

SEGMENT_DELIMITER = ","
PATH_SEPARATOR = "/"

PARAM_SKIP_CACHE = "_skipcache_"
PARAM_DEBUG = "_dbg_"
PARAM_EXPIRE_CACHE = "_expirecache_"

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_EXPIRES = "Expires"
HEADER_LAST_MODIFIED = "Last-Modified"

DEFAULT_EXPIRES_MINUTES = 7 * 24 * 60  # 7 days
DEFAULT_ENCODING = "utf-8"
