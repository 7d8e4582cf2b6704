"""HTTP front end that serves combined resource requests.

Each request runs on its own thread; the only state shared between them is
the server's ``MergeCache``.
"""

from __future__ import annotations

import http.server
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from src.constants import DEFAULT_ENCODING, DEFAULT_EXPIRES_MINUTES
from src.fetch_resource import make_file_fetcher
from src.merge_cache import MergeCache
from src.request_flags import parse_request_flags
from src.response_headers import build_response_headers
from src.serve_merged import serve_merged

if TYPE_CHECKING:
    from src.merge_resources import Fetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerSettings:
    """Per-process settings read by every request handler."""

    context_path: str = ""
    use_cache: bool = True
    expires_minutes: int = DEFAULT_EXPIRES_MINUTES
    encoding: str = DEFAULT_ENCODING


class MergeServer(http.server.ThreadingHTTPServer):
    """Threaded HTTP server owning the merge cache and resource fetcher."""

    daemon_threads = True

    def __init__(
        self,
        address: tuple[str, int],
        settings: ServerSettings,
        cache: MergeCache,
        fetch: Fetcher,
    ) -> None:
        super().__init__(address, MergeRequestHandler)
        self.settings = settings
        self.cache = cache
        self.fetch = fetch


class MergeRequestHandler(http.server.BaseHTTPRequestHandler):
    """Serve ``GET``/``HEAD`` for combined paths like ``/app/js/a,b,c.js``."""

    server: MergeServer

    def do_GET(self) -> None:
        """Handle GET requests."""
        self._handle(include_body=True)

    def do_HEAD(self) -> None:
        """Handle HEAD requests."""
        self._handle(include_body=False)

    def _handle(self, include_body: bool) -> None:
        path, _, query = self.path.partition("?")
        settings = self.server.settings
        flags = parse_request_flags(query, use_cache=settings.use_cache)
        logger.info("Processing URI: %s", path)

        try:
            content = serve_merged(
                path,
                settings.context_path,
                self.server.cache,
                self.server.fetch,
                cache_enabled=flags.cache_enabled,
                clear_signal=flags.clear_signal,
                encoding=settings.encoding,
            )
        except Exception:
            logger.exception("Failed to serve: %s", path)
            self.send_error(500, "Failed to merge resources")
            return

        data = content.encode(settings.encoding)
        self.send_response(200)
        for name, value in build_response_headers(
            path, settings.expires_minutes, encoding=settings.encoding
        ):
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        if include_body:
            self.wfile.write(data)

    def log_message(self, format: str, *args: Any) -> None:
        """Route access logs through the logging module."""
        logger.debug("%s - %s", self.address_string(), format % args)


def create_server(
    config: dict[str, Any],
    cache: MergeCache | None = None,
    fetch: Fetcher | None = None,
) -> MergeServer:
    """Build a ``MergeServer`` from a loaded configuration."""
    resources = config["resources"]
    settings = ServerSettings(
        context_path=resources.get("context_path", ""),
        use_cache=config["cache"].get("use_cache", True),
        expires_minutes=config["headers"].get(
            "expires_minutes", DEFAULT_EXPIRES_MINUTES
        ),
        encoding=resources.get("encoding", DEFAULT_ENCODING),
    )
    if cache is None:
        cache = MergeCache()
    if fetch is None:
        fetch = make_file_fetcher(resources["root"])
    address = (config["server"]["host"], int(config["server"]["port"]))
    return MergeServer(address, settings, cache, fetch)
