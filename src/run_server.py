"""Orchestration logic for running the combined resource server."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from src.fetch_resource import make_file_fetcher
from src.load_config import load_config
from src.merge_cache import MergeCache
from src.merge_server import create_server
from src.serve_merged import serve_merged
from src.setup_logging import setup_logging

logger = logging.getLogger(__name__)


def run_server(args: argparse.Namespace) -> int:
    """Load configuration, then either merge one path or serve until stopped."""
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    config = _init_config(args)

    root = Path(config["resources"]["root"])
    if not root.is_dir():
        msg = f"Resource root is not a directory: {root}"
        raise SystemExit(msg)

    cache = MergeCache()
    fetch = make_file_fetcher(root)

    if args.merge:
        content = serve_merged(
            args.merge,
            config["resources"]["context_path"],
            cache,
            fetch,
            cache_enabled=False,
            encoding=config["resources"]["encoding"],
        )
        sys.stdout.write(content)
        return 0

    server = create_server(config, cache=cache, fetch=fetch)
    host, port = server.server_address[:2]
    print(f"Serving combined resources from {root.resolve()} at http://{host}:{port}/")
    logger.info(
        "Server initialized: use_cache=%s expires_minutes=%s context_path=%r",
        config["cache"]["use_cache"],
        config["headers"]["expires_minutes"],
        config["resources"]["context_path"],
    )
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down.")
    finally:
        server.server_close()
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the YAML configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.root is not None:
        config["resources"]["root"] = str(args.root)
    if args.context_path is not None:
        config["resources"]["context_path"] = args.context_path
    if args.host is not None:
        config["server"]["host"] = args.host
    if args.port is not None:
        config["server"]["port"] = args.port
    if args.no_cache:
        config["cache"]["use_cache"] = False
    if args.expires_minutes is not None:
        config["headers"]["expires_minutes"] = args.expires_minutes
    return config
