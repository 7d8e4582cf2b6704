"""Command-line entry point for serving combined JS/CSS resources."""

import argparse
from pathlib import Path

from src.run_server import run_server


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the merge server."""
    parser = argparse.ArgumentParser(
        description=(
            "Serve several JS or CSS files as one response, e.g. "
            "/js/prototype,controls,app.js."
        ),
    )
    parser.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Directory the resources are served from (default: .)",
    )
    parser.add_argument(
        "--context-path",
        help="Application prefix stripped from request paths, e.g. /myapp",
    )
    parser.add_argument("--host", help="Address to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to bind (default: 8080)")
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Never cache merged responses",
    )
    parser.add_argument(
        "--expires-minutes",
        type=int,
        help="Minutes from now for the Expires header; negative expires in the past",
    )
    parser.add_argument(
        "--merge",
        metavar="REQUEST_PATH",
        help="Print the merged content for one request path and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every resolved resource and cache decision",
    )
    return parser


def main() -> int:
    """Parse arguments and run the server."""
    args = build_parser().parse_args()
    return run_server(args)


if __name__ == "__main__":
    raise SystemExit(main())
