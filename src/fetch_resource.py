"""Filesystem-backed resource fetcher."""

import logging
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def make_file_fetcher(root_dir: str | Path) -> Callable[[str], bytes | None]:
    """Build a fetcher that reads resource locations below ``root_dir``.

    The returned callable yields ``None`` for locations that are not regular
    files, that escape the root, or that are not valid paths at all. Other I/O
    errors propagate to the caller.
    """
    root = Path(root_dir).resolve()

    def fetch(location: str) -> bytes | None:
        try:
            target = (root / location.lstrip("/")).resolve()
            if target != root and root not in target.parents:
                logger.warning("Refusing resource outside root: %s", location)
                return None
            if not target.is_file():
                return None
        except ValueError:
            # e.g. an embedded NUL byte
            logger.warning("Invalid resource location: %r", location)
            return None
        return target.read_bytes()

    return fetch
