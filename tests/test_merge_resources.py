"""Tests for fetching and concatenating resources."""

from src.merge_resources import merge_resources


def test_concatenates_in_order() -> None:
    """Verify that content follows the order of the locations."""
    files = {"/a.js": b"A;", "/b.js": b"B;", "/c.js": b"C;"}
    outcome = merge_resources(["/c.js", "/a.js", "/b.js"], files.get)
    assert outcome.content == "C;A;B;"
    assert outcome.resources == ["/c.js", "/a.js", "/b.js"]


def test_missing_resource_contributes_nothing() -> None:
    """Verify that absent resources are skipped and reported."""
    files = {"/b.js": b"var b;"}
    outcome = merge_resources(["/a.js", "/b.js"], files.get)
    assert outcome.content == "var b;"
    assert outcome.missing == ["/a.js"]
    assert outcome.failed == []


def test_io_error_does_not_stop_merge() -> None:
    """Verify that an OSError on one resource still merges the rest."""

    def fetch(location: str) -> bytes | None:
        if location == "/broken.css":
            raise PermissionError(location)
        return b"." + location.encode() + b"{}"

    outcome = merge_resources(["/a.css", "/broken.css", "/c.css"], fetch)
    assert outcome.content == "./a.css{}./c.css{}"
    assert outcome.failed == ["/broken.css"]


def test_invalid_location_does_not_stop_merge() -> None:
    """Verify that a ValueError on one location still merges the rest."""

    def fetch(location: str) -> bytes | None:
        if "\x00" in location:
            raise ValueError("embedded null byte")
        return b"A;"

    outcome = merge_resources(["/js/a.js", "/js/b\x00c.js"], fetch)
    assert outcome.content == "A;"
    assert outcome.failed == ["/js/b\x00c.js"]


def test_decodes_with_encoding() -> None:
    """Verify that the merged bytes are decoded with the given encoding."""
    files = {"/a.js": "/* é */".encode("latin-1")}
    outcome = merge_resources(["/a.js"], files.get, encoding="latin-1")
    assert outcome.content == "/* é */"


def test_undecodable_bytes_are_replaced() -> None:
    """Verify that invalid bytes do not abort the merge."""
    files = {"/a.js": b"x\xffy"}
    outcome = merge_resources(["/a.js"], files.get)
    assert outcome.content == "x\ufffdy"


def test_empty_locations() -> None:
    """Verify that merging nothing yields empty content."""
    outcome = merge_resources([], lambda _: b"unused")
    assert outcome.content == ""
