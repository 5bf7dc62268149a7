from __future__ import annotations

import pytest

from geh.exceptions import InvalidDocumentUriError
from geh.extraction.urls import derive_base, derive_relative, resolve_url

BASE = "http://h.test"
RELATIVE = "http://h.test/dir"


@pytest.mark.parametrize("src", ["/b.gif", "/", "/deep/path/c.png?x=1"])
def test_resolve_url_joins_site_absolute_paths_to_base(src: str) -> None:
    assert resolve_url(BASE, RELATIVE, src) == BASE + src


@pytest.mark.parametrize("src", ["http://x", "HTTP://X", "https://cdn.test/a.png", "HtTpS://cdn.test/a.png"])
def test_resolve_url_keeps_qualified_urls(src: str) -> None:
    assert resolve_url(BASE, RELATIVE, src) == src


@pytest.mark.parametrize("src", ["a.gif", "img/a.gif", "../up.png", "ftp://other/a.png", "http:/broken"])
def test_resolve_url_joins_other_values_to_document_directory(src: str) -> None:
    assert resolve_url(BASE, RELATIVE, src) == f"{RELATIVE}/{src}"


def test_resolve_url_empty_src_is_relative() -> None:
    assert resolve_url(BASE, RELATIVE, "") == f"{RELATIVE}/"


def test_derive_base() -> None:
    assert derive_base("http://example.com/a/b.html") == "http://example.com"
    assert derive_base("http://example.com") == "http://example.com"
    assert derive_base("https://example.com/") == "https://example.com"


def test_derive_base_rejects_uri_shorter_than_scheme_prefix() -> None:
    with pytest.raises(InvalidDocumentUriError, match="too short"):
        derive_base("a.html")


def test_derive_relative() -> None:
    assert derive_relative("http://example.com/a/b.html") == "http://example.com/a"
    assert derive_relative("http://example.com") == "http://example.com"
    assert derive_relative("page.html") == "page.html"


@pytest.mark.parametrize(
    ("uri", "expected"),
    [
        ("http://h.test", "http://h.test"),
        ("https://h.test", "https://h.test"),
        ("http://h.test/", "http://h.test"),
        ("https://h.test/page.html", "https://h.test"),
        ("dir/p.html", "dir"),
        ("file:///srv/www/p.html", "file:///srv/www"),
    ],
)
def test_derive_relative_ignores_scheme_slashes(uri: str, expected: str) -> None:
    assert derive_relative(uri) == expected
