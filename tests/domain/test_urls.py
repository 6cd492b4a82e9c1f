"""Tests for the URL well-formedness predicate."""

from __future__ import annotations

from typing import Any

import pytest

from authfields.domain.urls import HOSTNAME_PATTERN, validate_url


class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/path",
            "http://example.com",
            "https://example.com/",
            "https://sub.example-site.co.uk/a/b/c/",
            "https://example.com:8443/photo.png",
            "https://user@example.com/p",
            "https://example.com/path?size=large#top",
            "http://localhost/a~b/c%20d",
            "https://cdn_1.example.com/x;y=1/z@a",
        ],
    )
    def test_valid(self, url: str) -> None:
        assert validate_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "ftp://example.com",
            "mailto:user@example.com",
            "example.com/path",
            "//example.com/path",
            "http:example.com",
        ],
    )
    def test_rejects_scheme(self, url: str) -> None:
        assert validate_url(url) is False

    @pytest.mark.parametrize(
        "url",
        [
            "https://ex ample.com",
            "https://example.com/a b",
            "https://exämple.com",
            "https://example.com/<script>",
            'https://example.com/"quoted"',
            "https://example.com/\\path",
        ],
    )
    def test_rejects_disallowed_characters(self, url: str) -> None:
        assert validate_url(url) is False

    @pytest.mark.parametrize(
        "url",
        [
            "https://-example.com",
            "https://example..com",
            "https://example.com.",
            "https://.example.com",
            "https://",
            "https://:8080/",
            "http://[::1]/",
        ],
    )
    def test_rejects_hostname(self, url: str) -> None:
        assert validate_url(url) is False

    @pytest.mark.parametrize("url", ["https://example.com//double", "https://example.com/a//b"])
    def test_rejects_path(self, url: str) -> None:
        assert validate_url(url) is False

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com:abc/",
            "https://[::1/",
            "https://example.com:99999/",
            "https://a@b@example.com/p",
            "https://example.com/p?a[]=1",
            "https://example.com/p#a#b",
            "https://u[1]@example.com/p",
            "https://example.com/p#[frag]",
        ],
    )
    def test_parse_failure_is_false(self, url: str) -> None:
        assert validate_url(url) is False

    @pytest.mark.parametrize("url", ["", None, 42, b"https://example.com"])
    def test_empty_or_non_string(self, url: Any) -> None:
        assert validate_url(url) is False

    def test_pathological_hostname_is_fast(self) -> None:
        """Hostname grammar has no nested ambiguity to backtrack over."""
        assert HOSTNAME_PATTERN.fullmatch("a" * 5000 + "!") is None
