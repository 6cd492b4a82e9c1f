"""URL well-formedness check used for photo URLs.

Pure predicate: never raises. A conservative character allow-list runs
before structural parsing, then scheme, hostname and path are each held
to a fixed grammar.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit

# Anything outside the URL character set (letters, digits, reserved, unreserved, %).
INVALID_CHARS_PATTERN = re.compile(
    r"[^a-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]", re.IGNORECASE | re.ASCII
)

# Alphanumeric-led labels of [\w-], joined by single dots.
HOSTNAME_PATTERN = re.compile(r"[a-zA-Z0-9][\w-]*(?:\.[a-zA-Z0-9][\w-]*)*", re.ASCII)

PATHNAME_PATTERN = re.compile(r"(?:/[\w\-.~!$'()*+,;=:@%]+)*/?", re.ASCII)

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})


def _is_well_formed(netloc: str, path: str, query: str, fragment: str) -> bool:
    """Reject what ``urlsplit`` tolerates but a strict URI parser does not.

    At most one ``@`` in the authority, no ``#`` inside the fragment, and
    square brackets only around the host.
    """
    if netloc.count("@") > 1 or "#" in fragment:
        return False
    userinfo = netloc.rpartition("@")[0]
    return not any("[" in part or "]" in part for part in (userinfo, path, query, fragment))


def validate_url(url: Any) -> bool:
    """Return True if *url* is an absolute http(s) URL with a sane host and path.

    Examples:
        >>> validate_url("https://example.com/path")
        True
        >>> validate_url("ftp://example.com")
        False
        >>> validate_url("")
        False
    """
    if not isinstance(url, str) or not url or INVALID_CHARS_PATTERN.search(url):
        return False
    try:
        parts = urlsplit(url)
        # Accessing the port validates it; a bad port raises ValueError.
        parts.port  # noqa: B018
    except ValueError:
        return False

    if parts.scheme not in ALLOWED_SCHEMES:
        return False
    if not _is_well_formed(parts.netloc, parts.path, parts.query, parts.fragment):
        return False
    hostname = parts.hostname
    if not hostname or HOSTNAME_PATTERN.fullmatch(hostname) is None:
        return False
    path = parts.path
    if path in ("", "/"):
        return True
    return PATHNAME_PATTERN.fullmatch(path) is not None
