from __future__ import annotations

from typing import Set
from urllib.parse import urlsplit


WEB_SCHEMES = ("http", "https")

# Host code points the WHATWG URL standard forbids (the separators urlsplit
# already consumes are left out)
FORBIDDEN_HOST_CHARS = frozenset("<>^|\\[]")


def is_web_url(token: str) -> bool:
    """True when ``token`` parses as an absolute http(s) URL with a host.

    Stricter than urlsplit about host characters, but still requires the
    ``scheme://`` form: ``http:/example.com`` is not accepted.
    """
    try:
        parts = urlsplit(token)
        # Accessing .port validates it; a non-numeric or out-of-range port raises
        parts.port
    except ValueError:
        return False
    if parts.scheme not in WEB_SCHEMES:
        return False
    host = parts.hostname
    if not host:
        return False
    if ":" in host:  # bracketed IPv6 literal
        return True
    return not FORBIDDEN_HOST_CHARS.intersection(host)


def extract_urls(text: str) -> Set[str]:
    """Collect the distinct http(s) URLs among the whitespace-separated tokens of ``text``.

    Tokens are kept verbatim: no trimming of attached punctuation, no normalization.
    """
    return {word for word in text.split() if is_web_url(word)}
