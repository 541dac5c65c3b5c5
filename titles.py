from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from bs4 import BeautifulSoup

from config import DEFAULT_USER_AGENT


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 8

_WHITESPACE = re.compile(r"\s+")
_MARKUP_TYPES = ("text/html", "application/xhtml", "application/xml", "text/xml")


def _build_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    session = requests.Session()
    # One attempt per URL; a failed fetch simply means "no title"
    adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update(
        {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
    )
    return session


def _request_html(session: requests.Session, url: str, timeout: float) -> Optional[Union[str, bytes]]:
    resp = session.get(url, timeout=timeout)
    resp.raise_for_status()
    ctype = resp.headers.get("content-type", "").lower()
    if ctype and not any(kind in ctype for kind in _MARKUP_TYPES):
        logger.debug("Skipping %s: content-type %r is not markup", url, ctype)
        return None
    if "charset=" in ctype:
        return resp.text
    # Without a header charset requests assumes ISO-8859-1; raw bytes let the
    # parser pick up <meta charset> instead
    return resp.content


def extract_title(html: Union[str, bytes]) -> Optional[str]:
    """Return the document's <title> text with whitespace collapsed, or None."""
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return None
    title = _WHITESPACE.sub(" ", soup.title.get_text()).strip()
    return title or None


def fetch_title(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Optional[str]:
    """Fetch ``url`` and return its page title.

    Every failure (network error, non-2xx status, timeout, non-HTML payload,
    missing or empty <title>) yields None instead of an exception.
    """
    session = _build_session(user_agent)
    try:
        html = _request_html(session, url, timeout=timeout)
        if html is None:
            return None
        return extract_title(html)
    except requests.RequestException as exc:
        logger.debug("Fetching %s failed: %s", url, exc)
        return None
    except Exception as exc:  # markup the parser chokes on
        logger.debug("Parsing %s failed: %s", url, exc)
        return None
    finally:
        session.close()


def resolve_titles(
    urls: Iterable[str],
    timeout: float = DEFAULT_TIMEOUT,
    max_workers: int = DEFAULT_MAX_WORKERS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Dict[str, Optional[str]]:
    """Look up a title for every URL; each URL gets a key even when the lookup fails."""
    pending = list(dict.fromkeys(urls))
    if not pending:
        return {}

    workers = max(1, min(max_workers, len(pending)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        found = pool.map(lambda u: fetch_title(u, timeout=timeout, user_agent=user_agent), pending)
        titles: Dict[str, Optional[str]] = dict(zip(pending, found))

    resolved = sum(1 for t in titles.values() if t is not None)
    logger.info("Resolved titles for %d of %d URL(s)", resolved, len(titles))
    return titles
