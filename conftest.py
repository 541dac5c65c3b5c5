"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
import requests


class FakeResponse:
    def __init__(self, text="", status_code=200, content_type="text/html; charset=utf-8"):
        # Bytes bodies decode the way requests does when no charset is declared
        if isinstance(text, bytes):
            self.content = text
            self.text = text.decode("iso-8859-1")
        else:
            self.content = text.encode("utf-8")
            self.text = text
        self.status_code = status_code
        self.headers = {"content-type": content_type} if content_type else {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_pages(monkeypatch):
    """Serve canned responses from requests.Session.get.

    Map a URL to a FakeResponse or to an exception instance to raise.
    Returns the URL map and the list of (url, kwargs) requests made.
    """
    pages = {}
    calls = []

    def fake_get(self, url, **kwargs):
        calls.append((url, kwargs))
        outcome = pages.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(requests.Session, "get", fake_get)
    return pages, calls


@pytest.fixture
def static_titles():
    """Build a resolver that answers from a dict and records what it was asked."""

    def make(known):
        asked = []

        def resolver(urls):
            urls = set(urls)
            asked.append(urls)
            return {url: known.get(url) for url in urls}

        resolver.asked = asked
        return resolver

    return make


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 5, 14, 7)
