from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence

from formatters import Formatter, RenderFn, org_link_formatter, render_link
from titles import resolve_titles
from urls import extract_urls


logger = logging.getLogger(__name__)

Resolver = Callable[[Iterable[str]], Mapping[str, Optional[str]]]


def substitute(text: str, replacements: Dict[str, str]) -> str:
    """Replace every literal occurrence of each key in ``text`` with its value.

    Single pass over the original text, longest key first, so an inserted
    replacement is never itself searched again.
    """
    if not replacements:
        return text
    keys = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(k) for k in keys))
    return pattern.sub(lambda m: replacements[m.group(0)], text)


def enrich(
    text: str,
    chain: Sequence[Formatter] = (),
    default: RenderFn = org_link_formatter,
    resolver: Resolver = resolve_titles,
) -> str:
    """Rewrite every http(s) URL in ``text`` into its rendered link."""
    urls = extract_urls(text)
    if not urls:
        return text

    logger.debug("Found %d distinct URL(s)", len(urls))
    titles = resolver(urls)
    rendered = {url: render_link(url, titles.get(url), chain, default) for url in urls}
    return substitute(text, rendered)
