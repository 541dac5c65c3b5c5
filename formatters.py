from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)


RenderFn = Callable[[str, Optional[str]], str]
Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class Formatter:
    predicate: Predicate
    render: RenderFn
    name: str = "formatter"


def org_link(url: str, description: str) -> str:
    return f"[[{url}][{description}]]"


def org_link_formatter(url: str, title: Optional[str]) -> str:
    """Default rendering: an org-mode link described by the title, or by the URL itself."""
    return org_link(url, title if title is not None else url)


def youtube_music_formatter(label: str = "MUSIC") -> Formatter:
    """Replace YouTube Music links with a fixed label."""
    return Formatter(
        predicate=lambda url: "music.youtube.com" in url,
        render=lambda url, title: label,
        name="youtube-music",
    )


def render_link(
    url: str,
    title: Optional[str],
    chain: Sequence[Formatter] = (),
    default: RenderFn = org_link_formatter,
) -> str:
    """Render ``url`` with the first formatter whose predicate matches, else ``default``.

    Formatters after the first match are never consulted.
    """
    for formatter in chain:
        if formatter.predicate(url):
            logger.debug("%s matched %s", formatter.name, url)
            return formatter.render(url, title)
    return default(url, title)
