from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from typing import List, Optional

from config import Settings, get_settings
from enrich import enrich
from formatters import Formatter, org_link_formatter, youtube_music_formatter
from note import Note
from titles import resolve_titles


LOG_HANDLER_NAME = "orglink"


def no_titles(urls):
    return {url: None for url in urls}


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orglink",
        description="Print an org-mode INBOX entry, turning URLs into links named after their page titles",
    )
    parser.add_argument("text", nargs="+", metavar="TEXT", help="Entry title, optionally followed by a body")
    parser.add_argument("--timeout", type=float, default=settings.fetch_timeout, help="Seconds to wait for each page")
    parser.add_argument("--workers", type=int, default=settings.max_workers, help="Pages fetched in parallel")
    parser.add_argument("--youtube-music", action="store_true", help="Replace YouTube Music links with a label")
    parser.add_argument("--no-fetch", action="store_true", help="Do not fetch page titles; link text is the URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def setup_logging(level: str, verbose: bool) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING))

    # Replace a handler left by an earlier call so repeated runs log once
    for handler in list(root.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    return root


def main(argv: Optional[List[str]] = None) -> None:
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_intermixed_args(argv)

    note = Note.from_args(args.text)
    if note is None:
        parser.error(f"expected a title and an optional body, got {len(args.text)} arguments")

    setup_logging(settings.log_level, args.verbose)

    chain: List[Formatter] = []
    if args.youtube_music:
        chain.append(youtube_music_formatter(settings.music_label))

    if args.no_fetch:
        resolver = no_titles
    else:
        resolver = partial(
            resolve_titles,
            timeout=args.timeout,
            max_workers=args.workers,
            user_agent=settings.user_agent,
        )

    enriched = note.apply_to_text(
        lambda text: enrich(text, chain=chain, default=org_link_formatter, resolver=resolver)
    )
    print(enriched.to_org(), end="")


if __name__ == "__main__":
    main()
