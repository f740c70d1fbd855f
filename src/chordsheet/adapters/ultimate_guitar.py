"""Adapter for tabs.ultimate-guitar.com chord pages.

Two page formats are supported:

New format (current):
    <div class="js-store" data-content="<html-entity-encoded JSON>">
    JSON path:
        store.page.data.tab
            .song_name        → song_name
            .artist_name      → artist
        store.page.data.tab_view
            .wiki_tab.content → raw tab markup

Legacy format (Next.js, kept as fallback):
    <script id="__NEXT_DATA__" type="application/json">
    JSON path:
        props.pageProps.data.tab_view
            .song_name / .artist_name / .wiki_tab.content

The markup puts chords on their own line above the lyric, as
``[ch]D[/ch]``, labels sections as ``[Verse 1]`` and wraps chord+lyric pairs
in ``[tab]...[/tab]`` (stripped here).
"""

import json
import re

from bs4 import BeautifulSoup

from ..exceptions import ExtractError
from ..models import LyricsWithChords
from ..pipeline import convert_ultimate_guitar
from .base import SiteAdapter

_TAB_TAG_RE = re.compile(r"\[/?tab\]")


def strip_tab_tags(markup: str) -> str:
    return _TAB_TAG_RE.sub("", markup)


def _js_store_json(soup: BeautifulSoup) -> str | None:
    # BeautifulSoup has already decoded the &quot; entities of the attribute.
    store_div = soup.find("div", class_="js-store")
    return store_div.get("data-content") if store_div else None


def _next_data_json(soup: BeautifulSoup) -> str | None:
    script_tag = soup.find("script", id="__NEXT_DATA__")
    return script_tag.string if script_tag else None


# (JSON source, key path to page data), current format first.
_PAGE_DATA_SOURCES = (
    (_js_store_json, ("store", "page", "data")),
    (_next_data_json, ("props", "pageProps", "data")),
)


def _extract_page_data(soup: BeautifulSoup, url: str) -> dict:
    """Return the ``page.data`` dict from the first JSON container that has it.

    Raises :class:`~chordsheet.exceptions.ExtractError` if no container is
    found or none can be parsed.
    """
    for find_json, path in _PAGE_DATA_SOURCES:
        raw = find_json(soup)
        if not raw:
            continue
        try:
            data = json.loads(raw)
            for key in path:
                data = data[key]
        except (KeyError, TypeError, json.JSONDecodeError):
            continue
        if isinstance(data, dict):
            return data

    raise ExtractError(url, "Could not find tab data (tried js-store and __NEXT_DATA__)")


class UltimateGuitarAdapter(SiteAdapter):
    """Adapter for tabs.ultimate-guitar.com chord pages."""

    @classmethod
    def can_handle(cls, url: str) -> bool:
        return "tabs.ultimate-guitar.com/tab/" in url

    def extract(self, html: str, url: str) -> LyricsWithChords:
        soup = BeautifulSoup(html, "html.parser")
        page_data = _extract_page_data(soup, url)

        tab_meta = page_data.get("tab") or page_data.get("tab_view") or {}
        tab_view = page_data.get("tab_view") or {}

        wiki_tab = tab_view.get("wiki_tab") or {}
        content = wiki_tab.get("content") or ""
        if not content:
            raise ExtractError(url, "wiki_tab.content is empty or missing")

        return convert_ultimate_guitar(
            strip_tab_tags(content),
            self.options,
            artist=tab_meta.get("artist_name") or "",
            song_name=tab_meta.get("song_name") or "",
        )
