"""Adapter for supermusic.cz / supermusic.sk song pages.

The song page carries the title as ``<... class="test3">Artist - Title</...>``.
The song body comes from the site's plain-text export, selected by the
``idpiesne`` query parameter of the page URL::

    https://supermusic.cz/export.php?idpiesne=<id>&stiahni=1&typ=TXT&sid=

The export starts with two header lines, then the lyrics with chords typed
inline as ``[Am]`` (several at once as ``[C, G]``), often mid-word.
"""

from bs4 import BeautifulSoup

from ..exceptions import ExtractError
from ..models import LyricsWithChords
from ..pipeline import convert_supermusic, normalize_line_endings
from .base import SiteAdapter
from .utils import fetch_text, query_param

EXPORT_URL = "https://supermusic.cz/export.php?idpiesne={song_id}&stiahni=1&typ=TXT&sid="

_EXPORT_HEADER_LINES = 2


def export_url(url: str) -> str:
    """Return the TXT export URL for the song page at *url*.

    Raises ExtractError if the URL has no ``idpiesne`` parameter.
    """
    song_id = query_param(url, "idpiesne")
    if not song_id:
        raise ExtractError(url, "URL has no idpiesne parameter")
    return EXPORT_URL.format(song_id=song_id)


def strip_export_header(export: str) -> str:
    lines = normalize_line_endings(export).split("\n")
    return "\n".join(lines[_EXPORT_HEADER_LINES:])


class SupermusicAdapter(SiteAdapter):
    """Adapter for supermusic.cz / supermusic.sk song pages."""

    @classmethod
    def can_handle(cls, url: str) -> bool:
        return "supermusic.cz/" in url or "supermusic.sk/" in url

    def scrape(self, url: str) -> LyricsWithChords:
        export_source = export_url(url)
        html = self.fetch(url)
        export = fetch_text(export_source)
        return self.extract(html, url, export)

    def extract(self, html: str, url: str, export: str = "") -> LyricsWithChords:
        soup = BeautifulSoup(html, "html.parser")
        title_el = soup.select_one(".test3")
        if title_el is None:
            raise ExtractError(url, "Could not find song title (.test3)")

        parts = title_el.get_text(strip=True).split(" - ")
        if len(parts) < 2:
            raise ExtractError(url, "Song title is not in 'Artist - Title' form")
        artist, song_name = parts[0].strip(), parts[1].strip()

        if not export.strip():
            raise ExtractError(url, "Text export is empty")

        return convert_supermusic(strip_export_header(export), artist, song_name)
