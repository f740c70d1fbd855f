from abc import ABC, abstractmethod

from ..models import LyricsWithChords, Options
from .utils import fetch_text


class SiteAdapter(ABC):
    """Abstract base class for all site-specific adapters."""

    def __init__(self, options: Options | None = None):
        self.options = options or Options()

    @classmethod
    @abstractmethod
    def can_handle(cls, url: str) -> bool:
        """Return True if this adapter can handle the given URL."""

    def fetch(self, url: str) -> str:
        """Fetch the page at url and return raw HTML.

        Raises FetchError on HTTP-level failures.
        """
        return fetch_text(url)

    @abstractmethod
    def extract(self, html: str, url: str) -> LyricsWithChords:
        """Parse HTML and return the converted song.

        Raises ExtractError if expected content cannot be found and
        MarkupError if the embedded tab markup is malformed.
        """

    def scrape(self, url: str) -> LyricsWithChords:
        """Convenience method: fetch + extract."""
        html = self.fetch(url)
        return self.extract(html, url)
