class ChordsheetError(Exception):
    """Base exception for chordsheet."""


class FetchError(ChordsheetError):
    """Raised when an HTTP request fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ExtractError(ChordsheetError):
    """Raised when expected content cannot be extracted from a page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Extract error for {url}: {reason}")


class MarkupError(ChordsheetError):
    """Raised when tab markup does not match its dialect's grammar.

    ``remaining`` is the unparsed suffix starting at the offending token.
    """

    def __init__(self, dialect: str, rule: str, remaining: str):
        self.dialect = dialect
        self.rule = rule
        self.remaining = remaining
        snippet = remaining[:40].replace("\n", "\\n")
        super().__init__(f"{dialect} markup: {rule} at: {snippet!r}")


class UnsupportedSiteError(ChordsheetError):
    """Raised when no adapter matches the given URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No adapter found for URL: {url}")


class InvariantViolation(RuntimeError):
    """An internal assumption about line shape was broken.

    Not a user error; callers are not expected to recover from it.
    """


class UnknownChordRootError(InvariantViolation):
    """Raised when a chord's root is not a known note name."""

    def __init__(self, chord: str):
        self.chord = chord
        super().__init__(f"Cannot determine root of chord {chord!r}")
