"""Per-site chord spelling fixes, applied after realignment.

Each table maps a root spelling used by one site to the spelling the rest of
the package expects.  Rules are tried in order against the start of the chord
root and of every bass note after ``/``; the first match wins.

Internally ``B`` means B flat and ``H`` means B natural (European naming), so
Ultimate Guitar's English ``B``/``Bb`` must be renamed.
"""

import re

from .models import Chord, TextNode

SpellingTable = tuple[tuple[re.Pattern, str], ...]

# Supermusic writes German flats ("Es", "As").  "Esus4" is a suspended E.
SUPERMUSIC_SPELLINGS: SpellingTable = (
    (re.compile(r"^Es(?!us)"), "Eb"),
    (re.compile(r"^As(?!us)"), "Ab"),
)

ULTIMATE_GUITAR_SPELLINGS: SpellingTable = (
    (re.compile(r"^Bb"), "B"),
    (re.compile(r"^B#"), "C"),
    (re.compile(r"^B"), "H"),
)


def normalize_chord(name: str, table: SpellingTable) -> str:
    """Respell the root and bass notes of chord *name* using *table*."""
    return "/".join(_respell(part, table) for part in name.split("/"))


def _respell(note: str, table: SpellingTable) -> str:
    for pattern, replacement in table:
        if pattern.match(note):
            return pattern.sub(replacement, note, count=1)
    return note


def normalize_chords(nodes: list[TextNode], table: SpellingTable) -> list[TextNode]:
    """Return *nodes* with every chord respelled; other nodes are untouched."""
    return [
        Chord(normalize_chord(node.name, table)) if isinstance(node, Chord) else node
        for node in nodes
    ]
