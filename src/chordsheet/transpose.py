"""Transposition of chords by a number of semitones.

A chord is ``<root><suffix>`` optionally followed by ``/<bass>`` parts.  The
root is recognised from a two-character table first, then a one-character
table; after shifting it is always re-spelled from :data:`CANONICAL_ROOTS`, so
``D#`` comes back as ``Eb`` even when shifted by an octave.
"""

from .exceptions import UnknownChordRootError
from .models import Chord, LyricsWithChords, TextNode

# Checked in order, before the natural notes.
_TWO_CHAR_ROOTS: tuple[tuple[str, int], ...] = (
    ("C#", 1),
    ("D#", 3),
    ("Eb", 3),
    ("F#", 6),
    ("G#", 8),
    ("Ab", 8),
    ("A#", 10),
    ("Bb", 10),
)

# "Ebsus"/"Absus" are read as E/A followed by "sus".  Kept for compatibility
# with documents produced before the flat spellings were normalized.
_SUS_ROOTS = {"Ebsu": 4, "Absu": 9}

_NATURAL_ROOTS = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 10, "H": 11}

CANONICAL_ROOTS = ("C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "B", "H")


def split_root(chord: str) -> tuple[int, str]:
    """Return ``(semitone, suffix)`` for a chord without a bass part.

    Raises:
        UnknownChordRootError: if the root is in neither table.
    """
    for prefix, semitone in _SUS_ROOTS.items():
        if chord.startswith(prefix):
            return semitone, chord[2:]
    for prefix, semitone in _TWO_CHAR_ROOTS:
        if chord.startswith(prefix):
            return semitone, chord[2:]
    try:
        return _NATURAL_ROOTS[chord[:1]], chord[1:]
    except KeyError:
        raise UnknownChordRootError(chord) from None


def _transpose_part(part: str, modifier: int) -> str:
    semitone, suffix = split_root(part)
    return CANONICAL_ROOTS[(semitone + modifier) % 12] + suffix


def transpose_chord(chord: str, modifier: int) -> str:
    """Shift *chord* by *modifier* semitones.

    The root and every bass note after ``/`` are shifted independently:

        >>> transpose_chord("C/E", 2)
        'D/F#'

    Every part is re-spelled, even for a zero *modifier*: ``D#`` becomes ``Eb``.
    """
    return "/".join(_transpose_part(part, modifier) for part in chord.split("/"))


def transpose_nodes(nodes: list[TextNode], modifier: int) -> list[TextNode]:
    return [
        Chord(transpose_chord(node.name, modifier)) if isinstance(node, Chord) else node
        for node in nodes
    ]


def transpose_song(song: LyricsWithChords, modifier: int) -> None:
    """Shift every chord of *song* by *modifier* semitones, in place."""
    song.text = transpose_nodes(song.text, modifier)
