"""Chord/lyric realignment.

Source sheets record *where* a chord is played only as a column: either the
column of a chord on the line above the lyric (two-line dialect) or the column
the chord was typed at inside the lyric (inline dialect).  Neither guarantees
that the chord lands on a word boundary.  Everything here moves chords to the
nearest boundary of the lyric text:

  1. word_boundaries():        candidate offsets: start and end of each word
  2. nearest_boundary():       closest candidate to a column, lowest on ties
  3. insert_chord_at():        splice a chord into a line at a text offset
  4. merge_chord_lines():      two-line dialect: chord line + lyric line → one
  5. realign_line():           inline dialect: move chords that sit mid-word

Offsets are measured over the concatenated :class:`~chordsheet.models.Text`
content of a line; chords and labels have zero width.
"""

import logging
from typing import assert_never

from .exceptions import InvariantViolation
from .lines import Line, line_text
from .models import Chord, Label, Newline, Options, Text

logger = logging.getLogger(__name__)

# Width assumed for every chord when walking a chord line.  Chord names are not
# all three characters wide; alignment of existing content depends on this
# exact value.
CHORD_COLUMN_WIDTH = 3

_EMPTY = Text("")
_SPACE = Text(" ")


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def word_boundaries(text: str) -> list[int]:
    """Return the start and end offset of every space-delimited word in *text*.

    Offsets are ascending and deduplicated.  Runs of spaces yield the empty
    words between them, so every gap position is a candidate too.

        >>> word_boundaries("Hello world")
        [0, 5, 6, 11]
    """
    boundaries: list[int] = []
    index = 0
    for i, word in enumerate(text.split(" ")):
        if i:
            index += 1
        for offset in (index, index + len(word)):
            if not boundaries or boundaries[-1] != offset:
                boundaries.append(offset)
        index += len(word)
    return boundaries


def nearest_boundary(boundaries: list[int], column: int) -> int:
    """Return the boundary closest to *column*; the lower one wins a tie."""
    return min(boundaries, key=lambda offset: abs(offset - column))


def insert_chord_at(line: Line, offset: int, chord: Chord) -> None:
    """Insert *chord* into *line* at text *offset*, in place.

    The text node spanning *offset* is split in two around the chord.  If only
    whitespace would follow the chord inside that node, the chord is instead
    placed after the node, behind any chords already sitting there, so that it
    stays attached to the next word rather than to the gap before it.

    Raises:
        InvariantViolation: if *offset* lies beyond the line's text.
    """
    start = 0
    for i, node in enumerate(line):
        if not isinstance(node, Text):
            continue
        end = start + len(node.value)
        if start <= offset <= end:
            left = node.value[: offset - start]
            right = node.value[offset - start :]
            if not right.rstrip():
                j = i + 1
                while j < len(line) and isinstance(line[j], Chord):
                    j += 1
                line.insert(j, chord)
            else:
                line[i : i + 1] = [Text(left), chord, Text(right)]
            return
        start = end

    if offset == start == 0:
        # Line without any text: the only offset is its end.
        line.append(chord)
        return
    raise InvariantViolation(f"Offset {offset} is beyond line text of length {start}")


def space_adjacent_chords(line: Line) -> Line:
    """Return *line* with a single-space text between every two adjacent chords."""
    spaced: Line = []
    for node in line:
        if spaced and isinstance(node, Chord) and isinstance(spaced[-1], Chord):
            spaced.append(_SPACE)
        spaced.append(node)
    return spaced


def _drop_empty_text(line: Line) -> Line:
    return [node for node in line if node != _EMPTY]


# ---------------------------------------------------------------------------
# Two-line dialect (chord line above lyric line)
# ---------------------------------------------------------------------------


def is_chorus_label(label: str) -> bool:
    return "chorus" in label.lower()


def merge_chord_lines(lines: list[Line], options: Options) -> list[Line]:
    """Merge chord-above-lyric line pairs into single lines.

    * A line carrying a label becomes a blank line.  Chorus labels are kept as
      ``Label(options.chorus_label)`` after that blank line.
    * A line carrying any chord is a chord line and is reduced to its chords,
      one space apart.
    * A lyric line directly after a chord line replaces both: each chord is
      placed at the lyric word boundary nearest its column.
    * Any other line is kept as is.
    """
    merged: list[Line] = []
    chord_line: Line | None = None

    for line in lines:
        label = next((node for node in line if isinstance(node, Label)), None)
        if label is not None:
            merged.append([])
            if is_chorus_label(label.text):
                merged.append([Label(options.chorus_label)])
            chord_line = None
            continue

        if any(isinstance(node, Chord) for node in line):
            merged.append(space_adjacent_chords([n for n in line if isinstance(n, Chord)]))
            chord_line = line
            continue

        if chord_line is None:
            merged.append(line)
            continue

        merged[-1] = merge_chord_and_lyric(chord_line, line)
        chord_line = None

    return merged


def merge_chord_and_lyric(chord_line: Line, lyric_line: Line) -> Line:
    """Place the chords of *chord_line* into the text of *lyric_line*.

    A chord's column is the text width before it on the chord line, with each
    earlier chord counted as :data:`CHORD_COLUMN_WIDTH` columns.

    Raises:
        InvariantViolation: if *chord_line* holds a label or newline.
    """
    text = line_text(lyric_line)
    boundaries = word_boundaries(text)
    merged: Line = [Text(text)]

    column = 0
    for node in chord_line:
        match node:
            case Text(value):
                column += len(value)
            case Chord():
                insert_chord_at(merged, nearest_boundary(boundaries, column), node)
                column += CHORD_COLUMN_WIDTH
            case Label() | Newline():
                raise InvariantViolation(f"Unexpected {node!r} in chord line")
            case _:
                assert_never(node)

    return space_adjacent_chords(_drop_empty_text(merged))


# ---------------------------------------------------------------------------
# Inline dialect (chords typed inside the lyric line)
# ---------------------------------------------------------------------------


def _starts_with_space(node) -> bool:
    return isinstance(node, Text) and node.value[:1].isspace()


def _ends_with_space(node) -> bool:
    return isinstance(node, Text) and node.value[-1:].isspace()


def _followed_by_space(line: Line, i: int) -> bool:
    last = len(line) - 1
    if i == last:
        return True
    following = line[i + 1]
    if isinstance(following, Chord):
        return i + 1 == last or _starts_with_space(line[i + 2])
    return _starts_with_space(following)


def is_misplaced(line: Line, i: int) -> bool:
    """Whether the chord at ``line[i]`` needs moving to a word boundary.

    A chord is in place when whitespace (or the line start) precedes it and
    whitespace (or the line end, or another chord followed by whitespace)
    follows it.
    """
    preceded = i == 0 or _ends_with_space(line[i - 1])
    return not (preceded and _followed_by_space(line, i))


def realign_line(line: Line) -> Line:
    """Move misplaced chords of an inline-dialect line to word boundaries.

    Each misplaced chord is removed and reinserted at the boundary nearest the
    text width that preceded it.  Empty text nodes are dropped and adjacent
    chords are spaced apart.

    Raises:
        InvariantViolation: if *line* holds a label or newline.
    """
    boundaries = word_boundaries(line_text(line))
    kept: Line = []
    moved: list[tuple[int, Chord]] = []

    column = 0
    for i, node in enumerate(line):
        match node:
            case Text(value):
                column += len(value)
                kept.append(node)
            case Chord():
                if is_misplaced(line, i):
                    moved.append((nearest_boundary(boundaries, column), node))
                else:
                    kept.append(node)
            case Label() | Newline():
                raise InvariantViolation(f"Unexpected {node!r} in inline line")
            case _:
                assert_never(node)

    for offset, chord in moved:
        logger.debug("Moving chord %s to offset %d", chord.name, offset)
        insert_chord_at(kept, offset, chord)

    return space_adjacent_chords(_drop_empty_text(kept))


def realign_lines(lines: list[Line]) -> list[Line]:
    return [realign_line(line) for line in lines]
