"""Tokenizers for the two supported tab markup dialects.

Both take markup with site wrapper tags already stripped and line endings
normalized to ``\\n`` and return a flat :data:`~chordsheet.models.TextNode`
list.

Inline dialect (Supermusic)::

    [Am]Hello [C, G]world       -> every non-empty [...] span is a chord

Bracket-everything dialect (Ultimate Guitar)::

    [Verse 1]                   -> Label("Verse 1")
    [ch]Am[/ch]   [ch]G[/ch]    -> Chord("Am"), Text("   "), Chord("G")

Tokens are tried in a fixed priority order at every position; the first one
that matches wins.  When none matches, :class:`~chordsheet.exceptions.MarkupError`
is raised with the remaining input and no partial result is returned.
"""

import re

from .exceptions import MarkupError
from .models import NEWLINE, Chord, Label, Text, TextNode

INLINE = "inline"
BRACKET = "bracket"

# ---------------------------------------------------------------------------
# Token regexes
# ---------------------------------------------------------------------------

# A run of characters with no bracket and no newline.
_TEXT_RE = re.compile(r"[^\[\]\n]+")

# [anything] on one line, non-empty.
_BRACKET_RE = re.compile(r"\[([^\[\]\n]+)\]")

_NEWLINE_RE = re.compile(r"\n")

# Ultimate Guitar explicit chord tag.  Once "[ch]" is seen the rest must be a
# name followed by "[/ch]", otherwise the parse fails rather than backtracking
# into a label.
_CH_OPEN = "[ch]"
_CH_BODY_RE = re.compile(r"([^\[\]\n]+)\[/ch\]")

# "[C, G]" lists simultaneous chords in the inline dialect.
_CHORD_LIST_SEPARATOR = ", "


# ---------------------------------------------------------------------------
# Inline dialect
# ---------------------------------------------------------------------------


def parse_inline_markup(markup: str) -> list[TextNode]:
    """Parse inline-dialect markup where every ``[...]`` span is a chord.

    A chord span holding a comma-separated list is exploded into adjacent
    chords separated by a single-space :class:`Text`::

        >>> parse_inline_markup("[C, G]")
        [Chord(name='C'), Text(value=' '), Chord(name='G')]

    Raises:
        MarkupError: on an empty or unterminated bracket, or a stray ``]``.
    """
    nodes: list[TextNode] = []
    pos = 0
    while pos < len(markup):
        if m := _BRACKET_RE.match(markup, pos):
            nodes.extend(_explode_chord_list(m.group(1)))
        elif m := _NEWLINE_RE.match(markup, pos):
            nodes.append(NEWLINE)
        elif m := _TEXT_RE.match(markup, pos):
            nodes.append(Text(m.group()))
        else:
            raise MarkupError(INLINE, _describe_failure(markup[pos]), markup[pos:])
        pos = m.end()
    return nodes


def _explode_chord_list(content: str) -> list[TextNode]:
    if "," not in content:
        return [Chord(content)]
    nodes: list[TextNode] = []
    for i, name in enumerate(content.split(_CHORD_LIST_SEPARATOR)):
        if i:
            nodes.append(Text(" "))
        nodes.append(Chord(name))
    return nodes


# ---------------------------------------------------------------------------
# Bracket-everything dialect
# ---------------------------------------------------------------------------


def parse_bracket_markup(markup: str) -> list[TextNode]:
    """Parse bracket-everything markup: ``[ch]X[/ch]`` chords, other ``[...]`` labels.

    Raises:
        MarkupError: on a ``[ch]`` tag without a name and closing ``[/ch]``,
            an empty or unterminated bracket, or a stray ``]``.
    """
    nodes: list[TextNode] = []
    pos = 0
    while pos < len(markup):
        if markup.startswith(_CH_OPEN, pos):
            m = _CH_BODY_RE.match(markup, pos + len(_CH_OPEN))
            if m is None:
                raise MarkupError(
                    BRACKET, "chord: expected a chord name closed by [/ch]", markup[pos:]
                )
            nodes.append(Chord(m.group(1)))
        elif m := _BRACKET_RE.match(markup, pos):
            nodes.append(Label(m.group(1)))
        elif m := _NEWLINE_RE.match(markup, pos):
            nodes.append(NEWLINE)
        elif m := _TEXT_RE.match(markup, pos):
            nodes.append(Text(m.group()))
        else:
            raise MarkupError(BRACKET, _describe_failure(markup[pos]), markup[pos:])
        pos = m.end()
    return nodes


def _describe_failure(char: str) -> str:
    if char == "[":
        return "bracket: expected a non-empty span closed by ']' on the same line"
    return "text: unexpected ']' without a matching '['"
