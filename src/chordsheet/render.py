"""Text renderers for a finished :class:`~chordsheet.models.LyricsWithChords`.

ChordPro output::

    {title: Just}
    {artist: Radiohead}

    [C]Can't get the [G]stink off

Node → ChordPro mapping
-----------------------

+------------------------------+--------------------------------------+
| Node                         | Output                               |
+==============================+======================================+
| ``Text``                     | literal, whitespace preserved        |
+------------------------------+--------------------------------------+
| ``Chord``                    | ``[name]``                           |
+------------------------------+--------------------------------------+
| ``Label`` alone on its line  | ``{comment: label}``                 |
+------------------------------+--------------------------------------+
| ``Label`` inside a line      | label text                           |
+------------------------------+--------------------------------------+
| ``Newline``                  | line break                           |
+------------------------------+--------------------------------------+

Usage::

    from chordsheet.render import ChordProFormatter
    text = ChordProFormatter().render(song)
"""

import json
from typing import assert_never

from .exceptions import InvariantViolation
from .hints import editing_hints, hint_to_dict
from .lines import Line, split_lines
from .models import Chord, Label, LyricsWithChords, Newline, Text


def _render_line(line: Line, comment_labels: bool) -> str:
    if comment_labels and len(line) == 1 and isinstance(line[0], Label):
        return f"{{comment: {line[0].text}}}"

    parts: list[str] = []
    for node in line:
        match node:
            case Text(value):
                parts.append(value)
            case Chord(name):
                parts.append(f"[{name}]")
            case Label(text):
                parts.append(text)
            case Newline():
                raise InvariantViolation("Newline inside a split line")
            case _:
                assert_never(node)
    return "".join(parts)


class ChordProFormatter:
    """Render a song to ChordPro (``.cho``) text."""

    extension = "cho"

    def render(self, song: LyricsWithChords) -> str:
        """Return ChordPro text for *song*, ending with a single newline."""
        parts = [f"{{title: {song.song_name}}}", f"{{artist: {song.artist}}}", ""]
        parts.extend(_render_line(line, comment_labels=True) for line in split_lines(song.text))
        return "\n".join(parts).rstrip("\n") + "\n"


class PlainTextFormatter:
    """Render a song as plain text with inline ``[chord]`` markers."""

    extension = "txt"

    def render(self, song: LyricsWithChords) -> str:
        parts = [f"{song.artist} - {song.song_name}", ""]
        parts.extend(_render_line(line, comment_labels=False) for line in split_lines(song.text))
        return "\n".join(parts).rstrip("\n") + "\n"


class JsonFormatter:
    """Render a song as JSON, see :meth:`LyricsWithChords.to_dict`."""

    extension = "json"

    def render(self, song: LyricsWithChords) -> str:
        return json.dumps(song.to_dict(), ensure_ascii=False, indent=2) + "\n"


class HintsFormatter:
    """Render the editing hints of a song body as a JSON list.

    Each entry is ``{"type": "slot"}`` for a place a chord may be dropped, or
    ``{"type": "node", "node": {...}}`` for an existing node.
    """

    extension = "hints.json"

    def render(self, song: LyricsWithChords) -> str:
        hints = [hint_to_dict(hint) for hint in editing_hints(song.text)]
        return json.dumps(hints, ensure_ascii=False, indent=2) + "\n"


FORMATTERS = {
    "chordpro": ChordProFormatter,
    "text": PlainTextFormatter,
    "json": JsonFormatter,
    "hints": HintsFormatter,
}
