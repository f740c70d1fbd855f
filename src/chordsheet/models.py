"""Document model for chord sheets.

A song body is a flat sequence of :data:`TextNode` values.  Lines are separated
by exactly one :class:`Newline`; a chord has no position of its own, it sits
where its index among its siblings puts it.

Example::

    [Chord("C"), Text("Hello"), Chord("G"), Text(" world"), Newline()]
"""

from dataclasses import dataclass
from typing import assert_never


@dataclass(frozen=True)
class Text:
    """Literal lyric content.  Leading and trailing whitespace is significant."""

    value: str


@dataclass(frozen=True)
class Chord:
    """A chord symbol such as ``Am7`` or ``G/B``."""

    name: str


@dataclass(frozen=True)
class Label:
    """A section marker taken from non-chord bracket markup, e.g. ``Chorus``."""

    text: str


@dataclass(frozen=True)
class Newline:
    """Line separator."""


TextNode = Text | Chord | Label | Newline

NEWLINE = Newline()


@dataclass(frozen=True)
class Options:
    """Labelling options for the two-line (Ultimate Guitar) conversion."""

    chorus_label: str = "®:"


@dataclass
class LyricsWithChords:
    """A whole song: metadata plus the node sequence of its body."""

    text: list[TextNode]
    artist: str = ""
    song_name: str = ""

    def to_dict(self) -> dict:
        return {
            "artist": self.artist,
            "song_name": self.song_name,
            "text": [node_to_dict(node) for node in self.text],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LyricsWithChords":
        return cls(
            text=[node_from_dict(item) for item in data.get("text", [])],
            artist=data.get("artist", ""),
            song_name=data.get("song_name", ""),
        )


def node_to_dict(node: TextNode) -> dict:
    match node:
        case Text(value):
            return {"type": "text", "value": value}
        case Chord(name):
            return {"type": "chord", "value": name}
        case Label(text):
            return {"type": "label", "value": text}
        case Newline():
            return {"type": "newline"}
        case _:
            assert_never(node)


def node_from_dict(data: dict) -> TextNode:
    kind = data.get("type")
    if kind == "text":
        return Text(data["value"])
    if kind == "chord":
        return Chord(data["value"])
    if kind == "label":
        return Label(data["value"])
    if kind == "newline":
        return NEWLINE
    raise ValueError(f"Unknown node type: {kind!r}")
