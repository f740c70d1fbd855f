"""Split a flat node sequence into lines and join it back."""

from .models import NEWLINE, Newline, Text, TextNode

Line = list[TextNode]


def split_lines(nodes: list[TextNode], keep_empty: bool = True) -> list[Line]:
    """Split *nodes* at every :class:`Newline`.

    Like ``str.split``, ``n`` newlines give ``n + 1`` lines, so
    ``join_lines(split_lines(nodes)) == nodes``.  With ``keep_empty=False``
    lines holding no nodes at all are dropped.
    """
    lines: list[Line] = []
    line: Line = []
    for node in nodes:
        if isinstance(node, Newline):
            lines.append(line)
            line = []
        else:
            line.append(node)
    lines.append(line)

    if not keep_empty:
        lines = [line for line in lines if line]
    return lines


def join_lines(lines: list[Line]) -> list[TextNode]:
    """Concatenate *lines* with one :class:`Newline` between each pair."""
    nodes: list[TextNode] = []
    for i, line in enumerate(lines):
        if i:
            nodes.append(NEWLINE)
        nodes.extend(line)
    return nodes


def line_text(line: Line) -> str:
    """Concatenated text of a line; chords and labels contribute nothing."""
    return "".join(node.value for node in line if isinstance(node, Text))
