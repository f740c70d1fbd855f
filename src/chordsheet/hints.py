"""Editing hints: where a chord editor may let the user drop a chord.

Every word of every text node is surrounded by :class:`ChordSlot` markers, as
is every chord; repeated slots and repeated identical text hints collapse into
one.
"""

from dataclasses import dataclass
from typing import assert_never

from .models import Chord, Label, Newline, Text, TextNode, node_to_dict


@dataclass(frozen=True)
class NodeHint:
    node: TextNode


@dataclass(frozen=True)
class ChordSlot:
    pass


EditingHint = NodeHint | ChordSlot

_SLOT = ChordSlot()
_SPACE_HINT = NodeHint(Text(" "))


def _expand(node: TextNode) -> list[EditingHint]:
    match node:
        case Text(value):
            hints: list[EditingHint] = []
            parts = value.split(" ")
            for i, part in enumerate(parts):
                if not part.strip():
                    hints.append(_SPACE_HINT)
                    continue
                hints += [_SLOT, NodeHint(Text(part))]
                if i != len(parts) - 1:
                    hints += [_SLOT, _SPACE_HINT]
                hints.append(_SLOT)
            return hints
        case Chord():
            return [_SLOT, NodeHint(node), _SLOT]
        case Label() | Newline():
            return [NodeHint(node)]
        case _:
            assert_never(node)


def _is_duplicate(previous: EditingHint, hint: EditingHint) -> bool:
    if isinstance(previous, ChordSlot) or isinstance(hint, ChordSlot):
        return isinstance(previous, ChordSlot) and isinstance(hint, ChordSlot)
    if isinstance(previous.node, Text) and isinstance(hint.node, Text):
        return previous.node.value == hint.node.value
    return False


def editing_hints(nodes: list[TextNode]) -> list[EditingHint]:
    hints: list[EditingHint] = []
    for node in nodes:
        for hint in _expand(node):
            if hints and _is_duplicate(hints[-1], hint):
                continue
            hints.append(hint)
    return hints


def hint_to_dict(hint: EditingHint) -> dict:
    match hint:
        case ChordSlot():
            return {"type": "slot"}
        case NodeHint(node):
            return {"type": "node", "node": node_to_dict(node)}
        case _:
            assert_never(hint)
