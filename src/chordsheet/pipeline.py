"""End-to-end conversion of raw site markup into a :class:`LyricsWithChords`.

Nothing here performs I/O; adapters fetch and extract the markup first.
"""

import logging

from .lines import join_lines, split_lines
from .markup import parse_bracket_markup, parse_inline_markup
from .models import LyricsWithChords, Options
from .normalize import SUPERMUSIC_SPELLINGS, ULTIMATE_GUITAR_SPELLINGS, normalize_chords
from .realign import merge_chord_lines, realign_lines

logger = logging.getLogger(__name__)


def normalize_line_endings(markup: str) -> str:
    return markup.replace("\r\n", "\n")


def convert_ultimate_guitar(
    markup: str,
    options: Options,
    artist: str = "",
    song_name: str = "",
) -> LyricsWithChords:
    """Convert Ultimate Guitar tab markup (chord lines above lyric lines).

    *markup* must already have its ``[tab]``/``[/tab]`` wrappers removed.

    Raises:
        MarkupError: if *markup* is not valid bracket-everything markup.
    """
    nodes = parse_bracket_markup(normalize_line_endings(markup))
    lines = split_lines(nodes, keep_empty=False)
    logger.debug("Parsed %d nodes into %d non-empty lines", len(nodes), len(lines))

    merged = merge_chord_lines(lines, options)
    text = normalize_chords(join_lines(merged), ULTIMATE_GUITAR_SPELLINGS)
    return LyricsWithChords(text=text, artist=artist, song_name=song_name)


def convert_supermusic(markup: str, artist: str, song_name: str) -> LyricsWithChords:
    """Convert Supermusic text-export markup (chords typed inline).

    Raises:
        MarkupError: if *markup* is not valid inline markup.
    """
    nodes = parse_inline_markup(normalize_line_endings(markup))
    lines = split_lines(nodes)
    logger.debug("Parsed %d nodes into %d lines", len(nodes), len(lines))

    text = normalize_chords(join_lines(realign_lines(lines)), SUPERMUSIC_SPELLINGS)
    return LyricsWithChords(text=text, artist=artist, song_name=song_name)
