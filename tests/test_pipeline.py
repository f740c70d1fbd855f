import pytest

from chordsheet.exceptions import MarkupError
from chordsheet.models import NEWLINE, Chord, Label, Options, Text
from chordsheet.pipeline import convert_supermusic, convert_ultimate_guitar

# ---------------------------------------------------------------------------
# Ultimate Guitar (chord line above lyric line)
# ---------------------------------------------------------------------------

UG_MARKUP = (
    "[Verse 1]\r\n"
    "[ch]C[/ch]    [ch]G[/ch]\r\n"
    "Hello world\r\n"
    "\r\n"
    "[Chorus]\r\n"
    "[ch]Bm[/ch]\r\n"
    "La la\r\n"
)


def test_ug_full_conversion():
    song = convert_ultimate_guitar(UG_MARKUP, Options(), artist="Artist", song_name="Song")
    assert song.artist == "Artist"
    assert song.song_name == "Song"
    assert song.text == [
        NEWLINE,
        Chord("C"),
        Text("Hello "),
        Chord("G"),
        Text("world"),
        NEWLINE,
        NEWLINE,
        Label("®:"),
        NEWLINE,
        Chord("Hm"),
        Text("La la"),
    ]


def test_ug_custom_chorus_label():
    song = convert_ultimate_guitar("[Chorus]\nLa\n", Options(chorus_label="Ref:"))
    assert song.text == [NEWLINE, Label("Ref:"), NEWLINE, Text("La")]


def test_ug_chord_only_line():
    song = convert_ultimate_guitar("[ch]Am[/ch]   [ch]Bb[/ch]", Options())
    assert song.text == [Chord("Am"), Text(" "), Chord("B")]


def test_ug_blank_lines_dropped():
    song = convert_ultimate_guitar("\n\nOne\n\n\nTwo\n", Options())
    assert song.text == [Text("One"), NEWLINE, Text("Two")]


def test_ug_markup_error_propagates():
    with pytest.raises(MarkupError):
        convert_ultimate_guitar("[ch]C\nHello", Options())


# ---------------------------------------------------------------------------
# Supermusic (chords inline)
# ---------------------------------------------------------------------------


def test_supermusic_chords_already_on_word_starts():
    song = convert_supermusic("[C]Hello[G] world\n", "Artist", "Song")
    assert song.text == [Chord("C"), Text("Hello"), Chord("G"), Text(" world"), NEWLINE]
    assert (song.artist, song.song_name) == ("Artist", "Song")


def test_supermusic_mid_word_chord_moved():
    song = convert_supermusic("Ahoj sv[Am]ete", "A", "S")
    assert song.text == [Text("Ahoj "), Chord("Am"), Text("sv"), Text("ete")]


def test_supermusic_flats_respelled():
    song = convert_supermusic("[Es]Ahoj [As7]svet\n[Esus4]x", "A", "S")
    assert song.text == [
        Chord("Eb"),
        Text("Ahoj "),
        Chord("Ab7"),
        Text("svet"),
        NEWLINE,
        Chord("Esus4"),
        Text("x"),
    ]


def test_supermusic_chord_list():
    song = convert_supermusic("[C, G]\nla", "A", "S")
    assert song.text == [Chord("C"), Text(" "), Chord("G"), NEWLINE, Text("la")]


def test_supermusic_blank_lines_kept():
    song = convert_supermusic("a\r\n\r\nb", "A", "S")
    assert song.text == [Text("a"), NEWLINE, NEWLINE, Text("b")]


def test_supermusic_markup_error_propagates():
    with pytest.raises(MarkupError):
        convert_supermusic("[Am", "A", "S")


# ---------------------------------------------------------------------------
# Offsets count characters, not encoded bytes
# ---------------------------------------------------------------------------


def test_ug_columns_counted_in_characters():
    # G sits at column 3 + 8 = 11; nearest boundary is the start of "jahody" (10).
    song = convert_ultimate_guitar("[ch]C[/ch]        [ch]G[/ch]\nČerešne a jahody", Options())
    assert song.text == [Chord("C"), Text("Čerešne a "), Chord("G"), Text("jahody")]


def test_supermusic_columns_counted_in_characters():
    # G typed at column 14, one past the start of "dobrý" (13).
    song = convert_supermusic("Krásne ráno, d[G]obrý deň", "A", "S")
    assert song.text == [Text("Krásne ráno, "), Chord("G"), Text("d"), Text("obrý deň")]
