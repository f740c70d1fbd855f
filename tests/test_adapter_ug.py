import html
import json

import pytest

from chordsheet.adapters.ultimate_guitar import UltimateGuitarAdapter, strip_tab_tags
from chordsheet.exceptions import ExtractError, MarkupError
from chordsheet.models import Chord, Label, Options, Text

TEST_URL = "https://tabs.ultimate-guitar.com/tab/radiohead/just-chords-196011"

CONTENT = (
    "[Chorus]\r\n"
    "[tab][ch]C[/ch]    [ch]G[/ch]\r\n"
    "Hello world[/tab]\r\n"
)


def _store_page(content: str = CONTENT) -> str:
    data = {
        "store": {
            "page": {
                "data": {
                    "tab": {"song_name": "Just", "artist_name": "Radiohead"},
                    "tab_view": {"wiki_tab": {"content": content}},
                }
            }
        }
    }
    attr = html.escape(json.dumps(data), quote=True)
    return f'<html><body><div class="js-store" data-content="{attr}"></div></body></html>'


def _next_data_page(content: str = CONTENT) -> str:
    data = {
        "props": {
            "pageProps": {
                "data": {
                    "tab_view": {
                        "song_name": "Legacy",
                        "artist_name": "Band",
                        "wiki_tab": {"content": content},
                    }
                }
            }
        }
    }
    return f'<script id="__NEXT_DATA__" type="application/json">{json.dumps(data)}</script>'


# ---------------------------------------------------------------------------
# can_handle
# ---------------------------------------------------------------------------


def test_can_handle_ug_url():
    assert UltimateGuitarAdapter.can_handle(TEST_URL)


def test_cannot_handle_supermusic_url():
    assert not UltimateGuitarAdapter.can_handle("https://supermusic.cz/skupina.php?idpiesne=1")


# ---------------------------------------------------------------------------
# extract
# ---------------------------------------------------------------------------


def test_strip_tab_tags():
    assert strip_tab_tags("[tab]a[/tab]\n[ch]C[/ch]") == "a\n[ch]C[/ch]"


def test_extract_metadata():
    song = UltimateGuitarAdapter().extract(_store_page(), TEST_URL)
    assert song.artist == "Radiohead"
    assert song.song_name == "Just"


def test_extract_merges_chords_into_lyrics():
    song = UltimateGuitarAdapter().extract(_store_page(), TEST_URL)
    assert song.text[-4:] == [Chord("C"), Text("Hello "), Chord("G"), Text("world")]


def test_extract_uses_adapter_options():
    song = UltimateGuitarAdapter(Options(chorus_label="R:")).extract(_store_page(), TEST_URL)
    assert Label("R:") in song.text


def test_extract_legacy_next_data():
    song = UltimateGuitarAdapter().extract(_next_data_page(), TEST_URL)
    assert song.song_name == "Legacy"
    assert song.artist == "Band"
    assert Chord("G") in song.text


def test_extract_decodes_entity_encoded_data_content():
    page = (
        '<div class="js-store" data-content="{&quot;store&quot;: {&quot;page&quot;: '
        '{&quot;data&quot;: {&quot;tab&quot;: {&quot;artist_name&quot;: '
        '&quot;Simon &amp; Garfunkel&quot;, &quot;song_name&quot;: &quot;Cecilia&quot;}, '
        '&quot;tab_view&quot;: {&quot;wiki_tab&quot;: {&quot;content&quot;: '
        '&quot;[ch]C[/ch]\\nLa&quot;}}}}}}"></div>'
    )
    song = UltimateGuitarAdapter().extract(page, TEST_URL)
    assert song.artist == "Simon & Garfunkel"
    assert song.song_name == "Cecilia"
    assert song.text == [Chord("C"), Text("La")]


# ---------------------------------------------------------------------------
# extract: error cases
# ---------------------------------------------------------------------------


def test_extract_missing_data_raises_extract_error():
    with pytest.raises(ExtractError):
        UltimateGuitarAdapter().extract("<html><body>nothing</body></html>", TEST_URL)


def test_extract_empty_content_raises_extract_error():
    with pytest.raises(ExtractError):
        UltimateGuitarAdapter().extract(_store_page(content=""), TEST_URL)


def test_extract_malformed_json_raises_extract_error():
    page = '<script id="__NEXT_DATA__" type="application/json">not json</script>'
    with pytest.raises(ExtractError):
        UltimateGuitarAdapter().extract(page, TEST_URL)


def test_extract_malformed_markup_raises_markup_error():
    with pytest.raises(MarkupError):
        UltimateGuitarAdapter().extract(_store_page(content="[ch]C\nla"), TEST_URL)
