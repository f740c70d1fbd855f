import logging
import re
import sys
from pathlib import Path

import click

from .exceptions import ExtractError, FetchError, MarkupError, UnsupportedSiteError
from .models import Options
from .registry import get_adapter
from .render import FORMATTERS
from .transpose import transpose_song


def _slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


def _default_filename(artist: str, title: str, extension: str) -> str:
    return f"{_slugify(artist)}-{_slugify(title)}.{extension}"


@click.command()
@click.argument("url")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <artist>-<title>.<ext>)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.option("--format", "output_format", type=click.Choice(sorted(FORMATTERS)),
              default="chordpro", show_default=True, help="Output format.")
@click.option("-t", "--transpose", "semitones", default=0, show_default=True,
              help="Transpose every chord by N semitones.")
@click.option("--chorus-label", default=Options.chorus_label, show_default=True,
              help="Text that replaces chorus section labels.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
def main(
    url: str,
    output_path: str | None,
    stdout: bool,
    output_format: str,
    semitones: int,
    chorus_label: str,
    verbose: bool,
) -> None:
    """Convert a chord sheet page to normalized lyrics with chords.

    \b
    Supported sites:
      - tabs.ultimate-guitar.com
      - supermusic.cz / supermusic.sk
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    # --- Resolve adapter ---
    try:
        adapter = get_adapter(url, Options(chorus_label=chorus_label))
    except UnsupportedSiteError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Supported sites: tabs.ultimate-guitar.com, supermusic.cz", err=True)
        sys.exit(1)

    # --- Fetch + convert ---
    try:
        song = adapter.scrape(url)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        click.echo(msg, err=True)
        sys.exit(1)
    except (ExtractError, MarkupError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if semitones:
        transpose_song(song, semitones)

    # --- Render ---
    formatter = FORMATTERS[output_format]()
    rendered = formatter.render(song)

    # --- Output ---
    if stdout:
        click.echo(rendered, nl=False)
        return

    dest = (
        Path(output_path)
        if output_path
        else Path(_default_filename(song.artist, song.song_name, formatter.extension))
    )
    dest.write_text(rendered, encoding="utf-8")
    click.echo(f"Written to {dest}")
