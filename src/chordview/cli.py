import json
import logging
import re
import sys
from pathlib import Path

import click

from .exceptions import FetchError, ParseError, UnknownKeyError, UnsupportedSourceError
from .models import Song
from .notes import normalize_note
from .registry import get_source
from .render import ViewRenderer
from .transpose import transpose_lyrics

logger = logging.getLogger(__name__)

# {name: value} directive on a line of its own
_DIRECTIVE_RE = r"^\s*\{\s*%s\s*:\s*([^}]*)\}\s*$"


def _find_directive(text: str, name: str) -> str | None:
    """Return the value of the first ``{name: ...}`` directive in *text*, if any."""
    m = re.search(_DIRECTIVE_RE % re.escape(name), text, re.IGNORECASE | re.MULTILINE)
    if not m:
        return None
    return m.group(1).strip() or None


def _check_key(key: str | None) -> None:
    if key is not None and normalize_note(key) is None:
        raise UnknownKeyError(key)


def _title_from_location(location: str) -> str:
    """Derive a song title from a file name or URL slug."""
    stem = location.rstrip("/").split("/")[-1].rsplit(".", 1)[0]
    return stem.replace("-", " ").replace("_", " ").title()


@click.command()
@click.argument("source")
@click.option("--from", "from_key", default=None, metavar="KEY", envvar="CHORDVIEW_FROM_KEY",
              help="Key the song is written in (default: its {key: ...} directive).")
@click.option("--to", "to_key", default=None, metavar="KEY", envvar="CHORDVIEW_TO_KEY",
              help="Key to transpose to.")
@click.option("--raw", is_flag=True, default=False,
              help="Print the transposed ChordPro text instead of the chord sheet.")
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Print the view lines as JSON.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
def main(source: str, from_key: str | None, to_key: str | None, raw: bool, as_json: bool,
         output_path: str | None, verbose: bool) -> None:
    """Show a ChordPro-style song as a chord sheet, optionally transposed.

    \b
    SOURCE is a song file or an http(s) URL.  Keys are note names:
      C C# Db D D# Eb E F F# Gb G G# Ab A A# Bb B
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # --- Validate keys ---
    try:
        _check_key(from_key)
        _check_key(to_key)
    except UnknownKeyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Read ---
    try:
        text = get_source(source).read(source)
    except UnsupportedSourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except FetchError as exc:
        msg = f"Error: Could not read {exc.location}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        click.echo(msg, err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    song = Song(
        title=_find_directive(text, "title") or _title_from_location(source),
        lyrics=text,
        original_key=from_key or _find_directive(text, "key"),
        artist=_find_directive(text, "artist"),
    )
    if to_key and not song.original_key:
        logger.warning("No original key for %s; showing it untransposed", source)

    # --- Render ---
    if raw:
        key = song.effective_key(to_key)
        result = transpose_lyrics(song.lyrics, song.original_key, key) if key else song.lyrics
    elif as_json:
        result = json.dumps([line.to_dict() for line in song.view(to_key)], ensure_ascii=False, indent=2) + "\n"
    else:
        result = ViewRenderer().render_song(song, to_key)

    # --- Output ---
    if not output_path:
        click.echo(result, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(result, encoding="utf-8")
    click.echo(f"Written to {dest}")
