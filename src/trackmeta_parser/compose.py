import re
from typing import Optional

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.models import ExtractionResult

ILLEGAL_FILENAME_CHARS = ParserConfig().illegal_filename_chars


def display_artists(result: ExtractionResult) -> str:
    """All artist names, in order, joined with ", ". Roles are not rendered."""
    return ", ".join(result.names())


def display_title(result: ExtractionResult) -> str:
    """
    The stored title, with the remix credit put back as a suffix:
    "Song" + [E, F remixers, Flip] -> "Song (E & F Flip)".

    The credit is rendered as written, so a remixer who is also a main
    artist still shows: "Artist - Song (Artist Remix)" -> "Song (Artist Remix)".
    """
    if result.remix is not None:
        names = list(result.remix.names)
    else:
        names = [a.name for a in result.remixers]
    if not names:
        return result.title
    credit = " & ".join(names)
    return f"{result.title} ({credit} {result.remix_type.value})".strip()


def sanitize_file_name(name: str, illegal_chars: Optional[str] = None) -> str:
    chars = ILLEGAL_FILENAME_CHARS if illegal_chars is None else illegal_chars
    if not chars:
        return name
    return re.sub(f"[{re.escape(chars)}]+", "", name)


def compose_file_name(result: ExtractionResult, extension: str = "mp3",
                      illegal_chars: Optional[str] = None) -> str:
    """'<artists> - <title>.<ext>' with file-system-illegal characters removed."""
    ext = extension.lstrip(".")
    return sanitize_file_name(f"{display_artists(result)} - {display_title(result)}.{ext}", illegal_chars)
