"""Write extracted metadata into an in-memory MP3 buffer using mutagen."""
from __future__ import annotations

import io
import logging

from mutagen import MutagenError
from mutagen.id3 import (
    APIC,
    COMM,
    ID3,
    TALB,
    TIPL,
    TIT2,
    TPE1,
    TPE4,
    ID3NoHeaderError,
)

from trackmeta_parser.compose import display_artists, display_title
from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.errors import TaggingError
from trackmeta_parser.models import ArtistRole, ExtractionResult

logger = logging.getLogger(__name__)

DEFAULT_COMMENT = ParserConfig().default_comment


def tag_audio(
    audio: bytes,
    result: ExtractionResult,
    *,
    comment: str | None = None,
    cover_art: bytes | None = None,
    cover_art_mime: str = "image/jpeg",
) -> bytes:
    """Return a copy of ``audio`` carrying ID3v2.4 tags for ``result``.

    Frames written:
        TIT2, TALB: display title (album = title)
        TPE1: display artist string
        TPE4: remixer names as credited, including any deduplicated away
        TIPL: ("producer", name) pairs
        COMM: comment, defaults to the project page
        APIC: front cover, only when cover_art is given

    Existing tags on the buffer are kept; the frames above are replaced.

    Raises:
        TaggingError: mutagen could not read or write the buffer.
    """
    buf = io.BytesIO(audio)

    try:
        try:
            tags = ID3(buf)
        except ID3NoHeaderError:
            tags = ID3()

        title = display_title(result)

        tags.delall("TIT2")
        tags.add(TIT2(encoding=3, text=title))

        tags.delall("TALB")
        tags.add(TALB(encoding=3, text=title))

        tags.delall("TPE1")
        tags.add(TPE1(encoding=3, text=display_artists(result)))

        remixers = list(result.remix.names) if result.remix else result.names(ArtistRole.REMIXER)
        tags.delall("TPE4")
        if remixers:
            tags.add(TPE4(encoding=3, text=remixers))

        producers = result.names(ArtistRole.PRODUCER)
        tags.delall("TIPL")
        if producers:
            tags.add(TIPL(encoding=3, people=[["producer", name] for name in producers]))

        tags.delall("COMM")
        tags.add(COMM(encoding=3, lang="eng", desc="", text=comment if comment is not None else DEFAULT_COMMENT))

        if cover_art is not None:
            tags.delall("APIC")
            tags.add(
                APIC(
                    encoding=3,
                    mime=cover_art_mime,
                    type=3,  # Cover (front)
                    desc="",
                    data=cover_art,
                )
            )

        buf.seek(0)
        tags.save(buf)
    except MutagenError as exc:
        logger.error("Failed to tag audio for %r: %s", result.title, exc)
        raise TaggingError(
            f"could not write tags: {exc}",
            context={"title": result.title, "size": len(audio)},
        ) from exc

    return buf.getvalue()
