import logging
from typing import Iterable, List, Optional, Sequence

from trackmeta_parser.models import Artist, ArtistRole, RemixType

logger = logging.getLogger(__name__)


def dedupe_preserve_order(artists: Iterable[Artist]) -> List[Artist]:
    """Drop empty names and repeated names; the first occurrence keeps its role."""
    seen = set()
    out = []
    for a in artists:
        name = a.name.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        if name != a.name:
            a = Artist(name=name, role=a.role, remix_type=a.remix_type)
        out.append(a)
    return out


def as_artists(names: Sequence[str], role: ArtistRole,
               remix_type: Optional[RemixType] = None) -> List[Artist]:
    return [Artist(name=n, role=role, remix_type=remix_type) for n in names]


def consolidate(artists: Iterable[Artist], username: str, fallback_name: str) -> List[Artist]:
    """
    Deduplicate the assembled artist sequence. When nothing was parsed, the
    uploader becomes the single Main artist.
    """
    out = dedupe_preserve_order(artists)
    if out:
        return out

    name = (username or "").strip() or fallback_name
    logger.debug("no artists parsed, falling back to uploader %r", name)
    return [Artist(name=name, role=ArtistRole.MAIN)]
