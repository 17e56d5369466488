import logging
import re
from typing import Tuple, Optional

logger = logging.getLogger(__name__)

# Lazy artist group so the FIRST spaced hyphen wins:
#   "A - Song - Live Version" -> ("A", "Song - Live Version")
_LEADING_ARTIST_RX = re.compile(
    r"""^\s*
    (?P<artists>\S.*?)          # non-empty artist block, as short as possible
    \s+-\s+                     # spaced hyphen separator
    (?P<title>\S.*?)\s*$        # non-empty remainder
    """,
    re.VERBOSE | re.DOTALL,
)


def split_leading_artist(s: str) -> Tuple[str, Optional[str]]:
    """
    Detect "Artist Segment - Rest Of Title".

    Returns:
        (working_title, artist_segment or None). Without a split the title
        comes back unchanged.
    """
    if not s:
        return s, None

    m = _LEADING_ARTIST_RX.match(s)
    if not m:
        return s, None

    logger.debug("leading artist block: %r", m.group("artists"))
    return m.group("title"), m.group("artists")
