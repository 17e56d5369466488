import re
from typing import List, Optional, Sequence

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.steps.helpers import keyword_alternatives, tidy_name

ARTIST_SEPARATORS = ParserConfig().artist_separators


def compile_separator_pattern(separators: Sequence[str] = ARTIST_SEPARATORS) -> re.Pattern:
    sep_alt = keyword_alternatives(separators)
    # Spaced keyword ("A feat. B", "A x B") or a comma ("A, B", "A ,B").
    # Glued connectors ("CamelPhat&Elderbrook") stay one name.
    return re.compile(
        rf"""^\s*
        (?P<head>\S.*?)                     # first name, as short as possible
        (?:\s+{sep_alt}\.?\s+|\s*,\s*)      # separator
        (?P<tail>.*\S)\s*$                  # everything after, re-scanned
        """,
        re.IGNORECASE | re.VERBOSE | re.DOTALL,
    )


_SEPARATOR_RX = compile_separator_pattern()


def segment_artists(s: str, pattern: Optional[re.Pattern] = None) -> List[str]:
    """
    Split a compound artist string into names, left to right:
    "A & B feat. C" -> ["A", "B", "C"].

    Names are trimmed and empty ones dropped; duplicates are kept
    (dedup runs once over the whole result).
    """
    rx = pattern or _SEPARATOR_RX
    names: List[str] = []
    remaining = s or ""

    while True:
        m = rx.match(remaining)
        if not m:
            break
        names.append(m.group("head"))
        remaining = m.group("tail")
    names.append(remaining)

    return [n for n in (tidy_name(x) for x in names) if n]
