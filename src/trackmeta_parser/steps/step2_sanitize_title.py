import logging
import re
from typing import Tuple, Optional, Sequence

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.steps.helpers import word_alternatives

logger = logging.getLogger(__name__)

PROMO_PHRASES = ParserConfig().promo_phrases


def compile_promo_pattern(promo_phrases: Sequence[str] = PROMO_PHRASES) -> re.Pattern:
    # Optional opening bracket(s), the phrase, then whatever trails it.
    # Only the first phrase occurrence onwards is removed; the prefix is kept as-is.
    phrase_alt = word_alternatives(promo_phrases)
    return re.compile(rf"\s?[\[(]{{0,2}}\b{phrase_alt}\b.*$", re.IGNORECASE | re.DOTALL)


_PROMO_RX = compile_promo_pattern()


def sanitize_title(s: str, pattern: Optional[re.Pattern] = None) -> Tuple[str, Optional[str]]:
    """
    Strip promotional suffixes ("Free Download", "Video in Description", ...).

    Returns:
        (sanitized_title, removed_fragment or None)
    """
    if not s:
        return s, None

    rx = pattern or _PROMO_RX
    m = rx.search(s)
    if not m:
        return s, None

    logger.debug("promo suffix removed: %r", m.group(0))
    return s[: m.start()], m.group(0)


# Separator left hanging once a promo suffix is cut: "Song -", "Song |", "Song ~"
_DANGLING_SEPARATOR_RX = re.compile(r"\s*[-|~]+\s*$")


def trim_dangling_separator(s: str) -> str:
    """'Artist - Song [E Remix] -' -> 'Artist - Song [E Remix]'"""
    if not s:
        return s
    return _DANGLING_SEPARATOR_RX.sub("", s)
