from __future__ import annotations
import re
from typing import Iterable, Sequence

# =========================================================
# Helpers (shared)
# =========================================================

_WS_RX = re.compile(r"\s{2,}")
_TIDY_CHARS = " -:,()[]{}\"'\t"


def word_alternatives(terms: Sequence[str], flexible_space: bool = True) -> str:
    # longest first so "featuring" beats "feat"
    terms = sorted(terms, key=len, reverse=True)
    alts = []
    for t in terms:
        parts = t.split()
        glue = r"\s+" if flexible_space else r"\s*"
        alts.append(glue.join(re.escape(p) for p in parts))
    return "(?:" + "|".join(alts) + ")"


def keyword_alternatives(terms: Iterable[str]) -> str:
    """
    Like word_alternatives, but word-like terms get a trailing \\b so "ft"
    doesn't fire inside "ftw". Symbolic terms ("&", "w/") are left open.
    """
    alts = []
    for t in sorted(terms, key=len, reverse=True):
        lit = re.escape(t)
        alts.append(rf"{lit}\b" if re.match(r"^\w+$", t) else lit)
    return "(?:" + "|".join(alts) + ")"


def tidy_name(s: str) -> str:
    return s.strip(_TIDY_CHARS)


def collapse_spaces(s: str) -> str:
    return _WS_RX.sub(" ", s).strip()


def cut_span(s: str, start: int, end: int) -> str:
    """Remove s[start:end] and tidy the whitespace at the seam."""
    return collapse_spaces(s[:start] + " " + s[end:])
