import re

from trackmeta_parser.conf import ParserConfig

DASHES_TO_HYPHEN = ParserConfig().dashes_to_hyphen


def normalize_dashes_whitespace(s: str, dashes_to_hyphen=DASHES_TO_HYPHEN) -> str:
    """
    Make separators/spacing predictable before any matching happens:
    fold Unicode dashes to '-', turn tabs and friends into spaces and
    collapse runs of spaces. Artist glyphs are left alone. Idempotent.
    """
    if not s:
        return s or ""

    # 1) Convert various unicode dashes to ASCII '-' (do NOT add spaces here)
    s = s.translate({code: ord('-') for code in dashes_to_hyphen})

    # 2) Horizontal whitespace and line breaks become single spaces
    s = re.sub(r'[\t\r\n\f\v]+', ' ', s)

    # 3) Collapse runs of spaces
    s = re.sub(r' {2,}', ' ', s).strip()

    return s
