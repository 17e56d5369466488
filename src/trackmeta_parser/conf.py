from typing import Tuple, Dict
from dataclasses import dataclass, field

@dataclass
class ParserConfig:
    """Configuration knobs and keyword dictionaries."""

    # STEP 1
    dashes_to_hyphen = {
        0x2010,  # hyphen
        0x2011,  # non-breaking hyphen
        0x2012,  # figure dash
        0x2013,  # en dash
        0x2014,  # em dash
        0x2015,  # horizontal bar
    }

    # STEP 2
    # Promotional suffixes; everything from the phrase to the end is dropped
    promo_phrases: Tuple[str, ...] = ("free download", "video in description")

    # STEP 4
    # Connectors between artist names (case-insensitive, must be spaced).
    # "," is always a separator and needs no surrounding spaces.
    artist_separators: Tuple[str, ...] = ("featuring", "feat", "ft", "&", "w/", "with", "x")

    # CREDITS (all matching is case-insensitive at runtime)
    producer_indicators: Tuple[str, ...] = ("produced", "prod")
    feat_indicators: Tuple[str, ...] = ("featuring", "feat", "ft", "w/")
    remix_keywords: Tuple[str, ...] = ("remix", "flip", "bootleg", "mashup", "edit")
    remix_aliases: Dict[str, str] = field(default_factory=lambda: {"rmx": "remix"})

    # Words that, alone before a remix keyword, name a version rather than a remixer
    version_words: Tuple[str, ...] = (
        "radio", "extended", "original", "club", "vip", "dub", "single", "album",
        "short", "clean", "dirty", "official", "instrumental", "acapella", "quick", "my",
    )

    # Fallback when the uploader name is blank too
    unknown_artist: str = "Unknown Artist"

    # COMPOSE
    illegal_filename_chars: str = "\\/:*?\"'<>~|"
    default_comment: str = "https://addons.mozilla.org/firefox/addon/soundcloud-dl/"
