import logging
from typing import Optional, Dict, Any, List, Tuple

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.models import Artist, ArtistRole, ExtractionResult, RemixCredit
from trackmeta_parser.steps.credits import CreditParser
from trackmeta_parser.steps.step1_normalize import normalize_dashes_whitespace
from trackmeta_parser.steps.step2_sanitize_title import compile_promo_pattern, sanitize_title, trim_dangling_separator
from trackmeta_parser.steps.step3_leading_artist import split_leading_artist
from trackmeta_parser.steps.step4_segment_artists import compile_separator_pattern, segment_artists
from trackmeta_parser.steps.step5_consolidate import as_artists, consolidate

logger = logging.getLogger(__name__)


class TrackMetaParser:
    """
    Multi-pass parser for uploaded track titles.
    Each pass takes the working title and returns a new one; nothing is shared
    between calls, so one instance can serve any number of titles.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

        self._promo_rx = compile_promo_pattern(self.config.promo_phrases)
        self._separator_rx = compile_separator_pattern(self.config.artist_separators)
        self._credits = CreditParser(self.config)

    # ---------- Public API ----------

    def parse(self, title: str, username: str) -> ExtractionResult:
        """
        Orchestrates the full pipeline for one (title, username) pair.
        Never raises on odd input; the worst case is the sanitized title
        with the uploader as the only artist.
        """
        debug: Dict[str, Any] = {}

        # Stage 1: Dash & whitespace normalization
        working = self._normalize(title)

        # Stage 2: Promotional suffix removal
        working, debug["promo"] = self._sanitize(working)

        # Stage 3: Leading "Artist - Title" split
        working, leading = self._split_leading_artist(working)
        debug["leading_artists"] = leading

        # Stage 4: Credit fragments (producer -> feature -> remix)
        working, credited, remix = self._extract_credits(working, debug)

        # Stage 5: Consolidation & fallback
        artists = consolidate(
            self._segment_leading_artists(leading) + credited,
            username,
            self.config.unknown_artist,
        )

        return ExtractionResult(title=working.strip(), artists=artists, remix=remix, debug=debug)

    # ---------- Stage methods ----------

    def _normalize(self, title: str) -> str:
        return normalize_dashes_whitespace(title or "", self.config.dashes_to_hyphen)

    def _sanitize(self, working: str) -> Tuple[str, Optional[str]]:
        working, promo = sanitize_title(working, self._promo_rx)
        if promo is not None:
            # "Song - Free Download" must not leave "Song -" behind
            working = trim_dangling_separator(working)
        return working, promo

    def _split_leading_artist(self, working: str) -> Tuple[str, Optional[str]]:
        return split_leading_artist(working)

    def _segment_leading_artists(self, leading: Optional[str]) -> List[Artist]:
        """
        Main artists from the leading block, followed by any artists the
        block itself credits as featured ("A & B feat. C - Song").
        """
        if not leading:
            return []
        main_block, featured = self._credits.split_artist_block(leading)
        return (
            as_artists(segment_artists(main_block, self._separator_rx), ArtistRole.MAIN)
            + as_artists(featured, ArtistRole.FEATURING)
        )

    def _extract_credits(
        self, working: str, debug: Dict[str, Any]
    ) -> Tuple[str, List[Artist], Optional[RemixCredit]]:
        """
        Cut producer, feature and remix fragments out of the working title.
        Artists come back grouped by role in that same order, regardless of
        where the fragments sat in the title. The remix credit is also kept
        whole, since deduplication may later drop some of its names.
        """
        working, found = self._credits.parse(working)

        artists: List[Artist] = []
        remix: Optional[RemixCredit] = None
        for hit in found:
            debug[self._debug_key(hit.role)] = hit.fragment.strip()
            artists.extend(as_artists(hit.names, hit.role, hit.remix_type))
            if hit.role is ArtistRole.REMIXER and hit.names:
                remix = RemixCredit(names=tuple(hit.names), remix_type=hit.remix_type)
        return working, artists, remix

    # ---------- Helpers ----------

    @staticmethod
    def _debug_key(role: ArtistRole) -> str:
        return {
            ArtistRole.PRODUCER: "producer",
            ArtistRole.FEATURING: "feature",
            ArtistRole.REMIXER: "remix",
        }.get(role, role.value.lower())


_DEFAULT_PARSER = TrackMetaParser()


def extract(title: str, username: str) -> ExtractionResult:
    """Parse with the default configuration."""
    return _DEFAULT_PARSER.parse(title, username)
