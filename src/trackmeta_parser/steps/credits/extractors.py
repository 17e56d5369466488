from __future__ import annotations
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.models import ArtistRole, RemixType
from trackmeta_parser.steps.credits.models import Extracted, _Span
from trackmeta_parser.steps.helpers import cut_span, keyword_alternatives, word_alternatives
from trackmeta_parser.steps.step4_segment_artists import compile_separator_pattern, segment_artists

logger = logging.getLogger(__name__)

# A bare (unbracketed) credit runs to the end of the title or up to the
# next opening bracket, whichever comes first. The names start on a real
# character, never on the keyword's own "." or "by".
_BARE_NAMES = r"(?P<names>(?!by\b)[^\s.()\[\]][^()\[\]]*?)\s*(?=[(\[]|$)"


class BaseExtractor(ABC):
    """
    Ordered list of fragment patterns; the first pattern that matches wins.
    Each pattern must expose a ``names`` group.
    """
    name: str
    role: ArtistRole

    def __init__(self, cfg: Optional[ParserConfig] = None):
        self.cfg = cfg or ParserConfig()
        self.separator_rx = compile_separator_pattern(self.cfg.artist_separators)
        self.guard = self.compile_guard()
        self.patterns = self.compile()

    @abstractmethod
    def compile(self) -> List[re.Pattern]:
        ...

    def compile_guard(self) -> Optional[re.Pattern]:
        """Cheap existence test run before the pattern list. None = always try."""
        return None

    def _build(self, m: re.Match) -> Extracted:
        return Extracted(
            fragment=m.group(0),
            role=self.role,
            names=segment_artists(m.group("names") or "", self.separator_rx),
            span=_Span(m.start(), m.end()),
        )

    def extract(self, text: str, patterns: Optional[List[re.Pattern]] = None) -> Optional[Extracted]:
        if not text:
            return None
        if self.guard is not None and not self.guard.search(text):
            return None
        for pattern in patterns or self.patterns:
            for m in pattern.finditer(text):
                found = self._build(m)
                if not self.accept(found):
                    continue
                logger.debug("DETECTED %s: %r -> %s", self.name.upper(), found.fragment, found.names)
                return found
        return None

    def accept(self, found: Extracted) -> bool:
        return True


class ProducerExtractor(BaseExtractor):
    name = "producer"
    role = ArtistRole.PRODUCER

    def compile(self):
        prod_alt = keyword_alternatives(self.cfg.producer_indicators)
        # "Prod. by X", "Prod X", "Prod.X", "Produced by X"
        head = rf"\b{prod_alt}\.?(?:\s*by\b)?\s*"

        # 1) (Prod. by X)
        paren_rx = re.compile(rf"\s*\(\s*{head}(?P<names>[^()]*?)\s*\)", re.IGNORECASE)
        # 2) [Prod. by X]
        bracket_rx = re.compile(rf"\s*\[\s*{head}(?P<names>[^\[\]]*?)\s*\]", re.IGNORECASE)
        # 3) bare trailing: "Song prod. X"; needs some title before it
        bare_rx = re.compile(rf"(?<=\S)\s+{head}{_BARE_NAMES}", re.IGNORECASE)

        return [paren_rx, bracket_rx, bare_rx]


class FeatureExtractor(BaseExtractor):
    name = "feat"
    role = ArtistRole.FEATURING

    def compile_guard(self):
        feat_alt = keyword_alternatives(self.cfg.feat_indicators)
        return re.compile(rf"\b{feat_alt}|\sx\s", re.IGNORECASE)

    def compile(self):
        feat_alt = keyword_alternatives(self.cfg.feat_indicators)
        head = rf"\b{feat_alt}\.?\s*"

        # 1) (feat. X)
        paren_rx = re.compile(rf"\s*\(\s*{head}(?P<names>[^()]*?)\s*\)", re.IGNORECASE)
        # 2) [feat. X]
        bracket_rx = re.compile(rf"\s*\[\s*{head}(?P<names>[^\[\]]*?)\s*\]", re.IGNORECASE)
        # 3) bare trailing: "Song feat. X", "Song w/ X", "Song x X"
        bare_rx = re.compile(
            rf"(?<=\S)\s+(?:{head}|x\s+){_BARE_NAMES}",
            re.IGNORECASE,
        )
        # In an artist block "A x B" joins co-artists, so only keywords count there
        bare_block_rx = re.compile(rf"(?<=\S)\s+{head}{_BARE_NAMES}", re.IGNORECASE)
        self.block_patterns = [paren_rx, bracket_rx, bare_block_rx]

        return [paren_rx, bracket_rx, bare_rx]

    def split_artist_block(self, block: str) -> Tuple[str, List[str]]:
        """
        Separate featured artists from a leading artist block:
        "A & B feat. C" -> ("A & B", ["C"]).
        """
        hit = self.extract(block, self.block_patterns)
        if hit is None:
            return block, []
        return cut_span(block, hit.span.start, hit.span.end), hit.names


class RemixExtractor(BaseExtractor):
    name = "remix"
    role = ArtistRole.REMIXER

    def _keyword_alt(self) -> str:
        return word_alternatives(list(self.cfg.remix_keywords) + list(self.cfg.remix_aliases))

    def compile_guard(self):
        return re.compile(rf"\b{self._keyword_alt()}", re.IGNORECASE)

    def compile(self):
        kw = self._keyword_alt()

        # 1) (E Remix) / 2) [E Remix]
        paren_rx = re.compile(rf"\s*\(\s*(?P<names>[^()]+?)\s+(?P<type>{kw})\s*\)", re.IGNORECASE)
        bracket_rx = re.compile(rf"\s*\[\s*(?P<names>[^\[\]]+?)\s+(?P<type>{kw})\s*\]", re.IGNORECASE)

        # 3) (Remixed by E) / 4) [Edit by E]
        byline = rf"(?P<type>{kw})(?:ed|ped|ged)?\s+by\s+"
        paren_by_rx = re.compile(rf"\s*\(\s*{byline}(?P<names>[^()]+?)\s*\)", re.IGNORECASE)
        bracket_by_rx = re.compile(rf"\s*\[\s*{byline}(?P<names>[^\[\]]+?)\s*\]", re.IGNORECASE)

        return [paren_rx, bracket_rx, paren_by_rx, bracket_by_rx]

    def _build(self, m):
        keyword = m.group("type").lower()
        keyword = self.cfg.remix_aliases.get(keyword, keyword)
        remix_type = RemixType.from_keyword(keyword)
        return Extracted(
            fragment=m.group(0),
            role=self.role,
            names=segment_artists(m.group("names"), self.separator_rx),
            remix_type=remix_type,
            span=_Span(m.start(), m.end()),
        )

    def accept(self, found):
        # "(Radio Edit)", "[Extended Remix]" name a version, not a remixer
        version_words = {w.lower() for w in self.cfg.version_words}
        return any(
            not set(n.lower().split()) <= version_words for n in found.names
        )
