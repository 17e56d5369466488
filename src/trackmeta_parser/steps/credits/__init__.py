from typing import List, Optional, Tuple

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.steps.credits.models import Extracted
from trackmeta_parser.steps.credits.extractors import (
    BaseExtractor,
    ProducerExtractor,
    FeatureExtractor,
    RemixExtractor,
)
from trackmeta_parser.steps.helpers import cut_span


class CreditParser:
    """
    Runs the credit extractors over the working title in a fixed order:
    producer -> feature -> remix. Each extractor sees the title with the
    previous fragments already cut out.
    """

    def __init__(self, cfg: Optional[ParserConfig] = None):
        self.cfg = cfg or ParserConfig()
        self.features = FeatureExtractor(self.cfg)
        self.extractors: List[BaseExtractor] = [
            ProducerExtractor(self.cfg),
            self.features,
            RemixExtractor(self.cfg),
        ]

    def parse(self, text: str) -> Tuple[str, List[Extracted]]:
        working = text
        found: List[Extracted] = []
        for extractor in self.extractors:
            hit = extractor.extract(working)
            if hit is None:
                continue
            found.append(hit)
            working = cut_span(working, hit.span.start, hit.span.end)
        return working, found

    def split_artist_block(self, block: str) -> Tuple[str, List[str]]:
        return self.features.split_artist_block(block)


__all__ = [
    "CreditParser",
    "Extracted",
    "ProducerExtractor",
    "FeatureExtractor",
    "RemixExtractor",
]
