from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from trackmeta_parser.models import ArtistRole, RemixType


@dataclass(frozen=True)
class _Span:
    start: int
    end: int          # end is exclusive (points to char AFTER the fragment)


@dataclass(frozen=True)
class Extracted:
    """One credit fragment found by an extractor."""
    fragment: str      # text removed from the working title
    role: ArtistRole
    names: List[str] = field(default_factory=list)
    remix_type: Optional[RemixType] = None
    span: Optional[_Span] = None
