from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any, Tuple


class ArtistRole(Enum):
    """Where an artist mention came from; decides tag placement."""
    MAIN = "Main"
    FEATURING = "Featuring"
    PRODUCER = "Producer"
    REMIXER = "Remixer"


class RemixType(Enum):
    """Transformation keyword attached to a remixer credit."""
    REMIX = "Remix"
    FLIP = "Flip"
    BOOTLEG = "Bootleg"
    MASHUP = "Mashup"
    EDIT = "Edit"

    @classmethod
    def from_keyword(cls, keyword: Optional[str]) -> "RemixType":
        """Case-insensitive lookup by name; unknown or missing keywords mean Remix."""
        if keyword:
            key = keyword.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        return cls.REMIX


@dataclass(frozen=True)
class Artist:
    name: str
    role: ArtistRole
    remix_type: Optional[RemixType] = None


@dataclass(frozen=True)
class RemixCredit:
    """The remix fragment as written, kept apart from the deduplicated artists."""
    names: Tuple[str, ...]
    remix_type: RemixType

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))


@dataclass(frozen=True)
class ExtractionResult:
    """Final normalized output for one (title, username) pair."""
    title: str
    artists: Tuple[Artist, ...]

    # Remix credit before deduplication; drives the display title
    remix: Optional[RemixCredit] = None

    # Fragments removed by each stage; informational, ignored by equality
    debug: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "artists", tuple(self.artists))

    def names(self, role: Optional[ArtistRole] = None) -> List[str]:
        return [a.name for a in self.artists if role is None or a.role is role]

    @property
    def remixers(self) -> List[Artist]:
        return [a for a in self.artists if a.role is ArtistRole.REMIXER]

    @property
    def remix_type(self) -> Optional[RemixType]:
        if self.remix is not None:
            return self.remix.remix_type
        remixers = self.remixers
        return remixers[0].remix_type if remixers else None
