from .parser import TrackMetaParser, extract
from .conf import ParserConfig
from .models import Artist, ArtistRole, ExtractionResult, RemixCredit, RemixType
from .compose import compose_file_name, display_artists, display_title, sanitize_file_name
from .errors import TrackMetaError, TaggingError

__all__ = [
    "TrackMetaParser", "extract", "ParserConfig",
    "Artist", "ArtistRole", "ExtractionResult", "RemixCredit", "RemixType",
    "compose_file_name", "display_artists", "display_title", "sanitize_file_name",
    "TrackMetaError", "TaggingError",
]
