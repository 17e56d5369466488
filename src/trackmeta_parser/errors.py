from typing import Optional, Dict, Any


class TrackMetaError(Exception):
    """Base error for the collaborators around the extraction core."""
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class TaggingError(TrackMetaError):
    """Raised when an audio buffer cannot be tagged."""
