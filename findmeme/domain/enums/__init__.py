from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus

__all__ = [
    "MediaType",
    "MemeStatus",
]
