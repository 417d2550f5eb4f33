from __future__ import annotations
from enum import StrEnum

from findmeme.domain.errors import ValidationError


class MediaType(StrEnum):
    image = "image"
    gif = "gif"
    video = "video"


def parse_media_type(value: str | MediaType | None) -> MediaType:
    try:
        return MediaType(str(value or "").strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in MediaType)
        raise ValidationError(f"media_type must be one of: {allowed}") from None
