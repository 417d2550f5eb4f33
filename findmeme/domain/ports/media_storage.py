from __future__ import annotations
from typing import Protocol

from findmeme.domain.entities.meme import MediaUpload


class MediaStoragePort(Protocol):
    def upload(self, media: MediaUpload) -> str:
        """Store the payload and return a durable public URL. Raises UpstreamFailure."""
        ...
