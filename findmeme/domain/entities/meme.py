# findmeme/domain/entities/meme.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus


@dataclass(frozen=True)
class MemeView:
    """
    Read projection of a meme together with its tag names.

    Built by the query repos from ORM rows so callers never see
    aggregate rows of varying shape. `tags` is de-duplicated and sorted;
    an untagged meme carries an empty list.
    """
    id: int
    title: str
    media_url: str
    media_type: MediaType
    status: MemeStatus
    user_id: Optional[int] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)

    # Only filled for the moderation queue
    submitted_by: Optional[str] = None


@dataclass(frozen=True)
class MediaUpload:
    """Raw media payload handed to a MediaStoragePort."""
    content: bytes
    content_type: str
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ModerationStats:
    pending_count: int = 0
    approved_count: int = 0
    rejected_count: int = 0
    total_users: int = 0
