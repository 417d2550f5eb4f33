from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus


class MemeRead(BaseModel):
    id: int
    title: str
    media_url: str
    media_type: MediaType
    status: MemeStatus
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class PendingMemeRead(MemeRead):
    submitted_by: Optional[str] = None


class MessageRead(BaseModel):
    message: str


class ModerationResultRead(MessageRead):
    meme: MemeRead
