# findmeme/database/repos/_mapping.py
from __future__ import annotations
from typing import Iterable, Optional

from findmeme.database.models.catalog import Meme as DBMeme
from findmeme.database.models.identity import User as DBUser
from findmeme.domain.entities.meme import MemeView
from findmeme.domain.entities.user import UserAccount
from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus


def to_meme_view(row: DBMeme, tags: Iterable[str] = (), submitted_by: Optional[str] = None) -> MemeView:
    return MemeView(
        id=row.id,
        title=row.title,
        media_url=row.media_url,
        media_type=MediaType(row.media_type),
        status=MemeStatus(row.status),
        user_id=row.user_id,
        date_created=row.date_created,
        last_updated=row.last_updated,
        tags=sorted(set(tags)),
        submitted_by=submitted_by,
    )


def to_user_account(row: DBUser) -> UserAccount:
    return UserAccount(
        id=row.id,
        username=row.username,
        email=row.email,
        is_admin=bool(row.is_admin),
        date_created=row.date_created,
    )
