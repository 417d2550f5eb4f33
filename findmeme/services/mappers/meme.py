# findmeme/services/mappers/meme.py
from __future__ import annotations

from findmeme.domain.entities.meme import MemeView, ModerationStats
from findmeme.domain.entities.user import UserAccount
from findmeme.services.schemas import MemeRead, PendingMemeRead, StatsRead, UserRead


def to_meme_read(view: MemeView) -> MemeRead:
    return MemeRead(
        id=view.id,
        title=view.title,
        media_url=view.media_url,
        media_type=view.media_type,
        status=view.status,
        user_id=view.user_id,
        created_at=view.date_created,
        updated_at=view.last_updated,
        tags=list(view.tags),
    )


def to_pending_read(view: MemeView) -> PendingMemeRead:
    base = to_meme_read(view).model_dump()
    return PendingMemeRead(**base, submitted_by=view.submitted_by)


def to_user_read(user: UserAccount) -> UserRead:
    return UserRead(
        id=user.id,
        username=user.username,
        email=user.email,
        is_admin=user.is_admin,
        created_at=user.date_created,
    )


def to_stats_read(stats: ModerationStats) -> StatsRead:
    return StatsRead.model_validate(stats)
