# findmeme/database/repos/meme_query.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional
from sqlalchemy import select, func, case, exists, or_
from sqlalchemy.orm import Session

from findmeme.database.models import (
    Meme as DBMeme,
    Tag as DBTag,
    MemeTag as DBMemeTag,
    Favorite as DBFavorite,
    User as DBUser,
)
from findmeme.database.repos._mapping import to_meme_view
from findmeme.domain.entities.meme import MemeView, ModerationStats
from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus
from findmeme.domain.policies.moderation import PUBLIC_STATUS


class MemeQueryRepo:
    """
    Read-only queries over the catalog. Every method returns MemeView
    projections with tags already attached.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # ---------- tags ----------

    def batch_tags_for_memes(self, meme_ids: Iterable[int]) -> Dict[int, List[str]]:
        """
        Map of meme_id -> [tag name] for a list of memes.
        Memes without tags are absent from the map.
        """
        ids = list(meme_ids)
        if not ids:
            return {}
        stmt = (
            select(DBMemeTag.meme_id, DBTag.name)
            .join(DBTag, DBTag.id == DBMemeTag.tag_id)
            .where(DBMemeTag.meme_id.in_(ids))
            .order_by(DBMemeTag.meme_id.asc(), DBTag.name.asc())
        )
        out: Dict[int, List[str]] = {}
        for mid, name in self.session.execute(stmt).all():
            out.setdefault(mid, []).append(name)
        return out

    def _attach_tags(self, rows: List[DBMeme]) -> List[MemeView]:
        tags = self.batch_tags_for_memes(r.id for r in rows)
        return [to_meme_view(r, tags.get(r.id, ())) for r in rows]

    # ---------- public listing ----------

    def list_approved(
        self,
        *,
        search: Optional[str] = None,
        media_type: Optional[MediaType] = None,
    ) -> List[MemeView]:
        """
        Approved memes, newest first. `search` is a case-insensitive substring
        match on the title or on any linked tag name.
        """
        stmt = select(DBMeme).where(DBMeme.status == PUBLIC_STATUS)

        if search:
            pattern = f"%{search}%"
            tag_match = exists(
                select(DBMemeTag.meme_id)
                .join(DBTag, DBTag.id == DBMemeTag.tag_id)
                .where(DBMemeTag.meme_id == DBMeme.id, DBTag.name.ilike(pattern))
            )
            stmt = stmt.where(or_(DBMeme.title.ilike(pattern), tag_match))

        if media_type:
            stmt = stmt.where(DBMeme.media_type == MediaType(media_type))

        stmt = stmt.order_by(DBMeme.date_created.desc(), DBMeme.id.desc())
        rows = self.session.execute(stmt).scalars().all()
        return self._attach_tags(list(rows))

    def get_by_id(self, meme_id: int) -> Optional[MemeView]:
        row = self.session.get(DBMeme, meme_id)
        if not row:
            return None
        tags = self.batch_tags_for_memes([row.id])
        return to_meme_view(row, tags.get(row.id, ()))

    # ---------- moderation ----------

    def list_pending(self) -> List[MemeView]:
        """Pending memes oldest first, with the submitter's username when known."""
        stmt = (
            select(DBMeme, DBUser.username)
            .outerjoin(DBUser, DBUser.id == DBMeme.user_id)
            .where(DBMeme.status == MemeStatus.pending)
            .order_by(DBMeme.date_created.asc(), DBMeme.id.asc())
        )
        rows = self.session.execute(stmt).all()
        tags = self.batch_tags_for_memes(m.id for (m, _u) in rows)
        return [to_meme_view(m, tags.get(m.id, ()), submitted_by=u) for (m, u) in rows]

    def stats(self) -> ModerationStats:
        def _count(status: MemeStatus):
            return func.coalesce(func.sum(case((DBMeme.status == status, 1), else_=0)), 0)

        stmt = select(
            _count(MemeStatus.pending),
            _count(MemeStatus.approved),
            _count(MemeStatus.rejected),
            func.count(func.distinct(DBMeme.user_id)),
        )
        pending, approved, rejected, users = self.session.execute(stmt).one()
        return ModerationStats(
            pending_count=int(pending),
            approved_count=int(approved),
            rejected_count=int(rejected),
            total_users=int(users),
        )

    # ---------- favorites ----------

    def list_favorites(self, user_id: int) -> List[MemeView]:
        """
        Memes the user favorited, most recently favorited first.
        No status filter: a since-rejected meme stays in the list.
        """
        stmt = (
            select(DBMeme)
            .join(DBFavorite, DBFavorite.meme_id == DBMeme.id)
            .where(DBFavorite.user_id == user_id)
            .order_by(DBFavorite.date_created.desc(), DBMeme.id.desc())
        )
        rows = self.session.execute(stmt).scalars().all()
        return self._attach_tags(list(rows))
