# findmeme/database/repos/meme_repo.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy.orm import Session

from findmeme.common.logging import get_logger
from findmeme.database.core.service_object import utcnow
from findmeme.database.models.catalog import Meme as DBMeme
from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus

logger = get_logger(__name__)


class SqlAlchemyMemeRepo:
    """
    Mutations on the memes table. The caller owns the transaction
    boundary; nothing here commits.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, meme_id: int) -> Optional[DBMeme]:
        return self.db.get(DBMeme, meme_id)

    def create(
        self,
        *,
        title: str,
        media_url: str,
        media_type: MediaType,
        status: MemeStatus,
        user_id: Optional[int] = None,
    ) -> DBMeme:
        orm = DBMeme(
            title=title,
            media_url=media_url,
            media_type=MediaType(media_type),
            status=MemeStatus(status),
            user_id=user_id,
        )
        self.db.add(orm)
        self.db.flush()
        return orm

    def set_status(self, meme_id: int, status: MemeStatus) -> Optional[DBMeme]:
        """
        Write `status` and bump last_updated even when the status is unchanged.
        Returns None if the meme does not exist.
        """
        orm = self.db.get(DBMeme, meme_id)
        if not orm:
            return None
        orm.status = MemeStatus(status)
        orm.last_updated = utcnow()
        self.db.flush()
        return orm

    def delete(self, meme_id: int) -> bool:
        """
        Hard delete. Tag links and favorites go with it through the
        foreign-key cascades; tag rows stay.
        """
        result = self.db.execute(
            sa_delete(DBMeme)
            .where(DBMeme.id == meme_id)
            .execution_options(synchronize_session="fetch")
        )
        return (result.rowcount or 0) > 0
