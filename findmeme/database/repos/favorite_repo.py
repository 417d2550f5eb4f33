# findmeme/database/repos/favorite_repo.py
from __future__ import annotations

from sqlalchemy import select, delete, func
from sqlalchemy.orm import Session

from findmeme.database.core.dialect import upsert_insert
from findmeme.database.models.favorites import Favorite


class FavoriteRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def add(self, user_id: int, meme_id: int) -> None:
        # duplicate favorites are absorbed by the store
        stmt = upsert_insert(self.db, Favorite.__table__).values(user_id=user_id, meme_id=meme_id)
        self.db.execute(stmt.on_conflict_do_nothing())

    def remove(self, user_id: int, meme_id: int) -> None:
        self.db.execute(
            delete(Favorite)
            .where(Favorite.user_id == user_id, Favorite.meme_id == meme_id)
            .execution_options(synchronize_session=False)
        )

    def exists(self, user_id: int, meme_id: int) -> bool:
        stmt = (
            select(func.count())
            .select_from(Favorite)
            .where(Favorite.user_id == user_id, Favorite.meme_id == meme_id)
        )
        return (self.db.execute(stmt).scalar_one() or 0) > 0
