# findmeme/services/favorites/service.py
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from findmeme.database.repos.favorite_repo import FavoriteRepo
from findmeme.database.repos.meme_query import MemeQueryRepo
from findmeme.database.repos.meme_repo import SqlAlchemyMemeRepo
from findmeme.domain.entities.meme import MemeView
from findmeme.domain.entities.user import AuthContext
from findmeme.domain.errors import NotFound


class FavoritesService:
    """
    A caller's bookmarks. Add and remove are idempotent so concurrent
    toggles from the same user settle without a read-modify-write.
    """

    def __init__(self, db: Session) -> None:
        self.favorites = FavoriteRepo(db)
        self.memes = SqlAlchemyMemeRepo(db)
        self.query = MemeQueryRepo(db)

    def add(self, ctx: AuthContext, meme_id: int) -> None:
        if self.memes.get(meme_id) is None:
            raise NotFound("Meme not found")
        self.favorites.add(ctx.user_id, meme_id)

    def remove(self, ctx: AuthContext, meme_id: int) -> None:
        self.favorites.remove(ctx.user_id, meme_id)

    def check(self, ctx: AuthContext, meme_id: int) -> bool:
        return self.favorites.exists(ctx.user_id, meme_id)

    def list_for_user(self, ctx: AuthContext) -> List[MemeView]:
        return self.query.list_favorites(ctx.user_id)
