from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from findmeme.common.settings import get_settings
from findmeme.domain.entities.user import AuthContext
from findmeme.services.api.deps import get_auth_context, get_favorites_service
from findmeme.services.favorites.service import FavoritesService
from findmeme.services.mappers.meme import to_meme_read
from findmeme.services.schemas import FavoriteCheckRead, MemeRead, MessageRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/favorites", tags=["favorites"])


@router.get("", response_model=List[MemeRead])
def list_favorites(
    ctx: AuthContext = Depends(get_auth_context),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> List[MemeRead]:
    return [to_meme_read(v) for v in favorites.list_for_user(ctx)]


@router.get("/check/{meme_id}", response_model=FavoriteCheckRead)
def check_favorite(
    meme_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoriteCheckRead:
    return FavoriteCheckRead(is_favorited=favorites.check(ctx, meme_id))


@router.post("/{meme_id}", response_model=MessageRead)
def add_favorite(
    meme_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> MessageRead:
    favorites.add(ctx, meme_id)
    return MessageRead(message="Added to favorites")


@router.delete("/{meme_id}", response_model=MessageRead)
def remove_favorite(
    meme_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> MessageRead:
    favorites.remove(ctx, meme_id)
    return MessageRead(message="Removed from favorites")
