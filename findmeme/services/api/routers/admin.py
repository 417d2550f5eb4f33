from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from findmeme.common.settings import get_settings
from findmeme.domain.entities.user import AuthContext
from findmeme.services.api.deps import (
    get_bootstrap_service,
    get_moderation_service,
    require_admin_context,
)
from findmeme.services.auth import BootstrapService
from findmeme.services.mappers.meme import (
    to_meme_read, to_pending_read, to_stats_read, to_user_read,
)
from findmeme.services.moderation.service import ModerationService
from findmeme.services.schemas import (
    BootstrapAdminRead,
    BootstrapAdminRequest,
    BootstrapSecret,
    MessageRead,
    ModerationResultRead,
    PendingMemeRead,
    StatsRead,
    UserListRead,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/admin", tags=["admin"])


# ---------- moderation (bearer + admin) ----------

@router.get("/pending-memes", response_model=List[PendingMemeRead])
def pending_memes(
    ctx: AuthContext = Depends(require_admin_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> List[PendingMemeRead]:
    return [to_pending_read(v) for v in moderation.pending_list(ctx)]


@router.post("/approve-meme/{meme_id}", response_model=ModerationResultRead)
def approve_meme(
    meme_id: int,
    ctx: AuthContext = Depends(require_admin_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> ModerationResultRead:
    view = moderation.approve(ctx, meme_id)
    return ModerationResultRead(message="Meme approved", meme=to_meme_read(view))


@router.post("/reject-meme/{meme_id}", response_model=ModerationResultRead)
def reject_meme(
    meme_id: int,
    ctx: AuthContext = Depends(require_admin_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> ModerationResultRead:
    view = moderation.reject(ctx, meme_id)
    return ModerationResultRead(message="Meme rejected", meme=to_meme_read(view))


@router.delete("/delete-meme/{meme_id}", response_model=MessageRead)
def delete_meme(
    meme_id: int,
    ctx: AuthContext = Depends(require_admin_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> MessageRead:
    moderation.delete(ctx, meme_id)
    return MessageRead(message="Meme deleted permanently")


@router.get("/stats", response_model=StatsRead)
def stats(
    ctx: AuthContext = Depends(require_admin_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> StatsRead:
    return to_stats_read(moderation.stats(ctx))


# ---------- bootstrap (shared secret only, no bearer token) ----------

@router.post("/bootstrap-admin", response_model=BootstrapAdminRead)
def bootstrap_admin(
    payload: BootstrapAdminRequest,
    bootstrap: BootstrapService = Depends(get_bootstrap_service),
) -> BootstrapAdminRead:
    user = bootstrap.bootstrap_admin(
        secret=payload.secret,
        username=payload.username,
        email=payload.email,
        new_password=payload.new_password,
    )
    message = "User promoted to admin and password reset" if payload.new_password else "User promoted to admin"
    return BootstrapAdminRead(message=message, user=to_user_read(user))


@router.post("/list-users", response_model=UserListRead)
def list_users(
    payload: BootstrapSecret,
    bootstrap: BootstrapService = Depends(get_bootstrap_service),
) -> UserListRead:
    return UserListRead(users=[to_user_read(u) for u in bootstrap.list_users(secret=payload.secret)])
