from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, Query, UploadFile

from findmeme.common.settings import get_settings
from findmeme.domain.entities.meme import MediaUpload
from findmeme.domain.entities.user import AuthContext
from findmeme.services.api.deps import (
    get_catalog_service,
    get_moderation_service,
    get_optional_auth_context,
    require_admin_context,
)
from findmeme.services.catalog.service import CatalogService
from findmeme.services.mappers.meme import to_meme_read
from findmeme.services.moderation.service import ModerationService
from findmeme.services.schemas import MemeRead, MessageRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/memes", tags=["memes"])


@router.get("", response_model=List[MemeRead])
def list_memes(
    search: Optional[str] = Query(None),
    media_type: Optional[str] = Query(None, alias="type"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> List[MemeRead]:
    return [to_meme_read(v) for v in catalog.list(search=search, media_type=media_type)]


@router.get("/{meme_id}", response_model=MemeRead)
def get_meme(meme_id: int = Path(...), catalog: CatalogService = Depends(get_catalog_service)) -> MemeRead:
    return to_meme_read(catalog.get_by_id(meme_id))


def _read_upload(file: Optional[UploadFile]) -> Optional[MediaUpload]:
    if file is None or not file.filename:
        return None
    return MediaUpload(
        content=file.file.read(),
        content_type=file.content_type or "application/octet-stream",
        filename=file.filename,
    )


@router.post("", response_model=MemeRead, status_code=HTTPStatus.CREATED)
def submit_meme(
    title: Optional[str] = Form(None),
    media_type: Optional[str] = Form(None),
    tags: Optional[List[str]] = Form(None),
    user_id: Optional[int] = Form(None),
    file: Optional[UploadFile] = File(None),
    ctx: Optional[AuthContext] = Depends(get_optional_auth_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> MemeRead:
    # a signed-in caller always owns their submission
    owner_id = ctx.user_id if ctx else user_id
    view = moderation.submit(
        title=title,
        media_type=media_type,
        tags=tags,
        owner_id=owner_id,
        media=_read_upload(file),
    )
    return to_meme_read(view)


@router.delete("/{meme_id}", response_model=MessageRead)
def delete_meme(
    meme_id: int,
    ctx: AuthContext = Depends(require_admin_context),
    moderation: ModerationService = Depends(get_moderation_service),
) -> MessageRead:
    moderation.delete(ctx, meme_id)
    return MessageRead(message="Meme deleted successfully")
