# findmeme/services/catalog/service.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from findmeme.database.repos.meme_query import MemeQueryRepo
from findmeme.domain.entities.meme import MemeView
from findmeme.domain.enums.media_type import MediaType, parse_media_type
from findmeme.domain.errors import NotFound


class CatalogService:
    """Public read side of the catalog. Only approved memes are ever listed."""

    def __init__(self, db: Session) -> None:
        self.query = MemeQueryRepo(db)

    def list(self, search: Optional[str] = None, media_type: str | MediaType | None = None) -> List[MemeView]:
        term = (search or "").strip() or None
        mtype = parse_media_type(media_type) if media_type else None
        return self.query.list_approved(search=term, media_type=mtype)

    def get_by_id(self, meme_id: int) -> MemeView:
        view = self.query.get_by_id(meme_id)
        if view is None:
            raise NotFound("Meme not found")
        return view
