# findmeme/services/moderation/service.py
from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from findmeme.common.logging import get_logger
from findmeme.common.settings import MediaStorageConfig
from findmeme.common.strings.splitters import normalize_tag_names
from findmeme.database.core.transaction import transactional
from findmeme.database.repos._mapping import to_meme_view
from findmeme.database.repos.meme_query import MemeQueryRepo
from findmeme.database.repos.meme_repo import SqlAlchemyMemeRepo
from findmeme.database.repos.tag_repo import TagRepo
from findmeme.database.repos.user_repo import UserRepo
from findmeme.domain.entities.meme import MediaUpload, MemeView, ModerationStats
from findmeme.domain.entities.user import AuthContext
from findmeme.domain.enums.media_type import MediaType, parse_media_type
from findmeme.domain.enums.meme_status import MemeStatus
from findmeme.domain.errors import NotFound, UpstreamFailure, ValidationError
from findmeme.domain.policies.moderation import SUBMISSION_STATUS, check_transition
from findmeme.domain.ports.media_storage import MediaStoragePort
from findmeme.services.auth.service import AuthService

logger = get_logger(__name__)

TITLE_MAX = 255
TAG_MAX = 100


class ModerationService:
    """
    Meme lifecycle: user submission into `pending`, and the admin-only
    approve / reject / delete transitions plus the moderation queue.

    Every admin operation re-checks the caller through AuthService.require_admin,
    so a route that forgets the admin dependency still cannot moderate.
    """

    def __init__(
        self,
        db: Session,
        auth: AuthService,
        *,
        storage: Optional[MediaStoragePort] = None,
        storage_cfg: Optional[MediaStorageConfig] = None,
    ) -> None:
        self.db = db
        self.auth = auth
        self.storage = storage
        self.storage_cfg = storage_cfg or MediaStorageConfig()
        self.memes = SqlAlchemyMemeRepo(db)
        self.tags = TagRepo(db)
        self.users = UserRepo(db)
        self.query = MemeQueryRepo(db)

    # ---------- submission ----------

    def _validate_submission(
        self,
        title: Optional[str],
        media_type: str | MediaType | None,
        tags: Sequence[str] | str | None,
        media: Optional[MediaUpload],
    ) -> tuple[str, MediaType, List[str]]:
        clean_title = (title or "").strip()
        if not clean_title:
            raise ValidationError("Title is required")
        if len(clean_title) > TITLE_MAX:
            raise ValidationError(f"Title must be at most {TITLE_MAX} characters")
        mtype = parse_media_type(media_type)
        names = normalize_tag_names(tags)
        too_long = [n for n in names if len(n) > TAG_MAX]
        if too_long:
            raise ValidationError(f"Tag names must be at most {TAG_MAX} characters")
        if media is not None:
            if media.size == 0:
                raise ValidationError("Uploaded file is empty")
            if media.size > self.storage_cfg.max_upload_bytes:
                raise ValidationError("Uploaded file is too large")
        return clean_title, mtype, names

    def _upload(self, media: MediaUpload) -> str:
        if self.storage is None:
            raise UpstreamFailure("Media storage is not configured")
        return self.storage.upload(media)

    def submit(
        self,
        *,
        title: Optional[str],
        media_type: str | MediaType | None,
        tags: Sequence[str] | str | None = None,
        owner_id: Optional[int] = None,
        media: Optional[MediaUpload] = None,
    ) -> MemeView:
        """
        Create a meme in `pending`. Media is uploaded first, outside any store
        transaction; then the meme row, tag upserts and links are written as
        one unit so a failure leaves no half-linked meme behind.

        The session must not have touched the store yet when media is
        attached; the request-scoped session only checks out a connection
        on its first statement.
        """
        clean_title, mtype, names = self._validate_submission(title, media_type, tags, media)

        media_url = self.storage_cfg.placeholder_url
        if media is not None:
            media_url = self._upload(media)

        try:
            with transactional(self.db):
                if owner_id is not None and self.users.get(owner_id) is None:
                    raise NotFound("User not found")
                orm = self.memes.create(
                    title=clean_title,
                    media_url=media_url,
                    media_type=mtype,
                    status=SUBMISSION_STATUS,
                    user_id=owner_id,
                )
                # fixed lock order so concurrent submitters of overlapping tags cannot deadlock
                for name in sorted(names):
                    self.tags.link(orm.id, self.tags.upsert(name))
                view = to_meme_view(orm, names)
        except Exception:
            if media is not None:
                logger.warning("Submission failed after upload; media left orphaned at %s", media_url)
            raise

        logger.info("Meme id=%s submitted by user=%s with %d tag(s)", view.id, owner_id, len(names))
        return view

    # ---------- admin transitions ----------

    def _transition(self, ctx: Optional[AuthContext], meme_id: int, target: MemeStatus) -> MemeView:
        admin = self.auth.require_admin(ctx)
        orm = self.memes.get(meme_id)
        if orm is None:
            raise NotFound("Meme not found")
        previous = MemeStatus(orm.status)
        changed = check_transition(previous, target)
        self.memes.set_status(meme_id, target)
        if changed:
            logger.info("Meme id=%s %s -> %s by admin=%s", meme_id, previous.value, target.value, admin.user_id)
        return self.query.get_by_id(meme_id)

    def approve(self, ctx: Optional[AuthContext], meme_id: int) -> MemeView:
        return self._transition(ctx, meme_id, MemeStatus.approved)

    def reject(self, ctx: Optional[AuthContext], meme_id: int) -> MemeView:
        return self._transition(ctx, meme_id, MemeStatus.rejected)

    def delete(self, ctx: Optional[AuthContext], meme_id: int) -> None:
        admin = self.auth.require_admin(ctx)
        if not self.memes.delete(meme_id):
            raise NotFound("Meme not found")
        logger.info("Meme id=%s deleted by admin=%s", meme_id, admin.user_id)

    # ---------- admin reads ----------

    def pending_list(self, ctx: Optional[AuthContext]) -> List[MemeView]:
        self.auth.require_admin(ctx)
        return self.query.list_pending()

    def stats(self, ctx: Optional[AuthContext]) -> ModerationStats:
        self.auth.require_admin(ctx)
        return self.query.stats()
