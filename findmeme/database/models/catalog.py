# findmeme/database/models/catalog.py
from __future__ import annotations

from datetime import datetime
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import (
    DateTime, Enum as SAEnum, ForeignKey, Integer, String, Text, Index, func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from findmeme.database.core.main import Base
from findmeme.database.core.service_object import ServiceObject, utcnow
from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus
from findmeme.domain.policies.moderation import LEGACY_INSERT_STATUS

if TYPE_CHECKING:
    from .identity import User
    from .favorites import Favorite


class Meme(ServiceObject, Base):
    __tablename__ = "memes"
    __table_args__ = (
        Index("ix_memes_date_created", "date_created"),
        Index("ix_memes_status", "status"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    media_url: Mapped[str] = mapped_column(Text, nullable=False)
    media_type: Mapped[MediaType] = mapped_column(
        SAEnum(MediaType, name="media_type", validate_strings=True), nullable=False
    )
    # Rows inserted without a submission context land as approved
    status: Mapped[MemeStatus] = mapped_column(
        SAEnum(MemeStatus, name="meme_status", validate_strings=True),
        nullable=False,
        default=LEGACY_INSERT_STATUS,
        server_default=LEGACY_INSERT_STATUS.value,
    )
    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    owner: Mapped[Optional["User"]] = relationship(back_populates="memes")
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary="meme_tags",
        back_populates="memes",
        passive_deletes=True,
    )
    favorites: Mapped[List["Favorite"]] = relationship(
        back_populates="meme", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Meme id={self.id} title={self.title!r} status={self.status}>"


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Always stored lowercase; see TagRepo.upsert
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    date_created: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )

    memes: Mapped[List["Meme"]] = relationship(
        "Meme",
        secondary="meme_tags",
        back_populates="tags",
        passive_deletes=True,
    )


Index("ix_tags_name", Tag.name)


class MemeTag(Base):
    __tablename__ = "meme_tags"
    __table_args__ = (
        Index("ix_meme_tags_tag_id", "tag_id"),
    )

    meme_id: Mapped[int] = mapped_column(
        ForeignKey("memes.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    )
