# findmeme/database/models/identity.py
from __future__ import annotations

from typing import List, TYPE_CHECKING

from sqlalchemy import Boolean, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from findmeme.database.core.main import Base
from findmeme.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .catalog import Meme
    from .favorites import Favorite


class User(ServiceObject, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=text("false"))

    # ON DELETE SET NULL on memes.user_id; the ORM must not try to null it itself
    memes: Mapped[List["Meme"]] = relationship(back_populates="owner", passive_deletes=True)
    favorites: Mapped[List["Favorite"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} admin={self.is_admin}>"
