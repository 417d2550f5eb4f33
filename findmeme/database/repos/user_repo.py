# findmeme/database/repos/user_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, or_, func
from sqlalchemy.orm import Session

from findmeme.database.models.identity import User


class UserRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username).limit(1)
        return self.db.execute(stmt).scalars().first()

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.strip().lower()).limit(1)
        return self.db.execute(stmt).scalars().first()

    def get_by_login(self, username_or_email: str) -> Optional[User]:
        """Resolve a login handle that may be either the username or the email."""
        login = username_or_email.strip()
        stmt = (
            select(User)
            .where(or_(User.username == login, func.lower(User.email) == login.lower()))
            .order_by(User.id.asc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def create(self, *, username: str, email: str, password_hash: str, is_admin: bool = False) -> User:
        user = User(username=username, email=email, password_hash=password_hash, is_admin=is_admin)
        self.db.add(user)
        self.db.flush()
        return user

    def set_admin(self, user: User, is_admin: bool = True) -> User:
        user.is_admin = is_admin
        self.db.flush()
        return user

    def set_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        self.db.flush()
        return user

    def list_users(self) -> List[User]:
        stmt = select(User).order_by(User.date_created.desc(), User.id.desc())
        return list(self.db.execute(stmt).scalars().all())
