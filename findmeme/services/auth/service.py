# findmeme/services/auth/service.py
from __future__ import annotations

from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from findmeme.common.logging import get_logger
from findmeme.common.settings import AuthConfig
from findmeme.database.repos._mapping import to_user_account
from findmeme.database.repos.user_repo import UserRepo
from findmeme.domain.entities.user import AuthContext, UserAccount
from findmeme.domain.errors import (
    Conflict, Forbidden, InvalidCredentials, Unauthorized, ValidationError,
)
from findmeme.services.auth.passwords import hash_password, verify_password
from findmeme.services.auth.tokens import TokenCodec

logger = get_logger(__name__)


class AuthService:
    """
    Registration, login, and the two checks every protected route runs:
    `verify` (who is calling) and `require_admin` (may they moderate).
    """

    def __init__(self, db: Session, cfg: AuthConfig, codec: Optional[TokenCodec] = None) -> None:
        self.db = db
        self.cfg = cfg
        self.codec = codec or TokenCodec(cfg)
        self.users = UserRepo(db)

    # ---------- accounts ----------

    def register(self, *, username: str, email: str, password: str) -> Tuple[str, UserAccount]:
        username = (username or "").strip()
        email = (email or "").strip().lower()
        if not username or not email or not password:
            raise ValidationError("Username, email and password are required")
        if "@" not in email:
            raise ValidationError("Invalid email address")
        if len(password) < self.cfg.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.cfg.min_password_length} characters"
            )

        if self.users.get_by_username(username) or self.users.get_by_email(email):
            raise Conflict("Username or email already exists")
        try:
            user = self.users.create(username=username, email=email, password_hash=hash_password(password))
        except IntegrityError as e:
            # lost a race with a concurrent registration
            raise Conflict("Username or email already exists") from e

        logger.info("Registered user id=%s username=%s", user.id, user.username)
        return self.codec.issue(user.id), to_user_account(user)

    def authenticate(self, username_or_email: str, password: str) -> Tuple[str, UserAccount]:
        if not username_or_email or not password:
            raise InvalidCredentials()
        user = self.users.get_by_login(username_or_email)
        if not user or not verify_password(user.password_hash, password):
            logger.warning("Failed login for %r", username_or_email)
            raise InvalidCredentials()
        return self.codec.issue(user.id), to_user_account(user)

    # ---------- request checks ----------

    def verify(self, token: Optional[str]) -> AuthContext:
        user_id = self.codec.decode(token)
        user = self.users.get(user_id)
        if not user:
            raise Unauthorized("User no longer exists")
        return AuthContext(user_id=user.id, username=user.username, is_admin=bool(user.is_admin))

    def require_admin(self, ctx: Optional[AuthContext]) -> AuthContext:
        """
        Re-read the admin flag from the store; the token alone never grants it.
        """
        if ctx is None:
            raise Unauthorized()
        user = self.users.get(ctx.user_id)
        if not user or not user.is_admin:
            raise Forbidden()
        return AuthContext(user_id=user.id, username=user.username, is_admin=True)

    def me(self, ctx: AuthContext) -> UserAccount:
        user = self.users.get(ctx.user_id)
        if not user:
            raise Unauthorized("User no longer exists")
        return to_user_account(user)
