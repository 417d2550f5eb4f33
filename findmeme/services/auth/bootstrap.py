# findmeme/services/auth/bootstrap.py
"""
One-off operational escape hatch for promoting the first admin.

Gated only by a shared secret from configuration and deliberately kept
outside AuthService: nothing here is reachable through the bearer-token /
admin dependency chain, and nothing there falls back to this.
"""
from __future__ import annotations

import hmac
from typing import List, Optional

from sqlalchemy.orm import Session

from findmeme.common.logging import get_logger
from findmeme.common.settings import AuthConfig
from findmeme.database.repos._mapping import to_user_account
from findmeme.database.repos.user_repo import UserRepo
from findmeme.domain.entities.user import UserAccount
from findmeme.domain.errors import Forbidden, NotFound, ValidationError
from findmeme.services.auth.passwords import hash_password

logger = get_logger(__name__)


class BootstrapService:
    def __init__(self, db: Session, cfg: AuthConfig) -> None:
        self.cfg = cfg
        self.users = UserRepo(db)

    def _check_secret(self, secret: Optional[str]) -> None:
        expected = self.cfg.bootstrap_secret
        if not expected:
            raise Forbidden("Bootstrap is disabled")
        if not secret or not hmac.compare_digest(secret.encode("utf-8"), expected.encode("utf-8")):
            logger.warning("Bootstrap call with invalid secret")
            raise Forbidden("Invalid secret")

    def bootstrap_admin(
        self,
        *,
        secret: Optional[str],
        username: Optional[str] = None,
        email: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> UserAccount:
        """Promote a user (found by email, else username) and optionally reset their password."""
        self._check_secret(secret)
        if not username and not email:
            raise ValidationError("Must provide username or email")

        user = self.users.get_by_email(email) if email else self.users.get_by_username(username)
        if not user:
            raise NotFound("User not found")

        if new_password:
            self.users.set_password_hash(user, hash_password(new_password))
        self.users.set_admin(user, True)
        logger.warning("Bootstrap promoted user id=%s to admin (password reset=%s)", user.id, bool(new_password))
        return to_user_account(user)

    def list_users(self, *, secret: Optional[str]) -> List[UserAccount]:
        self._check_secret(secret)
        return [to_user_account(u) for u in self.users.list_users()]
