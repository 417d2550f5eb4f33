# findmeme/services/auth/tokens.py
"""
Bearer token issue/verify on top of PyJWT.

Tokens are HS256-signed and carry the user id in ``sub`` (as a string,
per RFC 7519) along with ``iat`` and ``exp``. Verification failures of
any kind surface as ``Unauthorized`` so callers never see library errors.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from findmeme.common.settings import AuthConfig
from findmeme.domain.errors import Unauthorized


class TokenCodec:
    def __init__(self, cfg: AuthConfig) -> None:
        self.secret = cfg.jwt_secret
        self.algorithm = cfg.jwt_algo
        self.ttl = timedelta(minutes=cfg.token_ttl_minutes)

    def issue(self, user_id: int, *, now: Optional[datetime] = None, ttl: Optional[timedelta] = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": issued,
            "exp": issued + (ttl if ttl is not None else self.ttl),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: Optional[str]) -> int:
        """Return the user id carried by a valid token."""
        if not token:
            raise Unauthorized("Authentication required")
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise Unauthorized("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise Unauthorized("Invalid token") from e
        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise Unauthorized("Invalid token") from e
