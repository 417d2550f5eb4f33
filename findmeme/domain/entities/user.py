# findmeme/domain/entities/user.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class UserAccount:
    """Public view of a user. Never carries the credential hash."""
    id: int
    username: str
    email: str
    is_admin: bool = False
    date_created: Optional[datetime] = None


@dataclass(frozen=True)
class AuthContext:
    """
    Identity of the caller for one request.

    Produced from a verified bearer token and passed explicitly into
    every service call that needs to know who is asking.
    """
    user_id: int
    username: str
    is_admin: bool = False
