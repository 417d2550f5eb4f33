from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, AliasChoices

from findmeme.services.schemas.auth import UserRead


class StatsRead(BaseModel):
    pending_count: int = 0
    approved_count: int = 0
    rejected_count: int = 0
    total_users: int = 0

    model_config = ConfigDict(from_attributes=True)


class BootstrapSecret(BaseModel):
    secret: Optional[str] = None


class BootstrapAdminRequest(BootstrapSecret):
    username: Optional[str] = None
    email: Optional[str] = None
    new_password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("newPassword", "new_password"),
    )


class BootstrapAdminRead(BaseModel):
    message: str
    user: UserRead


class UserListRead(BaseModel):
    users: List[UserRead]
