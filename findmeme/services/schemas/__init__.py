from findmeme.services.schemas.memes import (
    MemeRead,
    PendingMemeRead,
    MessageRead,
    ModerationResultRead,
)
from findmeme.services.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserRead,
    TokenRead,
)
from findmeme.services.schemas.favorites import (
    FavoriteCheckRead,
)
from findmeme.services.schemas.admin import (
    StatsRead,
    BootstrapSecret,
    BootstrapAdminRequest,
    BootstrapAdminRead,
    UserListRead,
)
__all__ = [
    "MemeRead",
    "PendingMemeRead",
    "MessageRead",
    "ModerationResultRead",
    "RegisterRequest",
    "LoginRequest",
    "UserRead",
    "TokenRead",
    "FavoriteCheckRead",
    "StatsRead",
    "BootstrapSecret",
    "BootstrapAdminRequest",
    "BootstrapAdminRead",
    "UserListRead",
]
