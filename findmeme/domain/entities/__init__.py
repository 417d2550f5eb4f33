from findmeme.domain.entities.meme import MemeView, MediaUpload, ModerationStats
from findmeme.domain.entities.user import UserAccount, AuthContext

__all__ = [
    "MemeView",
    "MediaUpload",
    "ModerationStats",
    "UserAccount",
    "AuthContext",
]
