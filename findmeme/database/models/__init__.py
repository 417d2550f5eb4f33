# findmeme/database/models/__init__.py

from findmeme.database.core.main import Base
from findmeme.database.models.identity import User
from findmeme.database.models.catalog import (
    Meme,
    Tag,
    MemeTag,
)
from findmeme.database.models.favorites import Favorite

__all__ = [
    "Base",
    "User",
    "Meme",
    "Tag",
    "MemeTag",
    "Favorite",
]
