from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FavoriteCheckRead(BaseModel):
    is_favorited: bool = Field(..., serialization_alias="isFavorited")

    model_config = ConfigDict(populate_by_name=True)
