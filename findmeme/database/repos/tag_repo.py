from __future__ import annotations

from sqlalchemy.orm import Session

from findmeme.database.core.dialect import upsert_insert
from findmeme.database.models.catalog import Tag, MemeTag


class TagRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def upsert(self, name: str) -> int:
        """
        Insert the tag or, if the name already exists, return the existing id.
        One statement, so concurrent submitters of the same name converge
        on a single row.
        """
        norm = name.strip().lower()
        if not norm:
            raise ValueError("Tag name must not be blank")
        table = Tag.__table__
        stmt = upsert_insert(self.db, table).values(name=norm)
        # DO UPDATE (not DO NOTHING) so RETURNING yields the id on conflict too
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.name],
            set_={"name": stmt.excluded.name},
        ).returning(table.c.id)
        return int(self.db.execute(stmt).scalar_one())

    def link(self, meme_id: int, tag_id: int) -> None:
        # uniqueness enforced by the composite PK; a repeat link is a no-op
        stmt = upsert_insert(self.db, MemeTag.__table__).values(meme_id=meme_id, tag_id=tag_id)
        self.db.execute(stmt.on_conflict_do_nothing())
