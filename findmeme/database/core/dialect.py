# findmeme/database/core/dialect.py
from __future__ import annotations

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


def upsert_insert(session: Session, table):
    """
    Return a dialect-specific INSERT construct for `table` that supports
    `.on_conflict_do_nothing()` / `.on_conflict_do_update()`.

    Conflict handling is delegated to the store so concurrent writers of the
    same natural key resolve to one row without an application lock.
    """
    name = session.get_bind().dialect.name
    if name == "postgresql":
        return postgresql.insert(table)
    if name == "sqlite":
        return sqlite.insert(table)
    raise NotImplementedError(f"Upsert is not supported on dialect '{name}'")
