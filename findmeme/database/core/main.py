# findmeme/database/core/main.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from findmeme.common.logging import get_logger
from findmeme.common.settings import DBConfig

logger = get_logger(__name__)

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    # SQLite ignores ON DELETE CASCADE / SET NULL unless asked per connection
    @event.listens_for(engine, "connect")
    def _fk_pragma(dbapi_conn, _):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()


def build_engine(url: str, cfg: Optional[DBConfig] = None) -> Engine:
    cfg = cfg or DBConfig()
    if url.startswith("sqlite"):
        kw = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            kw["poolclass"] = StaticPool
        engine = create_engine(url, echo=cfg.echo, future=True, **kw)
        _enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(
        url,
        echo=cfg.echo,
        pool_size=cfg.pool_size,
        max_overflow=cfg.max_overflow,
        pool_pre_ping=cfg.pool_pre_ping,
        pool_recycle=cfg.pool_recycle,
        future=True,
    )


class Database:
    """
    Store client owning the engine (connection pool) and session factory.

    Constructed once at process start and disposed at shutdown; handed to
    request handlers through app state rather than living at module level.
    """

    def __init__(self, url: str, cfg: Optional[DBConfig] = None, *, engine: Optional[Engine] = None) -> None:
        self.url = url
        self.engine = engine or build_engine(url, cfg)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False, future=True, autoflush=False)

    @classmethod
    def from_config(cls, cfg: DBConfig) -> "Database":
        return cls(cfg.effective_url, cfg)

    def create_all(self) -> None:
        """Create missing tables from the models (dev/test; production uses Alembic)."""
        import findmeme.database.models  # noqa: F401  (register tables)
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        logger.info("Disposing database engine")
        self.engine.dispose()
