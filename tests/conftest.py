# tests/conftest.py
from __future__ import annotations
from typing import Iterable, Optional

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from findmeme.common.settings import Settings
from findmeme.database.core.main import Base, Database, build_engine
from findmeme.database.models import Meme, User
from findmeme.database.repos.tag_repo import TagRepo
from findmeme.domain.enums.media_type import MediaType
from findmeme.domain.enums.meme_status import MemeStatus
from findmeme.services.auth.passwords import hash_password

SQLITE_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(scope="session")
def _postgres_url():
    cfg = Settings()
    if not cfg.use_testcontainers:
        yield None
        return
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(cfg.test_db_image) as pg:
        # Force psycopg driver in the URL returned by testcontainers (it defaults to psycopg2)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture()
def db_engine(_postgres_url) -> Engine:
    """
    Fresh schema per test: in-memory SQLite by default,
    a throwaway Postgres container when USE_TESTCONTAINERS=1.
    """
    engine = build_engine(_postgres_url or SQLITE_URL)
    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def database(db_engine) -> Database:
    return Database(str(db_engine.url), engine=db_engine)


@pytest.fixture()
def db(database) -> Session:
    session = database.session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ---------------------------- factories ---------------------------------------

@pytest.fixture()
def make_user(db):
    def _make(username: str = "alice", *, admin: bool = False, password: str = "secret123",
              email: Optional[str] = None) -> User:
        u = User(
            username=username,
            email=email or f"{username}@example.com",
            password_hash=hash_password(password),
            is_admin=admin,
        )
        db.add(u)
        db.flush()
        return u
    return _make


@pytest.fixture()
def make_meme(db):
    def _make(title: str = "A meme", *, status: MemeStatus = MemeStatus.approved,
              media_type: MediaType = MediaType.image, tags: Iterable[str] = (),
              user_id: Optional[int] = None) -> Meme:
        m = Meme(
            title=title,
            media_url=f"https://media.test/{title.replace(' ', '_')}.png",
            media_type=media_type,
            status=status,
            user_id=user_id,
        )
        db.add(m)
        db.flush()
        repo = TagRepo(db)
        for name in tags:
            repo.link(m.id, repo.upsert(name))
        return m
    return _make
