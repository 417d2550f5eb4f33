# tests/services/conftest.py
from __future__ import annotations
from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from findmeme.common.settings import AuthConfig, MediaStorageConfig, Settings
from findmeme.database.models import Meme, User
from findmeme.database.repos.tag_repo import TagRepo
from findmeme.domain.entities.meme import MediaUpload
from findmeme.domain.enums import MediaType, MemeStatus
from findmeme.domain.errors import UpstreamFailure
from findmeme.services.api.app import create_app
from findmeme.services.api.deps import get_media_storage
from findmeme.services.auth import AuthService

BOOTSTRAP_SECRET = "let-me-in"


class FakeMediaStorage:
    """In-memory MediaStoragePort; records uploads and can be told to fail."""

    def __init__(self) -> None:
        self.uploads: List[MediaUpload] = []
        self.fail = False

    def upload(self, media: MediaUpload) -> str:
        if self.fail:
            raise UpstreamFailure("Upload failed")
        self.uploads.append(media)
        return f"https://media.test/{len(self.uploads)}/{media.filename or 'blob'}"


@pytest.fixture()
def auth_cfg() -> AuthConfig:
    return AuthConfig(jwt_secret="test-secret", bootstrap_secret=BOOTSTRAP_SECRET)


@pytest.fixture()
def settings(auth_cfg) -> Settings:
    return Settings(
        app_env="test",
        auth=auth_cfg,
        storage=MediaStorageConfig(max_upload_bytes=1024),
    )


@pytest.fixture()
def media_storage() -> FakeMediaStorage:
    return FakeMediaStorage()


@pytest.fixture()
def auth_service(db, auth_cfg) -> AuthService:
    return AuthService(db, auth_cfg)


@pytest.fixture()
def api_client(database, settings, media_storage):
    """
    TestClient over a fresh schema. The app reuses the test Database and
    never creates or disposes its own; media goes to FakeMediaStorage.
    """
    app = create_app(database=database, cfg=settings)
    app.dependency_overrides[get_media_storage] = lambda: media_storage
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


# ---------------------------- API helpers -------------------------------------

@pytest.fixture()
def register_user(api_client):
    def _register(username: str, password: str = "secret123") -> Tuple[str, dict]:
        r = api_client.post(
            "/api/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert r.status_code == 201, r.text
        body = r.json()
        return body["token"], body["user"]
    return _register


@pytest.fixture()
def promote_user(database):
    def _promote(user_id: int) -> None:
        with database.session() as s, s.begin():
            s.get(User, user_id).is_admin = True
    return _promote


@pytest.fixture()
def user_token(register_user) -> str:
    token, _ = register_user("regular")
    return token


@pytest.fixture()
def admin_token(register_user, promote_user) -> str:
    token, user = register_user("boss")
    promote_user(user["id"])
    return token


@pytest.fixture()
def seed_meme(database):
    """Insert a meme straight into the store (committed) and return its id."""
    def _seed(title: str, *, status: MemeStatus = MemeStatus.approved,
              media_type: MediaType = MediaType.image, tags=()) -> int:
        with database.session() as s, s.begin():
            m = Meme(title=title, media_url="https://media.test/seed.png",
                     media_type=media_type, status=status)
            s.add(m)
            s.flush()
            repo = TagRepo(s)
            for name in tags:
                repo.link(m.id, repo.upsert(name))
            return m.id
    return _seed
