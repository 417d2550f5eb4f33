# findmeme/services/api/deps.py
from __future__ import annotations
from typing import Generator, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from findmeme.common.settings import Settings, get_settings
from findmeme.database.core.main import Database
from findmeme.domain.entities.user import AuthContext
from findmeme.domain.ports.media_storage import MediaStoragePort
from findmeme.services.auth import AuthService, BootstrapService
from findmeme.services.catalog.service import CatalogService
from findmeme.services.favorites.service import FavoritesService
from findmeme.services.moderation.service import ModerationService
from findmeme.services.storage.cloudinary_storage import CloudinaryMediaStorage

bearer_scheme = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    """The store client created in the app lifespan."""
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """One unit of work per request: commit on success, roll back on any error."""
    with db.begin():
        yield db


def get_media_storage(cfg: Settings = Depends(get_settings)) -> Optional[MediaStoragePort]:
    """
    Provide a MediaStoragePort implementation (Cloudinary) via DI.
    None when no credentials are configured; uploads then fail as UpstreamFailure.
    """
    if not cfg.storage.configured:
        return None
    return CloudinaryMediaStorage(cfg.storage)


# ---------- identity ----------

def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials


def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    database: Database = Depends(get_database),
    cfg: Settings = Depends(get_settings),
) -> AuthContext:
    """
    Verify the bearer token and resolve the caller.
    Runs on its own short-lived session so the request's unit of work
    has not touched the store when the handler starts.
    """
    with database.session() as s:
        return AuthService(s, cfg.auth).verify(_bearer_token(credentials))


def get_optional_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    database: Database = Depends(get_database),
    cfg: Settings = Depends(get_settings),
) -> Optional[AuthContext]:
    """Like get_auth_context, but anonymous callers get None. A bad token is still a 401."""
    if credentials is None:
        return None
    return get_auth_context(credentials, database, cfg)


def get_auth_service(
    db: Session = Depends(transactional_session),
    cfg: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, cfg.auth)


def require_admin_context(
    ctx: AuthContext = Depends(get_auth_context),
    auth: AuthService = Depends(get_auth_service),
) -> AuthContext:
    return auth.require_admin(ctx)


# ---------- services ----------

def get_bootstrap_service(
    db: Session = Depends(transactional_session),
    cfg: Settings = Depends(get_settings),
) -> BootstrapService:
    return BootstrapService(db, cfg.auth)


def get_catalog_service(db: Session = Depends(transactional_session)) -> CatalogService:
    return CatalogService(db)


def get_favorites_service(db: Session = Depends(transactional_session)) -> FavoritesService:
    return FavoritesService(db)


def get_moderation_service(
    db: Session = Depends(transactional_session),
    auth: AuthService = Depends(get_auth_service),
    storage: Optional[MediaStoragePort] = Depends(get_media_storage),
    cfg: Settings = Depends(get_settings),
) -> ModerationService:
    return ModerationService(db, auth, storage=storage, storage_cfg=cfg.storage)
