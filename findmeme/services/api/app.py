from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from findmeme.common.logging import get_logger
from findmeme.common.settings import Settings, get_settings
from findmeme.database.core.main import Database
from findmeme.services.api.errors import install_error_handlers
from findmeme.services.api.routers import admin, auth, favorites, health, memes

logger = get_logger(__name__)


def create_app(database: Optional[Database] = None, cfg: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Pass `database` to run against an existing store client
    (tests); otherwise one is created from settings at startup and disposed
    at shutdown.
    """
    overrides = cfg is not None
    cfg = cfg or get_settings()
    dev = cfg.is_development

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = database is None
        db = database or Database.from_config(cfg.db)
        if dev and owned:
            db.create_all()
        app.state.database = db
        logger.info("%s API started (env=%s)", cfg.app_name, cfg.app_env)
        try:
            yield
        finally:
            if owned:
                db.dispose()

    app = FastAPI(
        title="FindMeme API",
        version="1.0.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=lifespan,
    )
    if database is not None:
        # usable without entering the lifespan (plain TestClient(app))
        app.state.database = database

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    if overrides:
        app.dependency_overrides[get_settings] = lambda: cfg

    install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(memes.router)
    app.include_router(favorites.router)
    app.include_router(admin.router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with Uvicorn on the configured host/port."""
    import uvicorn

    cfg = get_settings()
    uvicorn.run(
        "findmeme.services.api.app:app",
        host=cfg.api.host,
        port=cfg.api.port,
        log_level=cfg.log_level.lower(),
    )
