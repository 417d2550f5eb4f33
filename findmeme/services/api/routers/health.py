# findmeme/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from findmeme.common.settings import get_settings

cfg = get_settings()
router = APIRouter(tags=["health"])


@router.get("/healthz")
@router.get(f"{cfg.api.prefix}/health")
def healthz():
    s = get_settings()
    return {
        "ok": True,
        "status": "ok",
        "app": s.app_name,
        "env": s.app_env,
    }
