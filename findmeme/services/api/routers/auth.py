from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends

from findmeme.common.settings import get_settings
from findmeme.domain.entities.user import AuthContext
from findmeme.services.api.deps import get_auth_context, get_auth_service
from findmeme.services.auth import AuthService
from findmeme.services.mappers.meme import to_user_read
from findmeme.services.schemas import LoginRequest, RegisterRequest, TokenRead, UserRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/auth", tags=["auth"])


@router.post("/register", response_model=TokenRead, status_code=HTTPStatus.CREATED)
def register(payload: RegisterRequest, auth: AuthService = Depends(get_auth_service)) -> TokenRead:
    token, user = auth.register(username=payload.username, email=payload.email, password=payload.password)
    return TokenRead(token=token, user=to_user_read(user))


@router.post("/login", response_model=TokenRead)
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)) -> TokenRead:
    token, user = auth.authenticate(payload.login, payload.password)
    return TokenRead(token=token, user=to_user_read(user))


@router.get("/me", response_model=UserRead)
def me(
    ctx: AuthContext = Depends(get_auth_context),
    auth: AuthService = Depends(get_auth_service),
) -> UserRead:
    return to_user_read(auth.me(ctx))
