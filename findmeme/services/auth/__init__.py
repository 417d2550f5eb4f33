from findmeme.services.auth.service import AuthService
from findmeme.services.auth.bootstrap import BootstrapService
from findmeme.services.auth.tokens import TokenCodec

__all__ = [
    "AuthService",
    "BootstrapService",
    "TokenCodec",
]
