# findmeme/domain/errors.py
from __future__ import annotations


class FindMemeError(Exception):
    """Base class for errors the API maps to a client-facing status code."""

    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FindMemeError):
    default_message = "Invalid request"


class NotFound(FindMemeError):
    default_message = "Not found"


class InvalidCredentials(FindMemeError):
    default_message = "Invalid credentials"


class Unauthorized(FindMemeError):
    default_message = "Authentication required"


class Forbidden(FindMemeError):
    default_message = "Admin access required"


class Conflict(FindMemeError):
    default_message = "Already exists"


class UpstreamFailure(FindMemeError):
    default_message = "Media upload failed"
