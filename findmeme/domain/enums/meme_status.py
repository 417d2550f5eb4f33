from __future__ import annotations
from enum import StrEnum


class MemeStatus(StrEnum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
