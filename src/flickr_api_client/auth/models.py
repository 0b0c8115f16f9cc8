"""Authentication models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Permission(str, Enum):
    READ = "read"
    WRITE = "write"
    DELETE = "delete"


@dataclass(slots=True, frozen=True)
class AuthToken:
    token: str
    perms: str | None = None
    user_nsid: str | None = None
    username: str | None = None
    fullname: str | None = None


__all__ = [
    "Permission",
    "AuthToken",
]
