"""Authentication APIs."""

from .models import AuthToken, Permission

__all__ = [
    "AuthToken",
    "Permission",
]
