"""Coercion helpers for loosely-typed XML values."""

from __future__ import annotations


def to_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, dict):
        # element carrying attributes as well as text
        return to_text(value.get("content"))
    return str(value)


def to_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return None
        digits = text[1:] if text[0] in "+-" else text
        if digits.isascii() and digits.isdigit():
            return int(text)
    return None


def to_flag(value: object) -> bool | None:
    number = to_int(value)
    if number is None:
        return None
    return number != 0


__all__ = [
    "to_text",
    "to_int",
    "to_flag",
]
