"""Normalise arbitrary failure values into storable descriptions."""

from __future__ import annotations

MAX_ERROR_LENGTH = 1000


def describe_error(error: object, limit: int = MAX_ERROR_LENGTH) -> str:
    """Return ``"<TypeName>: <message>"`` for *error*, truncated to *limit*.

    Works for exceptions and for any other value a failing call may hand
    back, so callers never need to branch on the failure's type.
    """
    message = str(error).strip()
    name = type(error).__name__
    text = f"{name}: {message}" if message else name
    return text[:limit]


__all__ = ["MAX_ERROR_LENGTH", "describe_error"]
