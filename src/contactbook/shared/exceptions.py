"""
Shared exceptions.

Each error maps to one HTTP status in the application factory; the
``message`` is what the caller sees, ``details`` stays server-side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    message: str = "Application error"
    details: Optional[dict[str, Any]] = None

    status_code = 500

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Caller-supplied data failed a precondition."""

    status_code = 400


class NotFoundError(AppError):
    """Referenced record does not exist."""

    status_code = 404


class StorageError(AppError):
    """The persistence layer failed."""

    status_code = 500
