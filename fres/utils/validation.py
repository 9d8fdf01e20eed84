"""Structured validation errors."""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
    """Configuration or precondition failure.

    Attributes:
        error_type: Short machine-readable identifier (e.g. ``invalid_elites``)
        message: Human-readable description
        details: Extra context given as keyword arguments
    """

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = dict(details)

    def __str__(self) -> str:
        if not self.details:
            return f"[{self.error_type}] {self.message}"
        extra = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"[{self.error_type}] {self.message} ({extra})"


__all__ = ["ValidationError"]
