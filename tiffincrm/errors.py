# tiffincrm/errors.py
from __future__ import annotations

from pydantic import ValidationError


class ApiError(Exception):
    """Base error for anything the API reports back as a JSON error body."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message}


class NotFound(ApiError):
    status_code = 404


class ValidationFailed(ApiError):
    status_code = 400


class Conflict(ApiError):
    # duplicate phone, duplicate menu name+category, customer still has orders
    status_code = 400


def _loc(loc: tuple) -> str:
    parts = [str(p) for p in loc if p not in ("body",)]
    return ".".join(parts)


def from_validation_error(exc: ValidationError) -> ValidationFailed:
    """Turn a pydantic ValidationError into one human-readable 400."""
    messages = []
    for err in exc.errors():
        ctx = err.get("ctx") or {}
        if err.get("type") == "value_error" and "error" in ctx:
            msg = str(ctx["error"])
        else:
            msg = err.get("msg", "Invalid value")
        where = _loc(err.get("loc", ()))
        messages.append(f"{where}: {msg}" if where else msg)
    return ValidationFailed("; ".join(messages) or "Invalid request body")
