# tiffincrm/api/utils/responses.py
from __future__ import annotations

from typing import Type, TypeVar

from flask import jsonify, request
from pydantic import BaseModel, ValidationError

from tiffincrm.errors import ValidationFailed, from_validation_error

M = TypeVar("M", bound=BaseModel)


def ok(data=None, status: int = 200, message: str | None = None, **extra):
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if isinstance(data, list):
        body["count"] = len(data)
    body.update(extra)
    return jsonify(body), status


def _get_payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict() if request.form else {}
    if not isinstance(data, dict):
        raise ValidationFailed("Request body must be a JSON object")
    return data


def parse_body(schema: Type[M]) -> M:
    """Parse the request body into ``schema`` or raise a 400."""
    try:
        return schema.model_validate(_get_payload())
    except ValidationError as e:
        raise from_validation_error(e) from e
