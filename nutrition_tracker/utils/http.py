import re
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import Schema, ValidationError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_TIMESTAMP_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d{3}(?:\d{3})?)?)?(?:Z|[+-]\d{2}:\d{2})?$",
    re.ASCII,
)


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def error_from_value_error(exc: ValueError, default_status: int = 400):
    """Turn a ``"CODE: message"`` ValueError raised by a service into a response."""
    text = str(exc)
    code, sep, message = text.partition(":")
    if not sep or not code.isupper():
        return error("VALIDATION_ERROR", text, default_status)
    code = code.strip()
    status = 404 if code.endswith("NOT_FOUND") else default_status
    if code.endswith("_TAKEN"):
        status = 409
    return error(code, message.strip(), status)


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any], partial: bool = False) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    try:
        return schema_cls().load(data, partial=partial), None
    except ValidationError as e:
        return None, e.messages


def arg_int(name: str, default: Optional[int] = None, min_value: Optional[int] = None, max_value: Optional[int] = None) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        v = int(raw)
    except (TypeError, ValueError):
        return default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse ``YYYY-MM-DD`` or a full ISO timestamp such as
    ``2026-03-01T18:30:00.000Z`` (the date part is kept). Anything else is None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        if _DATE_RE.match(text):
            return date.fromisoformat(text)
        if _TIMESTAMP_RE.match(text):
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text).date()
    except ValueError:
        return None
    return None
