from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from flask import request, jsonify
from marshmallow import ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if data is not None:
        return data
    return request.form.to_dict() if request.form else {}


def flatten_errors(messages: Any, prefix: str = "") -> List[Dict[str, str]]:
    """Turn marshmallow's nested message dict into a flat [{field, message}] list."""
    flat: List[Dict[str, str]] = []
    if isinstance(messages, dict):
        for key, value in messages.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            flat.extend(flatten_errors(value, field))
    elif isinstance(messages, (list, tuple)):
        for item in messages:
            flat.extend(flatten_errors(item, prefix))
    else:
        flat.append({"field": prefix or "_schema", "message": str(messages)})
    return flat


def validate_schema(schema_cls, data: Any) -> Tuple[Optional[Dict[str, Any]], Optional[List[Dict[str, str]]]]:
    try:
        return schema_cls().load(data), None
    except ValidationError as e:
        return None, flatten_errors(e.messages)


def to_local_naive(value: datetime) -> datetime:
    """Stored datetimes are naive server-local time; convert aware inputs to that."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return to_local_naive(value)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        return to_local_naive(datetime.fromisoformat(text))
    except ValueError:
        return None


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def server_error(action: str):
    """Roll back, log the traceback for operators and return a bare 500."""
    from flask import current_app
    from fittrack.extensions import db

    db.session.rollback()
    current_app.logger.exception("Unexpected error while %s", action)
    return error("SERVER_ERROR", "Server Error", 500)
