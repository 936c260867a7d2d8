"""
Ownership lookup shared by the meal, exercise and goal services.

A malformed id and a missing record are reported the same way (NotFound);
a record that exists but belongs to someone else is Forbidden.
"""

from typing import Any, Type

from fittrack.extensions import db
from fittrack.utils.errors import ForbiddenError, NotFoundError

MAX_RECORD_ID = 2**63 - 1


def parse_record_id(raw_id: Any):
    if isinstance(raw_id, bool):
        return None
    if not isinstance(raw_id, int):
        text = str(raw_id).strip()
        if not (text.isascii() and text.isdigit()):
            return None
        raw_id = int(text)
    # ids outside a signed 64-bit integer column can never exist
    return raw_id if 0 <= raw_id <= MAX_RECORD_ID else None


def get_owned_record(model: Type[db.Model], user_id: int, raw_id: Any, label: str):
    record_id = parse_record_id(raw_id)
    if record_id is None:
        raise NotFoundError(f"{label} not found")

    record = db.session.get(model, record_id)
    if record is None:
        raise NotFoundError(f"{label} not found")

    if record.user_id != user_id:
        raise ForbiddenError("Not authorized")
    return record
