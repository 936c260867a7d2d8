from marshmallow import fields
from fittrack.utils.http import parse_iso_datetime

class IsoDateTime(fields.Field):
    """ISO-8601 date or datetime, loaded as naive server-local time."""

    default_error_messages = {"invalid": "Not a valid ISO-8601 date."}

    def _deserialize(self, value, attr, data, **kwargs):
        parsed = parse_iso_datetime(value)
        if parsed is None:
            raise self.make_error("invalid")
        return parsed

    def _serialize(self, value, attr, obj, **kwargs):
        return value.isoformat() if value is not None else None
