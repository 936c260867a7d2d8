from marshmallow import Schema, fields, validate, EXCLUDE
from fittrack.schemas.fields import IsoDateTime
from fittrack.utils.enums import GoalType

class CreateGoalSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    goal_type = fields.Str(required=True, data_key="goalType", validate=validate.OneOf([e.value for e in GoalType]))
    target = fields.Float(required=True)
    current = fields.Float(load_default=0)
    start_date = IsoDateTime(load_default=None, data_key="startDate")
    end_date = IsoDateTime(required=True, data_key="endDate")

class UpdateGoalSchema(Schema):
    # Only keys present in the request end up in the loaded dict
    class Meta:
        unknown = EXCLUDE

    current = fields.Float()
    is_completed = fields.Bool(data_key="isCompleted")
