from marshmallow import Schema, fields, validate, EXCLUDE
from fittrack.schemas.fields import IsoDateTime
from fittrack.utils.enums import ExerciseType

class CreateExerciseSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, error="Exercise name is required"))
    duration = fields.Float(required=True)
    calories_burned = fields.Float(required=True, data_key="caloriesBurned")
    exercise_type = fields.Str(required=True, data_key="exerciseType", validate=validate.OneOf([e.value for e in ExerciseType]))
    date = IsoDateTime(load_default=None)
