from marshmallow import Schema, fields, validate, EXCLUDE, pre_load
from fittrack.utils.enums import Gender, FitnessGoal

class RegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=6, error="password must be at least 6 characters"))
    age = fields.Int(allow_none=True, validate=validate.Range(min=0, max=120))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0))
    height = fields.Float(allow_none=True, validate=validate.Range(min=0))
    gender = fields.Str(allow_none=True, validate=validate.OneOf([e.value for e in Gender]))
    fitness_goal = fields.Str(allow_none=True, data_key="fitnessGoal", validate=validate.OneOf([e.value for e in FitnessGoal]))
    daily_calorie_goal = fields.Float(load_default=2000, data_key="dailyCalorieGoal", validate=validate.Range(min=0))

    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("email"), str):
            data = dict(data)
            data["email"] = data["email"].strip().lower()
        return data

class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=1))
