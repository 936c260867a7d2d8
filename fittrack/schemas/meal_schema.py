from marshmallow import Schema, fields, validate, EXCLUDE
from fittrack.schemas.fields import IsoDateTime
from fittrack.utils.enums import MealType

class CreateMealSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, error="Meal name is required"))
    calories = fields.Float(required=True)
    protein = fields.Float(load_default=0)
    carbs = fields.Float(load_default=0)
    fats = fields.Float(load_default=0)
    meal_type = fields.Str(required=True, data_key="mealType", validate=validate.OneOf([e.value for e in MealType]))
    date = IsoDateTime(load_default=None)
