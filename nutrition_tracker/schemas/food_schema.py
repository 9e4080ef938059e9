from marshmallow import Schema, fields, validate, EXCLUDE
from nutrition_tracker.utils.enums import MealType

_non_negative = validate.Range(min=0)


class NutritionFieldsSchema(Schema):
    class Meta:
        # Clients send back whole records (id, timestamps...) when re-logging
        unknown = EXCLUDE

    food_name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    quantity = fields.Float(load_default=1.0, validate=_non_negative)
    unit = fields.Str(load_default="serving", validate=validate.Length(min=1, max=50))
    calories = fields.Int(load_default=0, validate=_non_negative)
    protein = fields.Float(load_default=0.0, validate=_non_negative)
    carbs = fields.Float(load_default=0.0, validate=_non_negative)
    fat = fields.Float(load_default=0.0, validate=_non_negative)
    cholesterol = fields.Float(allow_none=True, validate=_non_negative)
    sodium = fields.Float(allow_none=True, validate=_non_negative)
    sugar = fields.Float(allow_none=True, validate=_non_negative)
    vitamin_a = fields.Float(allow_none=True, validate=_non_negative)
    vitamin_c = fields.Float(allow_none=True, validate=_non_negative)
    vitamin_d = fields.Float(allow_none=True, validate=_non_negative)
    calcium = fields.Float(allow_none=True, validate=_non_negative)
    iron = fields.Float(allow_none=True, validate=_non_negative)
    meal_type = fields.Str(allow_none=True, validate=validate.OneOf([e.value for e in MealType]))


class CreateFoodEntrySchema(NutritionFieldsSchema):
    date = fields.Str(allow_none=True, load_default=None)
    notes = fields.Str(allow_none=True)


class UpdateFoodEntrySchema(NutritionFieldsSchema):
    notes = fields.Str(allow_none=True)


class FavoriteFoodSchema(NutritionFieldsSchema):
    pass


class LogFavoriteSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Str(allow_none=True, load_default=None)
    notes = fields.Str(allow_none=True, load_default=None)
