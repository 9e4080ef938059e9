from marshmallow import Schema, fields, validate, EXCLUDE


class GoalsInputSchema(Schema):
    """Goals as sent by the client alongside an analysis request."""

    class Meta:
        unknown = EXCLUDE

    calorie_goal = fields.Int(required=True)
    protein_goal = fields.Float(required=True)
    carbs_goal = fields.Float(required=True)
    fat_goal = fields.Float(required=True)
    cholesterol_goal = fields.Float(allow_none=True)
    sodium_goal = fields.Float(allow_none=True)
    sugar_goal = fields.Float(allow_none=True)


class AnalyzeFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    food_description = fields.Str(required=True, validate=validate.Length(min=1))
    goals = fields.Nested(GoalsInputSchema, allow_none=True, load_default=None)
    user_id = fields.Int(allow_none=True, load_default=None)


class AnalyzeImageSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    image = fields.Str(required=True, validate=validate.Length(min=1))
    mime_type = fields.Str(load_default="image/jpeg")
    goals = fields.Nested(GoalsInputSchema, allow_none=True, load_default=None)
    user_id = fields.Int(allow_none=True, load_default=None)
