from marshmallow import Schema, fields, validate

_non_negative = validate.Range(min=0)


class GoalSchema(Schema):
    calorie_goal = fields.Int(required=True, validate=_non_negative)
    protein_goal = fields.Float(required=True, validate=_non_negative)
    carbs_goal = fields.Float(required=True, validate=_non_negative)
    fat_goal = fields.Float(required=True, validate=_non_negative)
    cholesterol_goal = fields.Float(allow_none=True, validate=_non_negative)
    sodium_goal = fields.Float(allow_none=True, validate=_non_negative)
    sugar_goal = fields.Float(allow_none=True, validate=_non_negative)
    vitamin_a_goal = fields.Float(allow_none=True, validate=_non_negative)
    vitamin_c_goal = fields.Float(allow_none=True, validate=_non_negative)
    vitamin_d_goal = fields.Float(allow_none=True, validate=_non_negative)
    calcium_goal = fields.Float(allow_none=True, validate=_non_negative)
    iron_goal = fields.Float(allow_none=True, validate=_non_negative)
