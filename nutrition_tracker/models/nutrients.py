"""Nutrient columns shared by food entries and favorites."""

from nutrition_tracker.extensions import db

# Macros every entry carries
MACRO_FIELDS = ("calories", "protein", "carbs", "fat")

# Optional micros, null when not tracked
MICRO_FIELDS = (
    "cholesterol", "sodium", "sugar",
    "vitamin_a", "vitamin_c", "vitamin_d", "calcium", "iron",
)

NUTRIENT_FIELDS = MACRO_FIELDS + MICRO_FIELDS


class NutrientColumnsMixin:
    food_name = db.Column(db.String(255), nullable=False)
    quantity = db.Column(db.Float, nullable=False, default=1)
    unit = db.Column(db.String(50), nullable=False, default="serving")
    calories = db.Column(db.Integer, nullable=False, default=0)
    protein = db.Column(db.Float, nullable=False, default=0)
    carbs = db.Column(db.Float, nullable=False, default=0)
    fat = db.Column(db.Float, nullable=False, default=0)
    cholesterol = db.Column(db.Float, nullable=True)
    sodium = db.Column(db.Float, nullable=True)
    sugar = db.Column(db.Float, nullable=True)
    vitamin_a = db.Column(db.Float, nullable=True)
    vitamin_c = db.Column(db.Float, nullable=True)
    vitamin_d = db.Column(db.Float, nullable=True)
    calcium = db.Column(db.Float, nullable=True)
    iron = db.Column(db.Float, nullable=True)
    meal_type = db.Column(db.String(20), nullable=True)

    def nutrition_dict(self):
        data = {
            "food_name": self.food_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "meal_type": self.meal_type,
        }
        for field in NUTRIENT_FIELDS:
            data[field] = getattr(self, field)
        return data
