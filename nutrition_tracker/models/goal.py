from datetime import datetime

from nutrition_tracker.extensions import db

GOAL_FIELDS = (
    "calorie_goal", "protein_goal", "carbs_goal", "fat_goal",
    "cholesterol_goal", "sodium_goal", "sugar_goal",
    "vitamin_a_goal", "vitamin_c_goal", "vitamin_d_goal", "calcium_goal", "iron_goal",
)


class NutritionGoal(db.Model):
    __tablename__ = "nutrition_goals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    calorie_goal = db.Column(db.Integer, nullable=False)
    protein_goal = db.Column(db.Float, nullable=False)
    carbs_goal = db.Column(db.Float, nullable=False)
    fat_goal = db.Column(db.Float, nullable=False)
    cholesterol_goal = db.Column(db.Float, nullable=True)
    sodium_goal = db.Column(db.Float, nullable=True)
    sugar_goal = db.Column(db.Float, nullable=True)
    vitamin_a_goal = db.Column(db.Float, nullable=True)
    vitamin_c_goal = db.Column(db.Float, nullable=True)
    vitamin_d_goal = db.Column(db.Float, nullable=True)
    calcium_goal = db.Column(db.Float, nullable=True)
    iron_goal = db.Column(db.Float, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="goal")

    def to_dict(self):
        data = {"id": self.id, "user_id": self.user_id}
        for field in GOAL_FIELDS:
            data[field] = getattr(self, field)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
