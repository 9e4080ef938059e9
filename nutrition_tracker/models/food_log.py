from datetime import datetime

from nutrition_tracker.extensions import db
from nutrition_tracker.models.nutrients import NutrientColumnsMixin


class FoodLog(db.Model):
    __tablename__ = "food_logs"
    __table_args__ = (
        db.UniqueConstraint("user_id", "date", name="uq_food_logs_user_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="food_logs")
    entries = db.relationship("FoodEntry", back_populates="food_log", order_by="FoodEntry.id",
                              cascade="all, delete-orphan")

    def to_dict(self, include_entries=True):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_entries:
            data["entries"] = [entry.to_dict() for entry in self.entries]
        return data


class FoodEntry(NutrientColumnsMixin, db.Model):
    __tablename__ = "food_entries"

    id = db.Column(db.Integer, primary_key=True)
    food_log_id = db.Column(db.Integer, db.ForeignKey("food_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    food_log = db.relationship("FoodLog", back_populates="entries")

    def to_dict(self):
        data = {"id": self.id, "food_log_id": self.food_log_id}
        data.update(self.nutrition_dict())
        data["notes"] = self.notes
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
