from datetime import datetime

from nutrition_tracker.extensions import db
from nutrition_tracker.models.nutrients import NutrientColumnsMixin


class FavoriteFood(NutrientColumnsMixin, db.Model):
    __tablename__ = "favorite_foods"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="favorites")

    def to_dict(self):
        data = {"id": self.id, "user_id": self.user_id}
        data.update(self.nutrition_dict())
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
