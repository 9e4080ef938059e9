from datetime import datetime

from nutrition_tracker.extensions import db


class User(db.Model):
    """A tracked profile. One account may track several people."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    account_id = db.Column(db.Integer, db.ForeignKey("accounts.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    account = db.relationship("Account", back_populates="users")
    goal = db.relationship("NutritionGoal", back_populates="user", uselist=False,
                           cascade="all, delete-orphan")
    food_logs = db.relationship("FoodLog", back_populates="user",
                                cascade="all, delete-orphan")
    favorites = db.relationship("FavoriteFood", back_populates="user",
                                cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "account_id": self.account_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<User {self.id}: {self.name}>"
