from datetime import date
from typing import Any, Dict, List, Optional

from nutrition_tracker.extensions import db
from nutrition_tracker.models.favorite import FavoriteFood
from nutrition_tracker.models.food_log import FoodEntry
from nutrition_tracker.models.nutrients import NUTRIENT_FIELDS
from nutrition_tracker.services.food_log_service import add_entry
from nutrition_tracker.services.user_service import get_user_or_raise

FAVORITE_FIELDS = ("food_name", "quantity", "unit", "meal_type") + NUTRIENT_FIELDS


def _get_favorite_or_raise(favorite_id: int) -> FavoriteFood:
    favorite = db.session.get(FavoriteFood, favorite_id)
    if not favorite:
        raise ValueError("FAVORITE_NOT_FOUND: Favorite not found")
    return favorite


def add_favorite(user_id: int, data: Dict[str, Any]) -> FavoriteFood:
    get_user_or_raise(user_id)
    favorite = FavoriteFood(user_id=user_id)
    for field in FAVORITE_FIELDS:
        if field in data:
            setattr(favorite, field, data[field])
    db.session.add(favorite)
    db.session.commit()
    return favorite


def list_favorites(user_id: int) -> List[FavoriteFood]:
    return (
        FavoriteFood.query
        .filter_by(user_id=user_id)
        .order_by(FavoriteFood.created_at.desc(), FavoriteFood.id.desc())
        .all()
    )


def delete_favorite(favorite_id: int) -> None:
    favorite = _get_favorite_or_raise(favorite_id)
    db.session.delete(favorite)
    db.session.commit()


def log_favorite(favorite_id: int, log_date: Optional[date] = None, notes: Optional[str] = None) -> FoodEntry:
    """Copy a favorite into a food entry on ``log_date`` (today when omitted)."""
    favorite = _get_favorite_or_raise(favorite_id)
    data = {field: getattr(favorite, field) for field in FAVORITE_FIELDS}
    if notes:
        data["notes"] = notes
    return add_entry(favorite.user_id, data, log_date)
