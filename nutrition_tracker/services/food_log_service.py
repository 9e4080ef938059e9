"""
Food Log Service

Handles daily food logs and their entries. A user has at most one log per
calendar date; entries are attached to the day's log, which is created on
first use.
"""

from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from nutrition_tracker.extensions import db
from nutrition_tracker.models.food_log import FoodLog, FoodEntry
from nutrition_tracker.models.goal import NutritionGoal
from nutrition_tracker.models.nutrients import NUTRIENT_FIELDS
from nutrition_tracker.services.nutrition_normalizer import round_half_up
from nutrition_tracker.services.user_service import get_user_or_raise

ENTRY_FIELDS = ("food_name", "quantity", "unit", "meal_type", "notes") + NUTRIENT_FIELDS

# Nutrient total -> goal column
GOAL_BY_NUTRIENT = {
    "calories": "calorie_goal",
    "protein": "protein_goal",
    "carbs": "carbs_goal",
    "fat": "fat_goal",
    "cholesterol": "cholesterol_goal",
    "sodium": "sodium_goal",
    "sugar": "sugar_goal",
    "vitamin_a": "vitamin_a_goal",
    "vitamin_c": "vitamin_c_goal",
    "vitamin_d": "vitamin_d_goal",
    "calcium": "calcium_goal",
    "iron": "iron_goal",
}


def get_log_for_date(user_id: int, log_date: date) -> Optional[FoodLog]:
    return FoodLog.query.filter_by(user_id=user_id, date=log_date).first()


def get_or_create_log(user_id: int, log_date: date) -> FoodLog:
    """
    Find the user's log for ``log_date`` or create it.

    The unique (user_id, date) constraint catches a concurrent insert; in that
    case the row written by the other request is returned.
    """
    log = get_log_for_date(user_id, log_date)
    if log is not None:
        return log

    log = FoodLog(user_id=user_id, date=log_date)
    db.session.add(log)
    try:
        db.session.flush()
    except IntegrityError:
        db.session.rollback()
        log = get_log_for_date(user_id, log_date)
        if log is None:
            raise
    return log


def add_entry(user_id: int, data: Dict[str, Any], log_date: Optional[date] = None) -> FoodEntry:
    """
    Add a food entry to the user's log for ``log_date`` (today when omitted).

    Raises:
        ValueError: USER_NOT_FOUND
    """
    get_user_or_raise(user_id)
    log = get_or_create_log(user_id, log_date or date.today())

    entry = FoodEntry(food_log_id=log.id)
    for field in ENTRY_FIELDS:
        if field in data:
            setattr(entry, field, data[field])
    db.session.add(entry)
    db.session.commit()
    return entry


def update_entry(entry_id: int, data: Dict[str, Any]) -> FoodEntry:
    entry = db.session.get(FoodEntry, entry_id)
    if not entry:
        raise ValueError("ENTRY_NOT_FOUND: Food entry not found")

    for field in ENTRY_FIELDS:
        if field in data:
            setattr(entry, field, data[field])
    db.session.commit()
    return entry


def delete_entry(entry_id: int) -> None:
    entry = db.session.get(FoodEntry, entry_id)
    if not entry:
        raise ValueError("ENTRY_NOT_FOUND: Food entry not found")
    db.session.delete(entry)
    db.session.commit()


def daily_summary(user_id: int, log_date: date) -> Dict[str, Any]:
    """
    Sum the day's entries and compare them with the user's goals.

    Returns:
        Dictionary with date, entry_count, totals, goals and progress (percent
        of goal, rounded, for every nutrient that has a positive goal)
    """
    get_user_or_raise(user_id)
    log = get_log_for_date(user_id, log_date)
    entries = log.entries if log else []

    totals = {field: 0.0 for field in NUTRIENT_FIELDS}
    for entry in entries:
        for field in NUTRIENT_FIELDS:
            totals[field] += float(getattr(entry, field) or 0)
    totals = {k: round(v, 1) for k, v in totals.items()}
    totals["calories"] = round_half_up(totals["calories"])

    goal = NutritionGoal.query.filter_by(user_id=user_id).first()
    progress = {}
    if goal is not None:
        for nutrient, goal_field in GOAL_BY_NUTRIENT.items():
            target = getattr(goal, goal_field)
            if target:
                progress[nutrient] = round_half_up(totals[nutrient] / float(target) * 100)

    return {
        "date": log_date.isoformat(),
        "food_log_id": log.id if log else None,
        "entry_count": len(entries),
        "totals": totals,
        "goals": goal.to_dict() if goal else None,
        "progress": progress,
    }
