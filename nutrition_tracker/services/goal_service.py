from typing import Any, Dict, Optional

from nutrition_tracker.extensions import db
from nutrition_tracker.models.goal import NutritionGoal, GOAL_FIELDS
from nutrition_tracker.services.user_service import get_user_or_raise


def get_goal(user_id: int) -> Optional[NutritionGoal]:
    return NutritionGoal.query.filter_by(user_id=user_id).first()


def upsert_goal(user_id: int, data: Dict[str, Any]) -> NutritionGoal:
    """
    Create the user's goal or update the fields present in ``data``.

    Args:
        user_id: User ID
        data: Validated goal fields (a full set on creation, any subset on update)

    Raises:
        ValueError: USER_NOT_FOUND
    """
    get_user_or_raise(user_id)

    goal = get_goal(user_id)
    if goal is None:
        goal = NutritionGoal(user_id=user_id)
        db.session.add(goal)

    for field in GOAL_FIELDS:
        if field in data:
            setattr(goal, field, data[field])

    db.session.commit()
    return goal
