from flask import current_app
from nutrition_tracker.extensions import db
from nutrition_tracker.schemas.goal_schema import GoalSchema
from nutrition_tracker.services.goal_service import get_goal, upsert_goal
from nutrition_tracker.utils.http import ok, error, error_from_value_error, json_body, validate_schema


def get_goals_handler(user_id: int):
    goal = get_goal(user_id)
    return ok(goal.to_dict() if goal else None)


def set_goals_handler(user_id: int):
    # Creation needs the four macro goals, an update may send any subset
    existing = get_goal(user_id)
    data, errors = validate_schema(GoalSchema, json_body(), partial=existing is not None)
    if errors:
        return error("VALIDATION_ERROR", "Invalid goal data", 400, details=errors)

    try:
        goal = upsert_goal(user_id, data)
        return ok(goal.to_dict())
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Set goals error: {e}")
        return error("UNKNOWN_ERROR", "Failed to set goals", 500)
