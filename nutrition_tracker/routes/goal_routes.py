from flask import Blueprint
from nutrition_tracker.controllers.goal_controller import get_goals_handler, set_goals_handler

goal_bp = Blueprint("goals", __name__, url_prefix="/api/goals")


@goal_bp.get("/<int:user_id>")
def get_goals(user_id):
    return get_goals_handler(user_id)


@goal_bp.post("/<int:user_id>")
def set_goals(user_id):
    return set_goals_handler(user_id)
