from flask import Blueprint
from nutrition_tracker.controllers.food_log_controller import (
    get_food_log_handler,
    daily_summary_handler,
    add_entry_handler,
    update_entry_handler,
    delete_entry_handler,
)

food_log_bp = Blueprint("food_logs", __name__, url_prefix="/api/food-logs")


@food_log_bp.get("/<int:user_id>/<date_str>")
def get_food_log(user_id, date_str):
    return get_food_log_handler(user_id, date_str)


@food_log_bp.get("/<int:user_id>/<date_str>/summary")
def get_daily_summary(user_id, date_str):
    return daily_summary_handler(user_id, date_str)


@food_log_bp.post("/<int:user_id>/entries")
def add_entry(user_id):
    return add_entry_handler(user_id)


@food_log_bp.put("/entries/<int:entry_id>")
def update_entry(entry_id):
    return update_entry_handler(entry_id)


@food_log_bp.delete("/entries/<int:entry_id>")
def delete_entry(entry_id):
    return delete_entry_handler(entry_id)
