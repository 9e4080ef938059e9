"""
Food Log Controller Module

Handles daily food log endpoints:
- Fetching a day's log with its entries
- Daily totals against the user's goals
- Adding, updating and deleting food entries
"""

from flask import current_app
from nutrition_tracker.extensions import db
from nutrition_tracker.schemas.food_schema import CreateFoodEntrySchema, UpdateFoodEntrySchema
from nutrition_tracker.services.food_log_service import (
    get_log_for_date,
    add_entry,
    update_entry,
    delete_entry,
    daily_summary,
)
from nutrition_tracker.utils.http import ok, error, error_from_value_error, json_body, validate_schema, parse_iso_date


def get_food_log_handler(user_id: int, date_str: str):
    log_date = parse_iso_date(date_str)
    if log_date is None:
        return error("INVALID_DATE", "date must be YYYY-MM-DD", 400)

    log = get_log_for_date(user_id, log_date)
    return ok(log.to_dict() if log else None)


def daily_summary_handler(user_id: int, date_str: str):
    log_date = parse_iso_date(date_str)
    if log_date is None:
        return error("INVALID_DATE", "date must be YYYY-MM-DD", 400)

    try:
        return ok(daily_summary(user_id, log_date))
    except ValueError as e:
        return error_from_value_error(e)


def add_entry_handler(user_id: int):
    """
    Add a food entry to the user's log.

    Body Parameters:
        - date (optional): YYYY-MM-DD, defaults to today
        - food_name (required)
        - quantity, unit, calories, protein, carbs, fat
        - cholesterol, sodium, sugar, vitamin_a, vitamin_c, vitamin_d, calcium, iron (optional)
        - meal_type, notes (optional)
    """
    data, errors = validate_schema(CreateFoodEntrySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid food entry", 400, details=errors)

    log_date = None
    date_str = data.pop("date", None)
    if date_str:
        log_date = parse_iso_date(date_str)
        if log_date is None:
            return error("INVALID_DATE", "date must be YYYY-MM-DD", 400)

    try:
        entry = add_entry(user_id, data, log_date)
        return ok(entry.to_dict(), 201)
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Add food entry error: {e}")
        return error("UNKNOWN_ERROR", "Failed to add food entry", 500)


def update_entry_handler(entry_id: int):
    data, errors = validate_schema(UpdateFoodEntrySchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid food entry", 400, details=errors)

    try:
        entry = update_entry(entry_id, data)
        return ok(entry.to_dict())
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update food entry error: {e}")
        return error("UNKNOWN_ERROR", "Failed to update entry", 500)


def delete_entry_handler(entry_id: int):
    try:
        delete_entry(entry_id)
        return ok({"message": "Entry deleted successfully"})
    except ValueError as e:
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete food entry error: {e}")
        return error("UNKNOWN_ERROR", "Failed to delete entry", 500)
