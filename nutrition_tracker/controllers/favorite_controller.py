from flask import current_app
from nutrition_tracker.extensions import db
from nutrition_tracker.schemas.food_schema import FavoriteFoodSchema, LogFavoriteSchema
from nutrition_tracker.services.favorite_service import add_favorite, list_favorites, delete_favorite, log_favorite
from nutrition_tracker.utils.http import ok, error, error_from_value_error, json_body, validate_schema, parse_iso_date


def add_favorite_handler(user_id: int):
    data, errors = validate_schema(FavoriteFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Missing required fields", 400, details=errors)

    try:
        favorite = add_favorite(user_id, data)
        return ok(favorite.to_dict(), 201)
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding favorite: {e}")
        return error("UNKNOWN_ERROR", "Failed to add favorite", 500)


def list_favorites_handler(user_id: int):
    return ok([f.to_dict() for f in list_favorites(user_id)])


def delete_favorite_handler(favorite_id: int):
    try:
        delete_favorite(favorite_id)
        return ok({"message": "Favorite deleted successfully"})
    except ValueError as e:
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting favorite: {e}")
        return error("UNKNOWN_ERROR", "Failed to delete favorite", 500)


def log_favorite_handler(favorite_id: int):
    data, errors = validate_schema(LogFavoriteSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid request", 400, details=errors)

    log_date = None
    if data.get("date"):
        log_date = parse_iso_date(data["date"])
        if log_date is None:
            return error("INVALID_DATE", "date must be YYYY-MM-DD", 400)

    try:
        entry = log_favorite(favorite_id, log_date, data.get("notes"))
        return ok(entry.to_dict(), 201)
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error logging favorite: {e}")
        return error("UNKNOWN_ERROR", "Failed to log favorite", 500)
