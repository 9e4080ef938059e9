from flask import current_app
from nutrition_tracker.extensions import db
from nutrition_tracker.schemas.user_schema import CreateUserSchema
from nutrition_tracker.services.user_service import create_user, list_users, get_user_or_raise, delete_user
from nutrition_tracker.utils.http import ok, error, error_from_value_error, json_body, validate_schema, arg_int


def create_user_handler():
    data, errors = validate_schema(CreateUserSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid user data", 400, details=errors)

    try:
        user = create_user(data["name"], data.get("account_id"))
        return ok(user.to_dict(), 201)
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create user error: {e}")
        return error("UNKNOWN_ERROR", "Failed to create user", 500)


def list_users_handler(account_id=None):
    if account_id is None:
        account_id = arg_int("account_id")
    users = list_users(account_id)
    return ok([u.to_dict() for u in users])


def get_user_handler(user_id: int):
    try:
        return ok(get_user_or_raise(user_id).to_dict())
    except ValueError as e:
        return error_from_value_error(e)


def delete_user_handler(user_id: int):
    try:
        delete_user(user_id)
        return ok({"message": "User deleted successfully"})
    except ValueError as e:
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete user error: {e}")
        return error("UNKNOWN_ERROR", "Failed to delete user", 500)
