from flask import current_app
from nutrition_tracker.extensions import db
from nutrition_tracker.schemas.auth_schema import CredentialsSchema
from nutrition_tracker.services.account_service import register_account, authenticate
from nutrition_tracker.utils.http import ok, error, error_from_value_error, json_body, validate_schema


def register_handler():
    data, errors = validate_schema(CredentialsSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Username and password required", 400, details=errors)

    try:
        account = register_account(data["username"], data["password"])
    except ValueError as e:
        db.session.rollback()
        return error_from_value_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Registration error: {e}")
        return error("UNKNOWN_ERROR", "Failed to register", 500)

    return ok(account.to_dict(), 201)


def login_handler():
    data, errors = validate_schema(CredentialsSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Username and password required", 400, details=errors)

    account = authenticate(data["username"], data["password"])
    if not account:
        return error("INVALID_CREDENTIALS", "Invalid credentials", 401)

    return ok(account.to_dict())
