from flask import Blueprint
from nutrition_tracker.controllers.user_controller import (
    create_user_handler,
    list_users_handler,
    get_user_handler,
    delete_user_handler,
)

user_bp = Blueprint("users", __name__, url_prefix="/api/users")


@user_bp.post("")
def create_user():
    return create_user_handler()


@user_bp.get("")
def list_users():
    return list_users_handler()


@user_bp.get("/account/<int:account_id>")
def list_account_users(account_id):
    return list_users_handler(account_id)


@user_bp.get("/<int:user_id>")
def get_user(user_id):
    return get_user_handler(user_id)


@user_bp.delete("/<int:user_id>")
def delete_user(user_id):
    return delete_user_handler(user_id)
