from flask import Blueprint
from nutrition_tracker.controllers.favorite_controller import (
    add_favorite_handler,
    list_favorites_handler,
    delete_favorite_handler,
    log_favorite_handler,
)

favorite_bp = Blueprint("favorites", __name__, url_prefix="/api/favorites")


@favorite_bp.post("/<int:user_id>")
def add_favorite(user_id):
    return add_favorite_handler(user_id)


@favorite_bp.get("/<int:user_id>")
def list_favorites(user_id):
    return list_favorites_handler(user_id)


@favorite_bp.delete("/<int:favorite_id>")
def delete_favorite(favorite_id):
    return delete_favorite_handler(favorite_id)


# Re-log a saved favorite as a food entry
@favorite_bp.post("/<int:favorite_id>/log")
def log_favorite(favorite_id):
    return log_favorite_handler(favorite_id)
