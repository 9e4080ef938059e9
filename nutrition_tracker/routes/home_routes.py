from flask import Blueprint
from nutrition_tracker.controllers.home_controller import home_index, health_check

home_bp = Blueprint("home", __name__)


@home_bp.get("/")
def home():
    return home_index()


@home_bp.get("/health")
def health():
    return home_index()


@home_bp.get("/api/health")
def api_health():
    return health_check()
