from flask import Blueprint
from nutrition_tracker.controllers.ai_controller import analyze_food_handler, analyze_image_handler

ai_bp = Blueprint("ai", __name__, url_prefix="/api/ai")


@ai_bp.post("/analyze-food")
def analyze_food():
    return analyze_food_handler()


@ai_bp.post("/analyze-image")
def analyze_image():
    return analyze_image_handler()
