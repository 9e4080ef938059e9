import base64
import binascii

from nutrition_tracker.schemas.ai_schema import AnalyzeFoodSchema, AnalyzeImageSchema
from nutrition_tracker.services.goal_service import get_goal
from nutrition_tracker.services.nutrition_ai_service import analyze_food, analyze_image, AIAnalysisError
from nutrition_tracker.utils.http import ok, error, json_body, validate_schema


def _resolve_goals(data):
    """Goals from the request body, else the stored goals of ``user_id``."""
    if data.get("goals"):
        return data["goals"]
    if data.get("user_id") is not None:
        goal = get_goal(data["user_id"])
        if goal is not None:
            return goal.to_dict()
    return None


def _decode_image(image: str, mime_type: str):
    # Accept data URLs as produced by FileReader.readAsDataURL
    if image.startswith("data:"):
        header, _, image = image.partition(",")
        declared = header[len("data:"):].split(";")[0]
        if declared:
            mime_type = declared
    return base64.b64decode(image, validate=True), mime_type


def analyze_food_handler():
    data, errors = validate_schema(AnalyzeFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid analysis request", 400, details=errors)

    goals = _resolve_goals(data)
    if not goals:
        return error("VALIDATION_ERROR", "User goals are required", 400)

    try:
        return ok(analyze_food(data["food_description"], goals))
    except AIAnalysisError as e:
        return error("AI_ANALYSIS_FAILED", "Failed to analyze food", 500, detail=str(e))


def analyze_image_handler():
    data, errors = validate_schema(AnalyzeImageSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid analysis request", 400, details=errors)

    try:
        image_bytes, mime_type = _decode_image(data["image"].strip(), data["mime_type"])
    except (binascii.Error, ValueError):
        return error("INVALID_IMAGE", "Image must be base64 encoded", 400)
    if not image_bytes:
        return error("INVALID_IMAGE", "Image data is empty", 400)

    try:
        return ok(analyze_image(image_bytes, mime_type, _resolve_goals(data)))
    except AIAnalysisError as e:
        return error("AI_ANALYSIS_FAILED", "Failed to analyze food", 500, detail=str(e))
