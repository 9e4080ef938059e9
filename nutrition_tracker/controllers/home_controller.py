from datetime import datetime, timezone
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from nutrition_tracker.extensions import db


def _status_payload():
    return {
        "status": "ok",
        "message": "Nutrition Tracker API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def home_index():
    return jsonify(_status_payload())


def health_check():
    payload = _status_payload()
    try:
        # Ping the database
        db.session.execute(db.text("SELECT 1"))
        payload["database"] = "healthy"
    except SQLAlchemyError as e:
        db.session.rollback()
        payload["database"] = f"unhealthy: {e}"
    return jsonify(payload)
