import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from nutrition_tracker.extensions import db, migrate, cors
from nutrition_tracker.routes import register_routes
from nutrition_tracker.utils.http import error


def create_app(config_object="nutrition_tracker.config.Config", overrides=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS") or [],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    register_routes(app)
    register_error_handlers(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(e):
        return error("NOT_FOUND", "Route not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return error(e.name.upper().replace(" ", "_"), e.description or e.name, e.code or 500)
        app.logger.exception("Unhandled error: %s", e)
        db.session.rollback()
        return error("INTERNAL_ERROR", "Internal server error", 500)
