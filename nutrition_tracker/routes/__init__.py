from .home_routes import home_bp
from .auth_routes import auth_bp
from .user_routes import user_bp
from .goal_routes import goal_bp
from .food_log_routes import food_log_bp
from .favorite_routes import favorite_bp
from .ai_routes import ai_bp


def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(goal_bp)
    app.register_blueprint(food_log_bp)
    app.register_blueprint(favorite_bp)
    app.register_blueprint(ai_bp)
