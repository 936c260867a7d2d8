from .home_routes import home_bp
from .auth_routes import auth_bp
from .meal_routes import meal_bp
from .exercise_routes import exercise_bp
from .goal_routes import goal_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(meal_bp)
    app.register_blueprint(exercise_bp)
    app.register_blueprint(goal_bp)
