from flask import Flask
from fittrack.extensions import db, migrate, cors
from fittrack.routes import register_routes

def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Models must be imported before create_all / migrations see the metadata
    from fittrack.models import user, meal, exercise, goal  # noqa: F401

    db.init_app(app)
    migrate.init_app(app, db)

    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)

    return app
