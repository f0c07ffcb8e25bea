# --- storefront/__init__.py ---
import logging

from flask import Flask, jsonify

from .config import Config
from .extensions import db, jwt, cors, migrate


def create_app(config_overrides=None, credential_verifier=None, *, config_object=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object or Config)
    if config_overrides:
        app.config.update(config_overrides)
    Config.init_app(app)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )
    migrate.init_app(app, db)

    from .services.auth_service import verifier_from_config
    app.extensions["credential_verifier"] = credential_verifier or verifier_from_config(app)

    from .errors import register_error_handlers; register_error_handlers(app)
    from .auth.jwt_callbacks import register_jwt_callbacks; register_jwt_callbacks()

    # Register blueprints
    from .auth import bp as auth_bp; app.register_blueprint(auth_bp)
    from .product import bp as product_bp; app.register_blueprint(product_bp)
    from .order import bp as order_bp; app.register_blueprint(order_bp)
    from .upload import bp as upload_bp; app.register_blueprint(upload_bp)

    from .cli import register_cli; register_cli(app)

    @app.get("/health")
    def health():
        return jsonify(ok=True, msg="API running")

    app.logger.debug("blueprints: %s", sorted(app.blueprints.keys()))

    with app.app_context():
        from . import model  # noqa: F401
        db.create_all()

    return app
