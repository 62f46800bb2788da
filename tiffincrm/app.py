# tiffincrm/app.py
import logging
import os
from datetime import datetime, timezone

# Show INFO logs even outside the werkzeug access log
logging.basicConfig(level=logging.INFO)

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException

from tiffincrm.config import Config

# Extensions
from tiffincrm.extensions import db, login_manager, migrate, cors
from tiffincrm.errors import ApiError

# Blueprints
from tiffincrm.auth import auth_bp
from tiffincrm.api.routes.customer_routes import api_customers
from tiffincrm.api.routes.menu_routes import api_menu
from tiffincrm.api.routes.order_routes import order_bp
from tiffincrm.api.routes.cart_routes import api_cart
from tiffincrm.api.routes.dashboard_routes import api_dashboard
from tiffincrm.debug_routes import debug_bp
from tiffincrm.cli import register_cli
from tiffincrm.services.seed import init_database
from tiffincrm import models as _models  # noqa: F401


def _is_production(app: Flask) -> bool:
    return app.config.get("APP_ENV") == "production"


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def _api_error(e: ApiError):
        db.session.rollback()
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def _not_found(e):
        if request.path.startswith("/api/") or not _is_production(app):
            return jsonify({
                "success": False,
                "error": "API endpoint not found",
                "requested_path": request.path,
            }), 404
        return _serve_frontend(app, request.path.lstrip("/"))

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"success": False, "error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        db.session.rollback()
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = "Internal server error" if _is_production(app) else str(e)
        return jsonify({"success": False, "error": message}), 500


def _serve_frontend(app: Flask, path: str):
    build_dir = app.config.get("FRONTEND_BUILD_DIR")
    if not build_dir or not os.path.isdir(build_dir):
        return jsonify({"success": False, "error": "Frontend build not found"}), 404
    if path and os.path.isfile(os.path.join(build_dir, path)):
        return send_from_directory(build_dir, path)
    return send_from_directory(build_dir, "index.html")


def create_app(test_config=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": app.config.get("CORS_ORIGINS") or ["http://localhost:3000"],
                "supports_credentials": True,
            }
        },
    )

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(api_customers)
    app.register_blueprint(api_menu)
    app.register_blueprint(order_bp)
    app.register_blueprint(api_cart)
    app.register_blueprint(api_dashboard)
    if not _is_production(app):
        app.register_blueprint(debug_bp)

    _register_error_handlers(app)
    register_cli(app)

    @app.get("/api/health")
    def health():
        return jsonify({
            "success": True,
            "message": "Tiffin CRM API is running!",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": app.config.get("APP_ENV"),
            "endpoints": {
                "customers": "/api/customers",
                "menu": "/api/menu",
                "orders": "/api/orders",
                "cart": "/api/cart",
                "dashboard": "/api/dashboard/stats",
                "auth": "/api/auth",
            },
        })

    if _is_production(app):
        @app.get("/")
        def index():
            return _serve_frontend(app, "")

    if app.config.get("AUTO_INIT_DB", True):
        init_database(app)

    return app


def main(test_config=None) -> None:
    """Dev server: `tiffincrm-server` or `python -m tiffincrm.app`."""
    app = create_app(test_config)
    port = app.config["PORT"]
    app.logger.info("Tiffin CRM Server running on port %s", port)
    app.logger.info("API: http://localhost:%s/api  (health: /api/health)", port)
    app.run(host="0.0.0.0", port=port, debug=not _is_production(app))


if __name__ == "__main__":
    main()
