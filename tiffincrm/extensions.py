# tiffincrm/extensions.py
from flask import jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_cors import CORS

# Keep extension instances in one place to avoid circular imports
db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()
cors = CORS()


@login_manager.unauthorized_handler
def _unauthorized():
    return jsonify({"success": False, "error": "Login required"}), 401
