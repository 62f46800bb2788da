# tiffincrm/auth/__init__.py

# Package-level auth_bp is the same object login_routes registers views on
from .login_routes import auth_bp  # noqa: F401
from . import user_loader  # noqa: F401  (registers the login_manager callback)
