# tiffincrm/config.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
PROJECT_ROOT = os.path.dirname(BASE_DIR)
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

INSTANCE_DIR = os.path.join(PROJECT_ROOT, "instance")


def _env(key: str, default=None):
    v = os.getenv(key)
    return v if v not in (None, "", "None") else default


def _env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v in (None, "", "None"):
        return default
    return str(v).strip().lower() in ("1", "true", "t", "yes", "y", "on")


def _env_list(key: str, default: str = "") -> list[str]:
    raw = _env(key, default) or ""
    return [part.strip() for part in raw.split(",") if part.strip()]


def _resolve_sqlite_uri(db_url: str | None) -> str:
    if not db_url:
        os.makedirs(INSTANCE_DIR, exist_ok=True)
        db_path = os.path.join(INSTANCE_DIR, "tiffin.db")
        return "sqlite:///" + db_path.replace("\\", "/")

    if db_url.startswith("sqlite:///") and db_url != "sqlite:///:memory:":
        raw_path = db_url.replace("sqlite:///", "", 1)
        if not os.path.isabs(raw_path):
            raw_path = os.path.join(PROJECT_ROOT, raw_path)
        db_path = os.path.normpath(raw_path)
        os.makedirs(os.path.dirname(db_path), exist_ok=True)
        return "sqlite:///" + db_path.replace("\\", "/")

    return db_url


class Config:
    SECRET_KEY = _env("SECRET_KEY", "dev-please-change-me")

    APP_ENV = (_env("APP_ENV") or _env("FLASK_ENV") or "development").strip().lower()
    PORT = int(_env("PORT", 5000))

    SQLALCHEMY_DATABASE_URI = _resolve_sqlite_uri(_env("DATABASE_URL"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_AS_ASCII = False

    # create tables on startup, then insert sample rows if customers is empty
    AUTO_INIT_DB = _env_bool("AUTO_INIT_DB", True)
    SEED_SAMPLE_DATA = _env_bool("SEED_SAMPLE_DATA", True)

    # prebuilt browser bundle, served only when APP_ENV=production
    FRONTEND_BUILD_DIR = _env("FRONTEND_BUILD_DIR", os.path.join(PROJECT_ROOT, "build"))
    CORS_ORIGINS = _env_list("CORS_ORIGINS", "http://localhost:3000")

    # cart and mock login profile live in the signed session cookie
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_HTTPONLY = True
