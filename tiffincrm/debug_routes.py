# tiffincrm/debug_routes.py
import os
import datetime as dt

from flask import Blueprint, jsonify
from sqlalchemy import inspect

from tiffincrm.extensions import db
from tiffincrm.config import _resolve_sqlite_uri

debug_bp = Blueprint("debug_bp", __name__, url_prefix="/debug")

TABLES = ("customers", "menu_items", "orders", "order_items")


@debug_bp.get("/db")
def debug_db():
    # what the env says vs. what the engine actually opened
    raw_env_url = os.getenv("DATABASE_URL")
    engine_url = str(db.engine.url)

    file_info = {"exists": False, "path": db.engine.url.database}
    path = db.engine.url.database
    if path and path != ":memory:" and os.path.exists(path):
        st = os.stat(path)
        file_info = {
            "exists": True,
            "path": path,
            "size_bytes": st.st_size,
            "mtime": dt.datetime.fromtimestamp(st.st_mtime).isoformat(),
        }

    table_names = sorted(inspect(db.engine).get_table_names())

    counts = {}
    for name in TABLES:
        if name in table_names:
            counts[name] = db.session.execute(db.text(f"SELECT COUNT(*) FROM {name}")).scalar_one()
        else:
            counts[name] = None

    return jsonify({
        "env_DATABASE_URL": raw_env_url,
        "resolved_uri": _resolve_sqlite_uri(raw_env_url),
        "engine_url": engine_url,
        "file_info": file_info,
        "tables": table_names,
        "counts": counts,
    })
