# portal/app.py
from flask import Flask, jsonify, request

# --- Standard libs & typing ---
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from menuscan.contracts import (
    MenuInputError,
    validate_browse_payload,
    validate_regenerate_payload,
    validate_text_payload,
)
from menuscan.cuisine_detect import detect_cuisine_type
from menuscan.menu_browse import (
    dish_categories,
    filter_dishes,
    group_by_category,
    regenerate_dish_image,
)
from menuscan.menu_parser import new_session_id, parse_menu
from menuscan.menu_types import Dish
from menuscan.parsers.section_segmenter import detect_menu_sections
from portal import config

log = logging.getLogger(__name__)

# ------------------------
# App & Config
# ------------------------
app = Flask(__name__)

app.config["SECRET_KEY"] = config.SECRET_KEY
app.config["MAX_CONTENT_LENGTH"] = config.MAX_CONTENT_LENGTH
app.config["MENUSCAN_MAX_TEXT_CHARS"] = config.MENUSCAN_MAX_TEXT_CHARS

logging.basicConfig(
    level=getattr(logging, config.MENUSCAN_LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


# ------------------------
# Helpers
# ------------------------
def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _error(msg: str, status: int = 400):
    return jsonify({"ok": False, "error": msg}), status


def _json_body() -> Tuple[Any, bool]:
    """Return (payload, is_json). Non-JSON bodies come back as (None, False)."""
    if not request.is_json:
        return None, False
    payload = request.get_json(silent=True)
    return payload, payload is not None


def _read_text_payload():
    """
    Shared front half of the text endpoints.
    Returns (payload, None) on success or (None, error_response).
    """
    payload, is_json = _json_body()
    if not is_json:
        return None, _error("Expected JSON payload")
    ok, err = validate_text_payload(payload)
    if not ok:
        return None, _error(f"schema: {err}")
    max_chars = app.config["MENUSCAN_MAX_TEXT_CHARS"]
    if len(payload["text"]) > max_chars:
        return None, _error(f"text exceeds {max_chars} characters", 413)
    return payload, None


def _dishes_json(dishes: List[Dish]) -> List[Dict[str, Any]]:
    return [d.to_dict() for d in dishes]


# ------------------------
# JSON API
# ------------------------
@app.post("/api/menu/parse")
def api_parse_menu():
    payload, err = _read_text_payload()
    if err:
        return err
    session_id = payload.get("session_id") or new_session_id()
    result = parse_menu(payload["text"], session_id)
    return jsonify({
        "ok": True,
        "session_id": result.session_id,
        "cuisine": result.cuisine,
        "sections": [{"title": s.title, "count": len(s.dishes)} for s in result.sections],
        "count": len(result.dishes),
        "dishes": _dishes_json(list(result.dishes)),
    })


@app.post("/api/menu/sections")
def api_menu_sections():
    payload, err = _read_text_payload()
    if err:
        return err
    sections = detect_menu_sections(payload["text"])
    return jsonify({
        "ok": True,
        "sections": [{"title": s.title, "dishes": list(s.dishes)} for s in sections],
    })


@app.post("/api/menu/cuisine")
def api_menu_cuisine():
    payload, err = _read_text_payload()
    if err:
        return err
    return jsonify({"ok": True, "cuisine": detect_cuisine_type(payload["text"])})


@app.post("/api/dishes/browse")
def api_browse_dishes():
    payload, is_json = _json_body()
    if not is_json:
        return _error("Expected JSON payload")
    ok, err = validate_browse_payload(payload)
    if not ok:
        return _error(f"schema: {err}")

    dishes = [Dish.from_dict(d) for d in payload["dishes"]]
    filtered = filter_dishes(dishes, payload.get("category"), payload.get("search"))
    categories = dish_categories(dishes)
    grouped = group_by_category(filtered, categories[1:])
    return jsonify({
        "ok": True,
        "categories": categories,
        "count": len(filtered),
        "dishes": _dishes_json(filtered),
        "grouped": {cat: _dishes_json(items) for cat, items in grouped.items()},
    })


@app.post("/api/dishes/regenerate-image")
def api_regenerate_image():
    payload, is_json = _json_body()
    if not is_json:
        return _error("Expected JSON payload")
    ok, err = validate_regenerate_payload(payload)
    if not ok:
        return _error(f"schema: {err}")
    dish = regenerate_dish_image(Dish.from_dict(payload["dish"]), payload["session_id"])
    return jsonify({"ok": True, "dish": dish.to_dict()})


# ------------------------
# Error handlers
# ------------------------
@app.errorhandler(MenuInputError)
def _menu_input_error(e):
    return _error(str(e))


@app.errorhandler(RequestEntityTooLarge)
def _too_large(e):
    return _error("Request too large. Send less text or raise MAX_CONTENT_LENGTH.", 413)


@app.errorhandler(HTTPException)
def _http_error(e):
    return _error(e.description or e.name, e.code or 500)


@app.errorhandler(Exception)
def _server_error(e):
    log.exception("Unhandled error on %s", request.path)
    return _error(f"Server error: {e}", 500)


# ------------------------
# Diagnostics
# ------------------------
@app.get("/__ping")
def __ping():
    return jsonify({"ok": True, "time": _now_iso()})

@app.get("/__routes")
def __routes():
    return jsonify(sorted([r.rule for r in app.url_map.iter_rules()]))

# ------------------------
# Blueprint registration (core)
# ------------------------
from routes.core import core_bp

app.register_blueprint(core_bp)
# ------------------------
# Run
# ------------------------
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
