# menuscan/contracts.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from menuscan.lexicon import CATEGORIES

"""
Contracts & validators for menu text coming in from OCR / the portal.

The pipeline itself is total over strings: anything that IS text parses to
something (possibly an empty dish list). The only hard failure is a value
that is not text at all, raised as MenuInputError.

The portal stays thin and calls the validate_*_payload() helpers, which
return (ok, error_message) tuples instead of raising.
"""

DishPayload = Dict[str, Any]


class MenuInputError(TypeError):
    """Raised when the pipeline is handed something that is not menu text."""


# ---------------------------------------------------------------------------
# Hard checks (raise)
# ---------------------------------------------------------------------------

def ensure_text(value: Any, field: str = "text") -> str:
    if not isinstance(value, str):
        raise MenuInputError(f"{field} must be a string, got {type(value).__name__}")
    return value


# ---------------------------------------------------------------------------
# Payload validators (return (ok, error))
# ---------------------------------------------------------------------------

def _check_optional_str(payload: Dict[str, Any], key: str) -> Optional[str]:
    if key in payload and payload[key] is not None and not isinstance(payload[key], str):
        return f"{key} must be a string"
    return None


def validate_text_payload(
    payload: Any,
    max_chars: Optional[int] = None,
) -> Tuple[bool, str]:
    """
    Validate {"text": str, "session_id": str?} request bodies.
    """
    if not isinstance(payload, dict):
        return False, "payload must be a JSON object"
    if "text" not in payload:
        return False, "missing top-level keys: text"
    if not isinstance(payload["text"], str):
        return False, "text must be a string"
    if max_chars is not None and len(payload["text"]) > max_chars:
        return False, f"text exceeds {max_chars} characters"
    err = _check_optional_str(payload, "session_id")
    if err:
        return False, err
    return True, ""


def validate_dish_payload(dish: Any, where: str = "dish") -> Tuple[bool, str]:
    if not isinstance(dish, dict):
        return False, f"{where} must be an object"
    for key in ("id", "name", "description", "price", "category", "image"):
        if key in dish and not isinstance(dish[key], str):
            return False, f"{where}.{key} must be a string"
    if not (dish.get("name") or "").strip():
        return False, f"{where}.name is required"
    if dish.get("category") and dish["category"] not in CATEGORIES:
        return False, f"{where}.category must be one of: {', '.join(CATEGORIES)}"
    ingredients = dish.get("ingredients", [])
    if not isinstance(ingredients, list) or not all(isinstance(i, str) for i in ingredients):
        return False, f"{where}.ingredients must be a list of strings"
    return True, ""


def validate_dishes_payload(dishes: Any) -> Tuple[bool, str]:
    if not isinstance(dishes, list):
        return False, "dishes must be a list"
    for i, dish in enumerate(dishes):
        ok, err = validate_dish_payload(dish, where=f"dishes[{i}]")
        if not ok:
            return False, err
    return True, ""


def validate_browse_payload(payload: Any) -> Tuple[bool, str]:
    """
    Validate {"dishes": [...], "category": str?, "search": str?}.
    """
    if not isinstance(payload, dict):
        return False, "payload must be a JSON object"
    if "dishes" not in payload:
        return False, "missing top-level keys: dishes"
    ok, err = validate_dishes_payload(payload["dishes"])
    if not ok:
        return False, err
    for key in ("category", "search"):
        err = _check_optional_str(payload, key)
        if err:
            return False, err
    return True, ""


def validate_regenerate_payload(payload: Any) -> Tuple[bool, str]:
    """
    Validate {"dish": {...}, "session_id": str}.
    """
    if not isinstance(payload, dict):
        return False, "payload must be a JSON object"
    missing: List[str] = [k for k in ("dish", "session_id") if k not in payload]
    if missing:
        return False, f"missing top-level keys: {', '.join(missing)}"
    if not isinstance(payload["session_id"], str):
        return False, "session_id must be a string"
    return validate_dish_payload(payload["dish"])
