# menuscan/image_ref.py
"""
Image reference resolution.

Maps a composed dish prompt to a stock photo from FOOD_IMAGE_IDS. The photo
choice is deterministic for a given prompt; the returned URL additionally
carries the session id and a per-call freshness token so every resolution
is a distinct (cache-busting) but traceable reference.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple
from urllib.parse import urlencode
import uuid

from menuscan.lexicon import (
    DEFAULT_IMAGE_ID,
    FOOD_IMAGE_IDS,
    FOOD_TERMS,
    IMAGE_URL_TEMPLATE,
)


def extract_food_keywords(prompt: str, terms: Sequence[str] = FOOD_TERMS) -> List[str]:
    lower = (prompt or "").lower()
    return [t for t in terms if t in lower]


def select_image_id(
    prompt: str,
    table: Sequence[Tuple[str, str]] = FOOD_IMAGE_IDS,
    default: str = DEFAULT_IMAGE_ID,
) -> str:
    """
    Pick the photo id for a prompt.

    Only the highest-priority food keyword is considered. Terms without a
    photo of their own ("sandwich", "ice cream") fall through to the default.
    """
    keywords = extract_food_keywords(prompt)
    if not keywords:
        return default
    search_term = keywords[0]
    for food, image_id in table:
        if food in search_term:
            return image_id
    return default


def new_freshness_token() -> str:
    return uuid.uuid4().hex[:8]


def build_image_url(image_id: str, session_id: str, freshness: Optional[str] = None, **extra: str) -> str:
    params = {"sid": session_id, "v": freshness or new_freshness_token()}
    params.update(extra)
    return f"{IMAGE_URL_TEMPLATE.format(image_id=image_id)}&{urlencode(params)}"


def generate_image_url(prompt: str, session_id: str, freshness: Optional[str] = None) -> str:
    return build_image_url(select_image_id(prompt), session_id, freshness)
