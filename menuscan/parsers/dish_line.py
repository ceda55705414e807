# menuscan/parsers/dish_line.py
"""
Dish Line Parser

Splits one candidate dish line into its fields:
  - price: first "$12" / "$12.50" amount on the line ("" if none)
  - name: text before the first separator (-, en-dash, em-dash or comma)
  - description: everything after it, falls back to the name

Pure regex, no state. Only the first price is pulled out; any later price
stays inside the description.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from menuscan.contracts import ensure_text


@dataclass(frozen=True)
class ParsedDishLine:
    name: str
    description: str
    price: str = ""
    raw_text: str = ""


# ── Regexes ──────────────────────────────────────────

_PRICE_RE = re.compile(r"\$(\d+(?:\.\d{2})?)")

_SEPARATOR_RE = re.compile(r"[-–—,]")


def extract_price(line: str) -> str:
    m = _PRICE_RE.search(line or "")
    return f"${m.group(1)}" if m else ""


def strip_price(line: str) -> str:
    """Remove the first price occurrence only."""
    return _PRICE_RE.sub("", line or "", count=1).strip()


def parse_dish_line(line: str) -> ParsedDishLine:
    raw = ensure_text(line, "line")
    price = extract_price(raw)
    remainder = strip_price(raw)

    parts = _SEPARATOR_RE.split(remainder)
    name = parts[0].strip()
    # later separators belong to the description; pieces are re-joined with ","
    description = ",".join(parts[1:]).strip()
    if not name:
        # line opened with a separator ("- Chef's choice"): name must not be empty
        name, description = description or remainder or raw.strip(), ""
    description = description or name

    return ParsedDishLine(name=name, description=description, price=price, raw_text=raw)
