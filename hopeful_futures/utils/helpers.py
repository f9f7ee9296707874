"""Helper utilities for Hopeful Futures."""

import json
import secrets
import time
from typing import Any, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


def unique(values: Iterable[T]) -> List[T]:
    """De-duplicate preserving first occurrence."""
    return list(dict.fromkeys(values))


def parse_multi_value(value: Any) -> List[str]:
    """
    Coerce a multi-select value into a list of unique strings.
    Accepts a list, a JSON-encoded list, or a comma-separated string; anything
    else (including None) yields an empty list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return unique(v.strip() for v in value if isinstance(v, str) and v.strip())
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return parse_multi_value(parsed)
        return unique(part.strip() for part in text.split(",") if part.strip())
    return []


def split_city_state(location: str) -> Tuple[str, str]:
    """Split 'City, State' into (city, state). State is '' when absent."""
    raw = (location or "").strip()
    parts = raw.split(",")
    city = parts[0].strip() or raw
    state = parts[1].strip() if len(parts) > 1 else ""
    return city, state


def normalize_location(location: str) -> str:
    """Reduce a free-text location to 'City, State' (or just 'City')."""
    city, state = split_city_state(location)
    return f"{city}, {state}" if state else city


def new_job_id(index: int) -> str:
    """Generate a unique listing id such as 'job-1-1700000000000-k3j9x0q2a'."""
    millis = int(time.time() * 1000)
    return f"job-{index}-{millis}-{secrets.token_hex(5)[:9]}"
