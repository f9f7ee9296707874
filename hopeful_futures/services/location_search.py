"""City/state suggestions from OpenStreetMap Nominatim for the location field."""

import re
from typing import Any, List, Optional

import httpx

from hopeful_futures import config
from hopeful_futures.utils.helpers import unique
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)

_STATE_CODE_RE = re.compile(r"^[A-Z]{2}$")


def format_place(item: dict[str, Any]) -> str:
    """Render one Nominatim result as 'City, State' where possible."""
    address = item.get("address") or {}
    city = address.get("city") or address.get("town")
    state = address.get("state")
    if city and state:
        return f"{city}, {state}"
    if city:
        return city

    display_name = item.get("display_name") or ""
    parts = [p.strip() for p in display_name.split(",")]
    if len(parts) >= 2:
        state_part = next((p for p in parts if _STATE_CODE_RE.match(p)), None) or parts[-2]
        if state_part:
            return f"{parts[0]}, {state_part}"
        return f"{parts[0]}, {parts[-1]}"
    return display_name


async def search_locations(
    query: str,
    limit: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[str]:
    """Return up to `limit` unique place names; failures log and return []."""
    limit = config.LOCATION_MAX_SUGGESTIONS if limit is None else limit
    query = (query or "").strip()
    if len(query) < config.LOCATION_MIN_QUERY_LENGTH:
        return []

    params: dict[str, Any] = {
        "format": "json",
        "q": query,
        "limit": 20,
        "addressdetails": 1,
        "countrycodes": "us",
        "featuretype": "city",
    }
    headers = {
        "User-Agent": config.NOMINATIM_USER_AGENT,
        "Accept-Language": "en-US,en;q=0.9",
    }

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT_SECONDS) as own_client:
                response = await own_client.get(config.NOMINATIM_URL, params=params, headers=headers)
        else:
            response = await client.get(config.NOMINATIM_URL, params=params, headers=headers)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Nominatim HTTP error: %s %s", e.response.status_code, e.response.text[:200])
        return []
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Nominatim request failed: %s", e)
        return []

    if not isinstance(data, list):
        logger.error("Unexpected Nominatim response format: %s", type(data).__name__)
        return []

    places = [format_place(item) for item in data if isinstance(item, dict)]
    return unique(p for p in places if p)[:limit]
