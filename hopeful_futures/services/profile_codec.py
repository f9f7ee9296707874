"""Encode a Profile into a URL-safe transport token and decode it back.

Token layout: the profile is flattened to the form's field names, multi-select
fields are JSON arrays embedded as strings, and the mapping is JSON-encoded,
base64-encoded, then percent-encoded so it fits in one query value.
"""

import base64
import binascii
import json
from typing import Any, Dict, Optional
from urllib.parse import quote, unquote

from pydantic import ValidationError

from hopeful_futures.schemas.profile import Profile
from hopeful_futures.utils.helpers import parse_multi_value
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)

# Profile attribute -> token key (form field name)
TOKEN_FIELDS: Dict[str, str] = {
    "name": "name",
    "gender": "gender",
    "homeless": "homeless",
    "race": "race",
    "interests": "interests",
    "disabilities": "disabilities",
    "medical_conditions": "medical-conditions",
    "location": "location",
}
MULTI_VALUE_FIELDS = ("race", "interests", "disabilities", "medical_conditions")

# Keys written by older form builds, consulted only when the current key is absent
LEGACY_KEYS: Dict[str, str] = {
    "interests": "interest",
    "medical_conditions": "medicalConditions",
}


def profile_to_form_data(profile: Profile) -> Dict[str, str]:
    """Flatten a profile to the token mapping. Every field is present."""
    data: Dict[str, str] = {}
    for attr, key in TOKEN_FIELDS.items():
        value = getattr(profile, attr)
        if attr in MULTI_VALUE_FIELDS:
            data[key] = json.dumps(list(value))
        else:
            data[key] = value or ""
    return data


def encode_profile(profile: Profile) -> str:
    """Serialize a profile into a transport token for the results URL."""
    payload = json.dumps(profile_to_form_data(profile))
    b64 = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return quote(b64, safe="")


def profile_from_form_data(data: Dict[str, Any]) -> Profile:
    """Build a profile from a token mapping, tolerating missing and legacy keys."""
    values: Dict[str, Any] = {}
    for attr, key in TOKEN_FIELDS.items():
        raw = data.get(key)
        if raw is None and attr in LEGACY_KEYS:
            raw = data.get(LEGACY_KEYS[attr])
        if attr in MULTI_VALUE_FIELDS:
            values[attr] = parse_multi_value(raw)
        else:
            values[attr] = raw if isinstance(raw, str) else ""
    return Profile(**values)


def decode_profile(token: Optional[str]) -> Optional[Profile]:
    """
    Decode a transport token. Returns None (never raises) when any stage fails;
    the caller shows a recovery message in that case.
    """
    if not token:
        logger.warning("Profile token is empty")
        return None
    try:
        # '+' may arrive as a space when the query string was form-decoded
        b64 = unquote(token).replace(" ", "+")
        payload = base64.b64decode(b64, validate=True).decode("utf-8")
        data = json.loads(payload)
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError and JSONDecodeError are both ValueError
        logger.warning("Could not decode profile token: %s", e)
        return None
    if not isinstance(data, dict):
        logger.warning("Profile token decoded to %s, expected an object", type(data).__name__)
        return None
    try:
        return profile_from_form_data(data)
    except ValidationError as e:
        logger.warning("Profile token failed validation: %s", e)
        return None
