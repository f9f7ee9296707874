"""Utility exports."""

from .helpers import new_job_id, normalize_location, parse_multi_value, split_city_state, unique
from .logger import get_logger

__all__ = [
    "get_logger",
    "parse_multi_value",
    "split_city_state",
    "normalize_location",
    "new_job_id",
    "unique",
]
