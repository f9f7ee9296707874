"""Service exports."""

from .api_client import HopefulFuturesClient
from .fallbacks import fallback_job_listings, fallback_simplified_job, fallback_training_plan
from .gemini_client import GenerativeCallError, generate_json, parse_model_json
from .location_search import search_locations
from .profile_codec import decode_profile, encode_profile
from .results_aggregator import AggregatorState, ResultsAggregator

__all__ = [
    "encode_profile",
    "decode_profile",
    "generate_json",
    "parse_model_json",
    "GenerativeCallError",
    "fallback_job_listings",
    "fallback_simplified_job",
    "fallback_training_plan",
    "HopefulFuturesClient",
    "ResultsAggregator",
    "AggregatorState",
    "search_locations",
]
