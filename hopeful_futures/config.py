"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Gemini – never hardcode the key; an empty key means fallback content only
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_API_URL: str = os.getenv("GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_JOB_MODEL: str = os.getenv("GEMINI_JOB_MODEL", "models/gemini-1.5-flash")
GEMINI_SIMPLIFY_MODEL: str = os.getenv("GEMINI_SIMPLIFY_MODEL", "models/gemini-1.5-flash")
GEMINI_TRAINING_MODEL: str = os.getenv("GEMINI_TRAINING_MODEL", "models/gemini-1.5-flash")

# Sampling temperature per task (open-ended generation runs hotter)
JOB_SEARCH_TEMPERATURE: float = 0.7
SIMPLIFY_TEMPERATURE: float = 0.4
TRAINING_PLAN_TEMPERATURE: float = 0.35

# HTTP settings
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

# Backend API (FastAPI) used by the Streamlit results view
API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
API_BASE_URL: str = os.getenv("API_BASE_URL", f"http://localhost:{API_PORT}")

# Job listings
MAX_JOB_LISTINGS: int = 5
FALLBACK_JOB_COUNT: int = 5

# Location autocomplete (OpenStreetMap Nominatim, no key required)
NOMINATIM_URL: str = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
NOMINATIM_USER_AGENT: str = "HopefulFutures/1.0"
LOCATION_MIN_QUERY_LENGTH: int = 2
LOCATION_MAX_SUGGESTIONS: int = 10

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
