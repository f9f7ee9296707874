"""Gemini generateContent client: request, candidate text extraction, JSON parsing."""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

import httpx

from hopeful_futures import config
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)


class GenerativeCallError(Exception):
    """Base class for every failure of a Gemini call."""


class MissingApiKeyError(GenerativeCallError):
    """No API key configured; raised before any network traffic."""


class UpstreamRequestError(GenerativeCallError):
    """Transport failure or timeout talking to Gemini."""


class UpstreamStatusError(GenerativeCallError):
    """Gemini answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Gemini API returned {status_code}")
        self.status_code = status_code
        self.body = body


class UnparsableResponseError(GenerativeCallError):
    """The response carried no candidate text, or the text was not JSON."""


# ---- JSON extraction strategies -------------------------------------------------

_FENCED_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)
_CLOSERS = {"[": "]", "{": "}"}


@dataclass(frozen=True)
class ParseStrategy:
    """Named step: candidate JSON snippets picked out of model text, best first."""

    name: str
    extract: Callable[[str], Sequence[str]]


@dataclass(frozen=True)
class ParseOutcome:
    strategy: Optional[str]
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.strategy is not None


def _direct(text: str) -> Sequence[str]:
    return (text,)


def _fenced_block(text: str) -> Sequence[str]:
    match = _FENCED_BLOCK_RE.search(text)
    return (match.group(1),) if match else ()


def _bracket_slice(text: str) -> Sequence[str]:
    """Array and object slices (first opener to last matching closer), earliest opener first."""
    slices = []
    for opener, closer in _CLOSERS.items():
        start = text.find(opener)
        end = text.rfind(closer)
        if start != -1 and end > start:
            slices.append((start, text[start:end + 1]))
    return tuple(snippet for _, snippet in sorted(slices))


DEFAULT_STRATEGIES: Sequence[ParseStrategy] = (
    ParseStrategy("direct", _direct),
    ParseStrategy("fenced_block", _fenced_block),
    ParseStrategy("bracket_slice", _bracket_slice),
)


def try_parse_strategies(
    text: Optional[str],
    strategies: Sequence[ParseStrategy] = DEFAULT_STRATEGIES,
    expect: Optional[type] = None,
) -> ParseOutcome:
    """
    Run strategies in order; the first snippet that parses as JSON wins.
    With `expect` (dict or list), values of any other shape are skipped.
    """
    if not text or not text.strip():
        return ParseOutcome(strategy=None)
    for strategy in strategies:
        for snippet in strategy.extract(text):
            try:
                value = json.loads(snippet)
            except json.JSONDecodeError:
                logger.debug("Parse strategy %s failed", strategy.name)
                continue
            if expect is not None and not isinstance(value, expect):
                logger.debug(
                    "Parse strategy %s produced %s, expected %s",
                    strategy.name,
                    type(value).__name__,
                    expect.__name__,
                )
                continue
            return ParseOutcome(strategy=strategy.name, value=value)
    return ParseOutcome(strategy=None)


def parse_model_json(
    text: Optional[str],
    strategies: Sequence[ParseStrategy] = DEFAULT_STRATEGIES,
    expect: Optional[type] = None,
) -> Optional[Any]:
    """Parse JSON from model output, tolerating code fences and surrounding prose."""
    outcome = try_parse_strategies(text, strategies, expect)
    return outcome.value if outcome.ok else None


# ---- Request / response ----------------------------------------------------------

def build_request_body(prompt: str, temperature: float) -> dict[str, Any]:
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "responseMimeType": "application/json",
        },
    }


def extract_candidate_text(data: Any) -> Optional[str]:
    """Return the first non-empty candidate text (parts joined in order), or None."""
    if not isinstance(data, dict):
        return None
    for candidate in data.get("candidates") or []:
        content = candidate.get("content") if isinstance(candidate, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            continue
        text = "\n".join(
            p.get("text") or "" for p in parts if isinstance(p, dict)
        ).strip()
        if text:
            return text
    return None


async def generate_json(
    prompt: str,
    *,
    model: str,
    temperature: float,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
    expect: Optional[type] = None,
) -> Any:
    """
    Send one user prompt to Gemini and return the parsed JSON completion.
    `expect` (dict or list) restricts which parsed shape is accepted.
    Raises a GenerativeCallError subclass on any failure; callers fall back.
    """
    api_key = config.GEMINI_API_KEY if api_key is None else api_key
    if not api_key:
        raise MissingApiKeyError("GEMINI_API_KEY is not configured")
    base_url = (base_url or config.GEMINI_API_URL).rstrip("/")
    timeout = config.HTTP_TIMEOUT_SECONDS if timeout is None else timeout
    url = f"{base_url}/{model}:generateContent"
    body = build_request_body(prompt, temperature)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.post(url, params={"key": api_key}, json=body)
        else:
            response = await client.post(url, params={"key": api_key}, json=body, timeout=timeout)
    except httpx.TimeoutException as e:
        raise UpstreamRequestError(f"Gemini request timed out after {timeout}s") from e
    except httpx.HTTPError as e:
        raise UpstreamRequestError(f"Gemini request failed: {e}") from e

    if not response.is_success:
        logger.error("Gemini API error: %s %s", response.status_code, response.text[:500])
        raise UpstreamStatusError(response.status_code, response.text)

    try:
        data = response.json()
    except ValueError as e:
        raise UnparsableResponseError("Gemini response body is not JSON") from e

    text = extract_candidate_text(data)
    if text is None:
        raise UnparsableResponseError("Gemini response has no candidate text")
    outcome = try_parse_strategies(text, expect=expect)
    if not outcome.ok:
        raise UnparsableResponseError("The Gemini response could not be parsed as JSON")
    logger.debug("Parsed %s output via %s strategy", model, outcome.strategy)
    return outcome.value
