# providers/gemini.py
# Gemini text generation (google-genai async client). One call per itinerary, no retries.

from __future__ import annotations
from typing import Any, Iterable

from google import genai
from google.genai import errors, types

from trip_planner.errors import MissingApiKeyError, ProviderAccessDenied

# ErrorInfo reasons meaning "this key may not call the API"
BLOCKED_REASONS = {"API_KEY_SERVICE_BLOCKED"}


def _error_reasons(details: Any) -> Iterable[str]:
    # APIError.details is the response body: {"error": {"details": [{"reason": ...}, ...]}}
    if isinstance(details, dict):
        body = details.get("error", details)
        details = body.get("details", []) if isinstance(body, dict) else []
    if not isinstance(details, list):
        return []
    return [d.get("reason") for d in details if isinstance(d, dict) and d.get("reason")]


def is_key_blocked(exc: BaseException) -> bool:
    if not isinstance(exc, errors.APIError) or exc.code != 403:
        return False
    return any(r in BLOCKED_REASONS for r in _error_reasons(exc.details))


class GeminiProvider:
    """Prompt in, free text out."""

    def __init__(self, api_key: str, model: str = "gemini-1.5-flash", json_mode: bool = False, client=None):
        if not api_key:
            raise MissingApiKeyError(
                "Missing Gemini API key. Please set GEMINI_API_KEY or GOOGLE_API_KEY environment variable."
            )
        self.model = model
        self.json_mode = json_mode
        self._client = client or genai.Client(api_key=api_key)

    def _config(self) -> types.GenerateContentConfig | None:
        if not self.json_mode:
            return None
        return types.GenerateContentConfig(response_mime_type="application/json")

    async def generate(self, prompt: str) -> str:
        try:
            resp = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config(),
            )
        except errors.APIError as e:
            if is_key_blocked(e):
                raise ProviderAccessDenied("API_KEY_SERVICE_BLOCKED", e.code) from e
            raise
        return getattr(resp, "text", None) or ""
