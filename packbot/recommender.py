"""
Recommendation client - sends the assembled prompt to an OpenAI-compatible
chat-completions endpoint (OpenRouter by default) and returns the prose.

This is the only network call in the app. Each attempt is bounded by a
timeout; network errors, 429 and 5xx are retried, other HTTP errors are not.
The packaging math never depends on it.
"""

import json
import logging
import socket
import time
import urllib.error
import urllib.request
from typing import Optional

from .config import settings
from .prompt_builder import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = (429, 500, 502, 503, 504)

# socket.timeout is only an alias of TimeoutError from Python 3.10
TIMEOUT_ERRORS = (TimeoutError, socket.timeout)


class RecommendationError(RuntimeError):
    """The provider could not produce a recommendation."""

    def __init__(self, message: str, status_code: int = 502):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RecommendationClient:
    """
    Usage:
        client = RecommendationClient()
        text = client.generate(build_recommendation_prompt(product, result))
    """

    def __init__(self, api_key: Optional[str] = None, api_url: Optional[str] = None,
                 model: Optional[str] = None, temperature: Optional[float] = None,
                 timeout: Optional[float] = None, max_retries: Optional[int] = None,
                 system_prompt: str = SYSTEM_PROMPT, retry_backoff: float = 1.0):
        self.api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self.api_url = api_url or settings.OPENROUTER_API_URL
        self.model = model or settings.OPENROUTER_MODEL
        self.temperature = temperature if temperature is not None else settings.RECOMMENDATION_TEMPERATURE
        self.timeout = timeout or settings.RECOMMENDATION_TIMEOUT_SECONDS
        self.max_retries = max_retries if max_retries is not None else settings.RECOMMENDATION_MAX_RETRIES
        self.system_prompt = system_prompt
        self.retry_backoff = retry_backoff

    def generate(self, prompt: str) -> str:
        """Return the provider's text for `prompt`. Raises RecommendationError."""
        if not self.api_key:
            raise RecommendationError("OPENROUTER_API_KEY not configured", status_code=500)

        payload = self._build_payload(prompt)
        attempts = self.max_retries + 1
        last_error = None

        for attempt in range(1, attempts + 1):
            try:
                data = self._post(payload)
                return self._parse_response(data)
            except RecommendationError as e:
                if e.status_code not in RETRYABLE_STATUS:
                    raise
                last_error = e
            logger.warning(
                "Recommendation attempt %d/%d failed: %s", attempt, attempts, last_error.message
            )
            if attempt < attempts:
                time.sleep(self.retry_backoff * attempt)

        raise last_error

    def _build_payload(self, prompt: str) -> bytes:
        return json.dumps({
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.temperature,
        }).encode("utf-8")

    def _post(self, payload: bytes) -> dict:
        """One HTTP attempt. Every failure comes out as RecommendationError."""
        req = urllib.request.Request(
            self.api_url,
            data=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                return json.loads(response.read())
        except urllib.error.HTTPError as e:
            raise RecommendationError(self._error_message(e), status_code=e.code) from e
        except urllib.error.URLError as e:
            if isinstance(e.reason, TIMEOUT_ERRORS):
                raise RecommendationError("AI service timed out", status_code=504) from e
            raise RecommendationError(f"AI service unreachable: {e.reason}", status_code=503) from e
        except TIMEOUT_ERRORS as e:
            raise RecommendationError("AI service timed out", status_code=504) from e
        except json.JSONDecodeError as e:
            raise RecommendationError("AI service returned invalid JSON", status_code=502) from e

    @staticmethod
    def _error_message(error: urllib.error.HTTPError) -> str:
        """Prefer the provider's error.message, like the chat route always did."""
        try:
            body = json.loads(error.read().decode("utf-8", errors="replace"))
            return body["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return "AI service error"

    @staticmethod
    def _parse_response(data: dict) -> str:
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise RecommendationError("AI service returned no recommendation", status_code=502) from e
