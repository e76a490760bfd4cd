"""Gemini REST client used by the optional LLM theme word source."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

from ..core.exceptions import CrosswordError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiAPIError(CrosswordError):
    """The Gemini request failed or produced no usable text."""


class GeminiClient:
    """Sends single-turn prompts to a Gemini model over one ``requests.Session``.

    Word lists are short, so requests cap output tokens low and use a
    moderate temperature; both can be tuned per client.
    """

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key: Optional[str] = None,
        api_key_env: str = "GEMINI_API_KEY",
        temperature: float = 0.7,
        max_output_tokens: int = 512,
        timeout_seconds: float = 60.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        key = api_key or os.environ.get(api_key_env)
        if not key:
            raise GeminiAPIError(f"No Gemini API key given and {api_key_env} is unset")
        self._api_key = key
        self.model_name = model_name
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    def generate_text(self, prompt: str) -> str:
        """Return the text of the first candidate answer to ``prompt``."""

        LOGGER.debug("Gemini %s: sending %d-char prompt", self.model_name, len(prompt))
        try:
            response = self._session.post(
                GEMINI_ENDPOINT.format(model=self.model_name),
                params={"key": self._api_key},
                json=self.request_body(prompt),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise GeminiAPIError(f"Gemini call to {self.model_name} failed: {exc}") from exc

        text = self.extract_text(payload)
        if text is None:
            reason = self.finish_reason(payload)
            LOGGER.warning("Gemini returned no text (finish reason: %s)", reason)
            raise GeminiAPIError(f"Gemini returned no text (finish reason: {reason})")
        return text

    @staticmethod
    def extract_text(payload: Dict[str, Any]) -> Optional[str]:
        """Join the text parts of the first candidate that has any."""

        for candidate in payload.get("candidates") or []:
            parts = (candidate.get("content") or {}).get("parts") or []
            text = "".join(part.get("text") or "" for part in parts)
            if text:
                return text
        return None

    @staticmethod
    def finish_reason(payload: Dict[str, Any]) -> str:
        candidates = payload.get("candidates") or []
        if candidates:
            return str(candidates[0].get("finishReason", "UNKNOWN"))
        feedback = payload.get("promptFeedback") or {}
        return str(feedback.get("blockReason", "NO_CANDIDATES"))
