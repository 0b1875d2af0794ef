"""
Gemini client for the love note generator.

Thin async wrapper around the Gemini generateContent REST endpoint.
Every call is classified into a GenerationResult so callers never probe the
raw response.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from ..models.generation import (
    GenerationResult,
    Generated,
    Blocked,
    TransportFailure,
    GenerationFailed,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_TIMEOUT_SECONDS = 20.0
GENERIC_BLOCK_REASON = "blocked or empty response"


def _block_reason(payload: Dict[str, Any]) -> Optional[str]:
    """Return promptFeedback.blockReason if the payload carries one."""
    feedback = payload.get("promptFeedback") or {}
    return feedback.get("blockReason") or None


def interpret_response(payload: Dict[str, Any]) -> GenerationResult:
    """
    Classify a successful generateContent response body.

    Only the first candidate is inspected. Text from all of its parts is
    joined; if there is none, the response counts as blocked.
    """
    candidates = payload.get("candidates") or []
    first = candidates[0] if candidates else None

    if first:
        parts = (first.get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
        if text.strip():
            return Generated(text=text)

    reason = _block_reason(payload)
    if reason is None and first and first.get("finishReason") not in (None, "STOP"):
        reason = f"Generation stopped: {first['finishReason']}"
        if first.get("safetyRatings"):
            reason += f" - Safety: {json.dumps(first['safetyRatings'])}"

    return Blocked(reason=reason or GENERIC_BLOCK_REASON)


def _interpret_error(status: int, text: str) -> GenerationResult:
    """Classify a non-2xx response. The body may not be JSON (proxy pages)."""
    try:
        payload = json.loads(text) if text else {}
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        reason = _block_reason(payload)
        if reason:
            return Blocked(reason=reason)
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return GenerationFailed(message=f"Gemini API error ({status}): {error['message']}")

    return GenerationFailed(message=f"Gemini API error ({status}): {text[:300]}")


class GeminiClient:
    """
    Async Gemini client using aiohttp.

    One session is shared across requests and closed on shutdown.
    Each generate() call makes exactly one HTTP request; there is no retry.
    """

    def __init__(
        self,
        api_key: str,
        model: str = None,
        base_url: str = None,
        timeout: float = None,
    ):
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.base_url = (base_url or DEFAULT_API_BASE).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout or DEFAULT_TIMEOUT_SECONDS)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self):
        if self._session and not self._session.closed:
            await self._session.close()

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.model}:generateContent"

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Send a prompt to Gemini.

        Args:
            prompt: Fully rendered prompt text

        Returns:
            Generated, Blocked, TransportFailure or GenerationFailed
        """
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        logger.info(f"Gemini call: model={self.model} prompt_length={len(prompt)}")

        try:
            session = await self._get_session()
            async with session.post(self.url, headers=self._get_headers(), json=body) as response:
                text = await response.text()
                logger.info(f"Gemini response: HTTP {response.status} body_size={len(text)}")

                if response.status >= 400:
                    return _interpret_error(response.status, text)

                payload = json.loads(text) if text else {}
                return interpret_response(payload)

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Gemini transport error: {type(e).__name__}: {e}")
            return TransportFailure(detail=str(e) or type(e).__name__)
        except Exception as e:
            logger.exception("Unexpected error calling Gemini")
            return GenerationFailed(message=str(e))
