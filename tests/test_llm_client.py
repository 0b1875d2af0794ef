"""
Tests for the Gemini client and response classification.
"""

import asyncio
import json

import aiohttp

from lovenote_agent.models.generation import (
    Blocked,
    Generated,
    GenerationFailed,
    TransportFailure,
)
from lovenote_agent.services.llm_client import (
    GENERIC_BLOCK_REASON,
    GeminiClient,
    interpret_response,
)


def _candidate(text=None, finish_reason="STOP", safety=None):
    candidate = {"finishReason": finish_reason}
    if text is not None:
        candidate["content"] = {"parts": [{"text": text}], "role": "model"}
    if safety is not None:
        candidate["safetyRatings"] = safety
    return candidate


class FakeResponse:
    def __init__(self, status, body):
        self.status = status
        self._body = body if isinstance(body, str) else json.dumps(body)

    async def text(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    closed = False

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, headers=None, json=None):
        self.calls.append({"url": url, "headers": headers, "json": json})
        if self.error:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


def _client_with(session):
    client = GeminiClient(api_key="test-key", model="gemini-test")
    client._session = session
    return client


class TestInterpretResponse:
    def test_text(self):
        payload = {"candidates": [_candidate("Happy 10 days!")]}
        assert interpret_response(payload) == Generated(text="Happy 10 days!")

    def test_joins_parts(self):
        payload = {"candidates": [{"content": {"parts": [{"text": "Happy "}, {"text": "days"}]}}]}
        assert interpret_response(payload) == Generated(text="Happy days")

    def test_empty_candidates(self):
        assert interpret_response({"candidates": []}) == Blocked(reason=GENERIC_BLOCK_REASON)

    def test_missing_candidates(self):
        assert interpret_response({}) == Blocked(reason=GENERIC_BLOCK_REASON)

    def test_prompt_block_reason(self):
        payload = {"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}}
        assert interpret_response(payload) == Blocked(reason="SAFETY")

    def test_finish_reason_with_safety_ratings(self):
        ratings = [{"category": "HARM_CATEGORY_HARASSMENT", "probability": "HIGH"}]
        payload = {"candidates": [_candidate(finish_reason="SAFETY", safety=ratings)]}

        result = interpret_response(payload)

        assert isinstance(result, Blocked)
        assert result.reason.startswith("Generation stopped: SAFETY - Safety: ")
        assert "HARM_CATEGORY_HARASSMENT" in result.reason

    def test_finish_reason_without_safety_ratings(self):
        payload = {"candidates": [_candidate(finish_reason="RECITATION")]}
        assert interpret_response(payload) == Blocked(reason="Generation stopped: RECITATION")

    def test_blank_text_is_blocked(self):
        payload = {"candidates": [_candidate("   ")]}
        assert interpret_response(payload) == Blocked(reason=GENERIC_BLOCK_REASON)


class TestGeminiClient:
    def test_success(self):
        session = FakeSession(FakeResponse(200, {"candidates": [_candidate("I love you")]}))
        client = _client_with(session)

        result = asyncio.run(client.generate("Day 3: I love you."))

        assert result == Generated(text="I love you")
        assert len(session.calls) == 1
        call = session.calls[0]
        assert call["url"].endswith("/gemini-test:generateContent")
        assert call["headers"]["x-goog-api-key"] == "test-key"
        assert call["json"] == {"contents": [{"parts": [{"text": "Day 3: I love you."}]}]}

    def test_connection_error_is_transport_failure(self):
        client = _client_with(FakeSession(error=aiohttp.ClientConnectionError("connection refused")))

        result = asyncio.run(client.generate("prompt"))

        assert isinstance(result, TransportFailure)

    def test_timeout_is_transport_failure(self):
        client = _client_with(FakeSession(error=asyncio.TimeoutError()))

        result = asyncio.run(client.generate("prompt"))

        assert isinstance(result, TransportFailure)

    def test_http_error(self):
        body = {"error": {"code": 403, "message": "API key not valid"}}
        client = _client_with(FakeSession(FakeResponse(403, body)))

        result = asyncio.run(client.generate("prompt"))

        assert result == GenerationFailed(message="Gemini API error (403): API key not valid")

    def test_http_error_with_block_reason(self):
        body = {"promptFeedback": {"blockReason": "OTHER"}}
        client = _client_with(FakeSession(FakeResponse(400, body)))

        assert asyncio.run(client.generate("prompt")) == Blocked(reason="OTHER")

    def test_malformed_body(self):
        client = _client_with(FakeSession(FakeResponse(200, "<html>oops</html>")))

        result = asyncio.run(client.generate("prompt"))

        assert isinstance(result, GenerationFailed)

    def test_close(self):
        session = FakeSession()
        client = _client_with(session)

        asyncio.run(client.close())

        assert session.closed

    def test_http_error_with_html_body(self):
        client = _client_with(FakeSession(FakeResponse(503, "<html>Service Unavailable</html>")))

        result = asyncio.run(client.generate("prompt"))

        assert result == GenerationFailed(message="Gemini API error (503): <html>Service Unavailable</html>")
