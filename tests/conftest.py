"""Shared fixtures for the Love Note API tests."""

import pytest
from fastapi.testclient import TestClient

from backend.app import app
from backend.dependencies import MessageContext, get_message_context
from lovenote_agent.models.generation import Generated

TEMPLATES = ("Day {days}: I love you.", "{days} days and counting!")


class FakeGenerator:
    """Stands in for GeminiClient; returns a fixed result and records prompts."""

    def __init__(self, result=None, error=None):
        self.result = result if result is not None else Generated(text="Happy days, my love!")
        self.error = error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.result

    async def close(self):
        pass


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def make_client():
    """Build a TestClient whose message context is replaced by the given one."""

    def _make(templates=TEMPLATES, generator=None, **client_kwargs):
        context = MessageContext(templates=tuple(templates), generator=generator)
        app.dependency_overrides[get_message_context] = lambda: context
        return TestClient(app, **client_kwargs)

    yield _make
    app.dependency_overrides.clear()
