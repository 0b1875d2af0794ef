"""
FastAPI dependencies for the Love Note API.
Provides the shared template list and Gemini client.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from lovenote_agent.services.llm_client import GeminiClient
from lovenote_agent.services.template_generator import load_prompt_templates

from backend.backend_config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    GEMINI_API_BASE,
    GEMINI_TIMEOUT_SECONDS,
    PROMPT_TEMPLATES_PATH,
)
from backend.errors import ServiceUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageContext:
    """
    Process-wide, read-only state used by the message endpoint.

    `generator` is None when no Gemini API key is configured. Any object with
    an async `generate(prompt)` returning a GenerationResult can stand in for
    the Gemini client.
    """
    templates: Tuple[str, ...]
    generator: Optional[GeminiClient] = None


# Global context (initialized in app lifespan)
message_context: Optional[MessageContext] = None


def get_message_context() -> MessageContext:
    """Get the global message context."""
    if message_context is None:
        raise ServiceUnavailableError("Backend AI service not configured")
    return message_context


def init_message_context() -> MessageContext:
    """Load templates and build the Gemini client. Called during app startup."""
    global message_context

    templates = load_prompt_templates(PROMPT_TEMPLATES_PATH or None)

    generator = None
    if GEMINI_API_KEY:
        generator = GeminiClient(
            api_key=GEMINI_API_KEY,
            model=GEMINI_MODEL,
            base_url=GEMINI_API_BASE,
            timeout=GEMINI_TIMEOUT_SECONDS,
        )
        logger.info(f"Gemini client initialized (model={GEMINI_MODEL})")
    else:
        logger.warning("GEMINI_API_KEY is not set. Message generation will fail.")

    message_context = MessageContext(templates=templates, generator=generator)
    return message_context


async def close_message_context():
    """Close the Gemini client. Called during app shutdown."""
    global message_context
    if message_context and message_context.generator:
        await message_context.generator.close()
    message_context = None
