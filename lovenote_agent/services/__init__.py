from .llm_client import GeminiClient, interpret_response
from .template_generator import (
    ConfigurationError,
    DAYS_MARKER,
    FALLBACK_TEMPLATE,
    load_prompt_templates,
    select_template,
    render_prompt,
)

__all__ = [
    "GeminiClient",
    "interpret_response",
    "ConfigurationError",
    "DAYS_MARKER",
    "FALLBACK_TEMPLATE",
    "load_prompt_templates",
    "select_template",
    "render_prompt",
]
