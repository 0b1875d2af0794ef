"""
Prompt templates for the love note generator.

Templates are plain strings carrying a `{days}` marker. A template is picked
at random for each request and the marker is replaced by literal text
substitution; templates are never evaluated or passed to str.format.
"""

import json
import logging
import random
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

DAYS_MARKER = "{days}"
FALLBACK_TEMPLATE = "Happy {days} days together! My love for you grows every day."
DEFAULT_TEMPLATES_PATH = Path(__file__).parent.parent / "data" / "prompt_templates.json"


class ConfigurationError(Exception):
    """Raised when the prompt template list cannot be used."""
    pass


def load_prompt_templates(path: Union[str, Path, None] = None) -> Tuple[str, ...]:
    """
    Load the prompt template list from a JSON file.

    The file must hold a JSON array of strings. If it cannot be read or does
    not have that shape, a single fallback template is returned so the
    service still starts.

    Args:
        path: JSON file to read. Defaults to the bundled template list.

    Returns:
        Tuple of template strings, in file order
    """
    path = Path(path) if path else DEFAULT_TEMPLATES_PATH

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not load prompt templates from {path}: {e}. Using fallback template.")
        return (FALLBACK_TEMPLATE,)

    if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
        logger.warning(f"Prompt template file {path} is not a list of strings. Using fallback template.")
        return (FALLBACK_TEMPLATE,)

    templates = tuple(data)
    logger.info(f"Loaded {len(templates)} prompt templates from {path}")
    return templates


def select_template(
    templates: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Tuple[str, int]:
    """
    Pick one template uniformly at random.

    Returns:
        Tuple of (template, index). The index is only used for logging.

    Raises:
        ConfigurationError: if there are no templates
    """
    if not templates:
        raise ConfigurationError("No prompt templates configured")

    index = (rng or random).randrange(len(templates))
    return templates[index], index


def render_prompt(template: str, days: int) -> str:
    """Replace every `{days}` marker in the template with the day count."""
    return template.replace(DAYS_MARKER, str(days))
