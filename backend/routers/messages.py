"""
Message generation endpoint.
"""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, Query

from lovenote_agent.models.generation import (
    Generated,
    Blocked,
    TransportFailure,
    GenerationFailed,
)
from lovenote_agent.services.template_generator import (
    ConfigurationError,
    select_template,
    render_prompt,
)

from backend.dependencies import MessageContext, get_message_context
from backend.errors import (
    InvalidInputError,
    ServiceUnavailableError,
    ContentBlockedError,
    UpstreamUnavailableError,
    InternalError,
)
from backend.schemas import MessageResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Messages"])

DAYS_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_day_count(value: Optional[str]) -> int:
    """Parse the `days` query parameter. Negative values are allowed."""
    if value is None or not DAYS_PATTERN.match(value.strip()):
        raise InvalidInputError("Invalid 'days' parameter provided.")
    try:
        return int(value.strip())
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        raise InvalidInputError("Invalid 'days' parameter provided.")


@router.get(
    "/generate-message",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_message(
    days: Optional[str] = Query(None, description="Days since the anniversary (integer)"),
    context: MessageContext = Depends(get_message_context),
):
    """
    Generate a short celebratory message for the given day count.

    Picks a random prompt template, fills in the day count and asks Gemini
    for the message. Exactly one upstream call is made per request.
    """
    logger.info(f"Received request. days={days[:32] if days else days!r}")

    if context.generator is None:
        raise ServiceUnavailableError("Backend AI service not configured")

    day_count = parse_day_count(days)

    try:
        template, index = select_template(context.templates)
    except ConfigurationError as e:
        raise ServiceUnavailableError(str(e))

    prompt = render_prompt(template, day_count)
    logger.info(f"Using prompt index {index}: {prompt!r}")

    try:
        result = await context.generator.generate(prompt)
    except Exception as e:
        logger.exception("Error generating message")
        raise InternalError(str(e))

    if isinstance(result, Generated):
        logger.info(f"Generated message: {len(result.text)} chars")
        return MessageResponse(message=result.text)
    if isinstance(result, Blocked):
        raise ContentBlockedError(result.reason)
    if isinstance(result, TransportFailure):
        logger.error(f"Transport failure: {result.detail}")
        raise UpstreamUnavailableError()
    if isinstance(result, GenerationFailed):
        raise InternalError(result.message)

    raise InternalError(f"Unexpected generation result: {type(result).__name__}")
