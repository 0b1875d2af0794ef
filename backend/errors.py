"""
Error taxonomy for the Love Note API.

Every failure a request can end in is one of these exceptions. The handler
registered in app.py renders them as {"error": message} with the matching
status code.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error communicating with AI service."
GENERIC_FAILURE_MESSAGE = "Failed to generate message from API"


class MessageError(Exception):
    """Base exception for request failures."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(MessageError):
    """Malformed request input, e.g. a non-integer day count."""
    status_code = 400


class ServiceUnavailableError(MessageError):
    """The service is not configured (no API key, no templates)."""
    status_code = 500


class ContentBlockedError(MessageError):
    """The model declined to generate a message."""
    status_code = 400

    def __init__(self, reason: str):
        super().__init__(f"Message generation blocked or failed: {reason}")
        self.reason = reason


class UpstreamUnavailableError(MessageError):
    """Network or timeout failure talking to Gemini."""
    status_code = 502

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE):
        super().__init__(message)


class InternalError(MessageError):
    """Anything unanticipated."""
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message or GENERIC_FAILURE_MESSAGE)


async def message_error_handler(request: Request, exc: MessageError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} -> unhandled error", exc_info=exc)
    error = InternalError(str(exc))
    return JSONResponse(status_code=error.status_code, content={"error": error.message})
