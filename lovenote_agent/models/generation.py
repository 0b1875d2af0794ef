"""
Result types returned by the text-generation client.

The Gemini response is classified exactly once, inside the client, into one
of these variants. Callers branch on the variant type and never look at the
raw upstream payload.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Generated:
    """The model produced usable text."""
    text: str


@dataclass(frozen=True)
class Blocked:
    """
    The model answered but withheld the content.

    `reason` is the upstream block reason or finish reason when one was
    reported, otherwise a generic description.
    """
    reason: str


@dataclass(frozen=True)
class TransportFailure:
    """The request never produced a response (connection error, timeout)."""
    detail: str = ""


@dataclass(frozen=True)
class GenerationFailed:
    """Any other failure: HTTP error status, malformed body, unexpected error."""
    message: str = ""


GenerationResult = Union[Generated, Blocked, TransportFailure, GenerationFailed]
