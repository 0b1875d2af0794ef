"""
Pydantic schemas for the Love Note API.
"""

from .messages import MessageResponse, ErrorResponse
from .days import DaysTogetherResponse

__all__ = [
    # Messages
    "MessageResponse",
    "ErrorResponse",
    # Days
    "DaysTogetherResponse",
]
