"""
FastAPI routers for the Love Note API.
"""

from . import health
from . import messages
from . import days

__all__ = [
    "health",
    "messages",
    "days",
]
