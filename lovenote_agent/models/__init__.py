from .generation import (
    GenerationResult,
    Generated,
    Blocked,
    TransportFailure,
    GenerationFailed,
)

__all__ = [
    "GenerationResult",
    "Generated",
    "Blocked",
    "TransportFailure",
    "GenerationFailed",
]
