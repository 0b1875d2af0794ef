from .services import GeminiClient

__all__ = [
    "GeminiClient",
]
