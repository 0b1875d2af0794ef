"""
Health check endpoints.
"""

from fastapi import APIRouter

from backend import dependencies

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Love Note API"}


@router.get("/health")
async def health():
    """Health check with AI service and template status."""
    context = dependencies.message_context
    configured = bool(context and context.generator)
    template_count = len(context.templates) if context else 0

    return {
        "status": "healthy" if configured and template_count else "degraded",
        "ai_service": "configured" if configured else "not configured",
        "templates": template_count,
    }
