"""
Love Note Backend API
FastAPI server that generates celebratory messages for the days-together page
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.backend_config import ALLOWED_ORIGINS, HOST, PORT, LOG_LEVEL
from backend.dependencies import init_message_context, close_message_context
from backend.errors import MessageError, message_error_handler, unhandled_error_handler
from backend.routers import health, messages, days

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# FASTAPI APP WITH LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage template list and Gemini client lifecycle."""
    init_message_context()
    yield
    await close_message_context()


app = FastAPI(
    title="Love Note API",
    description="Backend API for the days-together love note page",
    version="1.0.0",
    lifespan=lifespan
)

# CORS - allow the frontend dev server to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_exception_handler(MessageError, message_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(health.router)
app.include_router(messages.router, prefix="/api")
app.include_router(days.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Backend server listening on http://localhost:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
