from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import chat, packaging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("packbot")

app = FastAPI(
    title=settings.APP_NAME,
    description="Protective packaging specification and bulk cost estimation",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(packaging.router, prefix="/api")
app.include_router(chat.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "packbot"}


@app.on_event("startup")
def log_provider():
    """Recommendations need an API key; the calculator endpoints do not."""
    if settings.OPENROUTER_API_KEY:
        logger.info("Recommendations enabled (model %s)", settings.OPENROUTER_MODEL)
    else:
        logger.warning("OPENROUTER_API_KEY not set; /api/chat will return 500")
