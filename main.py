"""
docextract — FastAPI Application Entry Point

Registers the document router, applies middleware, and serves the API.
"""

import logging
import contextlib
import traceback
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from docextract.config import settings
from docextract.domain.models import HealthResponse
from docextract.routers import documents

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(
        "🚀 %s is starting up (cleanup_failure_policy=%s)",
        settings.app_name,
        settings.cleanup_failure_policy.value,
    )
    yield
    # Shutdown
    logger.info("🛑 %s is shutting down", settings.app_name)


# ── App factory ───────────────────────────────────────────────
app = FastAPI(
    title=settings.app_name,
    description="Extracts text from PDF, DOCX, Markdown and plain-text uploads.",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


# ── Global Exception Handler ─────────────────────────────────
# Ensures ALL unhandled errors return proper JSON with CORS headers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {type(exc).__name__}"},
    )


# ── Routers ───────────────────────────────────────────────────
app.include_router(documents.router)


# ── Health Check ──────────────────────────────────────────────
@app.get("/", tags=["Health"], response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", service=settings.app_name)
