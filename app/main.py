# app/main.py

"""
Main FastAPI application entrypoint for the Letter Trainer API.

This file is responsible for:
  - Creating the FastAPI app instance.
  - Configuring logging.
  - Enabling CORS so the mobile/web client can call the API.
  - Registering all routers (one per learning activity).
  - Exposing a simple root endpoint.
  - Attaching lifecycle hooks (startup/shutdown).
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dotenv import load_dotenv
load_dotenv()  # will read .env in project root

# Local imports (project-specific)
from app.core.config import settings               # Global settings (env-based, see config.py)
from app.core.logging import configure_logging     # Logging setup
from app.core.version import APP_NAME, APP_VERSION
from app.api.routers import (                      # All API routers (organized by activity)
    health,
    glyphs,
    trace,
    speak,
    quiz,
    homophones,
)
from app.lifespan import lifespan                  # Startup/shutdown event handler

# ---------------------------------------------------------------------
# 1. Configure logging
# ---------------------------------------------------------------------
# Controlled by settings.LOG_LEVEL (e.g. "INFO", "DEBUG").
# DEBUG shows per-stroke coverage for every trace validation.
configure_logging(settings.LOG_LEVEL)


# ---------------------------------------------------------------------
# 2. Create FastAPI app instance
# ---------------------------------------------------------------------
app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    lifespan=lifespan,
)


# ---------------------------------------------------------------------
# 3. Configure CORS
# ---------------------------------------------------------------------
# Origins come from settings.CORS_ORIGINS. With the default ["*"]
# credentials must stay off (browsers reject "*" + credentials).
# ---------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------
# 4. Register Routers
# ---------------------------------------------------------------------
# Example final paths:
#   - /health                      (no prefix, good for LB checks)
#   - /api/glyphs/...              (reference letter outlines)
#   - /api/trace/...               (handwriting trace validation + sessions)
#   - /api/speak/...               (spoken letter matching)
#   - /api/quiz/...                (sound quiz)
#   - /api/homophones/...          (homophone matching)
# ---------------------------------------------------------------------
app.include_router(health.router)                           # available at /health
app.include_router(glyphs.router,     prefix=settings.API_PREFIX)
app.include_router(trace.router,      prefix=settings.API_PREFIX)
app.include_router(speak.router,      prefix=settings.API_PREFIX)
app.include_router(quiz.router,       prefix=settings.API_PREFIX)
app.include_router(homophones.router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
def root():
    return {
        "ok": True,
        "name": APP_NAME,
        "health": "/health",
        "docs": "/docs",
        "api_prefix": settings.API_PREFIX,
    }
