# app/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.services.glyphs.alphabet import GLYPHS

log = logging.getLogger("lifespan")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # glyph outlines are parsed at import; report what is loaded
    segments = sum(len(g.segments) for g in GLYPHS.values())
    log.info("[lifespan] glyph table ready: %d letters, %d strokes", len(GLYPHS), segments)
    yield
