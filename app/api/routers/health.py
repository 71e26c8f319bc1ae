from fastapi import APIRouter
from app.core.config import settings
from app.core.version import APP_NAME, APP_VERSION
from app.services.glyphs.alphabet import GLYPHS

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
async def health():
    return {"name": APP_NAME, "version": APP_VERSION, "env": settings.ENV,
            "glyphs": len(GLYPHS), "ok": True}
