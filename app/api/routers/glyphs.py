# app/api/routers/glyphs.py
from fastapi import APIRouter, HTTPException
from app.schemas.glyph import GlyphOut
from app.services.glyphs.alphabet import GLYPHS, VIEWBOX_WIDTH, VIEWBOX_HEIGHT, get_glyph

router = APIRouter(prefix="/glyphs", tags=["glyphs"])

@router.get("", response_model=list[str])
def list_glyphs():
    return sorted(GLYPHS)

@router.get("/{letter}", response_model=GlyphOut)
def glyph(letter: str):
    g = get_glyph(letter)
    if g is None:
        raise HTTPException(status_code=404, detail="unknown letter")
    return GlyphOut(
        letter=g.letter,
        path_data=g.path_data,
        viewbox=[0, 0, VIEWBOX_WIDTH, VIEWBOX_HEIGHT],
        segment_lengths=[round(s.total_length(), 3) for s in g.segments],
    )
