# app/schemas/glyph.py
from pydantic import BaseModel
from typing import List

class GlyphOut(BaseModel):
    letter: str
    path_data: str
    viewbox: List[int]
    segment_lengths: List[float]
