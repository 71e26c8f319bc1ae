# app/schemas/trace.py
from pydantic import BaseModel, Field
from typing import List, Optional

# request caps, well above what a finger draws on one letter
MAX_POINTS_PER_STROKE = 5000
MAX_STROKES = 100

class PointIn(BaseModel):
    x: float
    y: float

class StrokeIn(BaseModel):
    points: List[PointIn] = Field(default_factory=list, max_length=MAX_POINTS_PER_STROKE)
    color: Optional[str] = None          # display only, ignored by validation
    width: Optional[float] = None

    def as_tuples(self) -> list[tuple[float, float]]:
        return [(p.x, p.y) for p in self.points]

class CanvasSize(BaseModel):
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

class TraceValidateReq(BaseModel):
    letter: str = Field(..., min_length=1, max_length=1, examples=["A"])
    strokes: List[StrokeIn] = Field(default_factory=list, max_length=MAX_STROKES)
    canvas_size: CanvasSize

class SegmentOut(BaseModel):
    index: int
    samples: int
    covered: int
    ratio: float
    passed: bool

class TraceValidateRes(BaseModel):
    is_valid: bool
    score: float
    feedback: str
    segments: List[SegmentOut] = []

class TraceSessionStartReq(BaseModel):
    letter: str = Field(..., min_length=1, max_length=1)
    canvas_size: CanvasSize

class TraceSessionRes(BaseModel):
    session_id: str
    letter: str
    state: str
    stroke_count: int
    is_valid: bool = False
    score: float = 0.0
    feedback: Optional[str] = None
    points_awarded: int = 0
