# app/services/trace/session.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from app.core.config import settings
from app.services.trace.validator import (
    DEFAULT_THRESHOLDS,
    TraceResult,
    TraceThresholds,
    trace_feedback,
    validate_trace,
)

Point = Tuple[float, float]


class TraceState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    VALIDATED = "validated"


@dataclass
class TraceSession:
    """
    Drawing state for one letter on one canvas.

    Each finished stroke re-runs the (stateless) validator over every stroke
    drawn so far. The reward is reported only on the first transition into
    VALIDATED; later strokes keep the letter validated.
    """
    session_id: str
    letter: str
    canvas_size: Tuple[float, float]
    thresholds: TraceThresholds = DEFAULT_THRESHOLDS
    reward_points: int = field(default_factory=lambda: settings.REWARD_POINTS)
    strokes: List[List[Point]] = field(default_factory=list)
    state: TraceState = TraceState.IDLE
    last_result: Optional[TraceResult] = None

    def add_stroke(self, points: Sequence[Point]) -> Tuple[TraceResult, int]:
        """Append one stroke; returns (result, points awarded by this stroke)."""
        self.strokes.append([(float(x), float(y)) for x, y in points])
        result = validate_trace(self.letter, self.strokes, self.canvas_size, self.thresholds)
        self.last_result = result

        awarded = 0
        if result.is_valid and self.state is not TraceState.VALIDATED:
            awarded = self.reward_points
        if result.is_valid or self.state is TraceState.VALIDATED:
            self.state = TraceState.VALIDATED
        else:
            self.state = TraceState.DRAWING
        return result, awarded

    def clear(self) -> None:
        self.strokes = []
        self.last_result = None
        self.state = TraceState.IDLE

    @property
    def feedback(self) -> Optional[str]:
        if self.last_result is None:
            return None
        return trace_feedback(self.last_result, len(self.strokes))
