# app/services/trace/validator.py
"""
Handwriting trace validation.

A trace passes when every pen stroke of the reference glyph is covered by
the user's points: each stroke is sampled by arc length and a sample counts
as covered when any user point (mapped into glyph space) lies within the
tolerance radius. Strokes are gated independently, so heavy tracing of one
stroke never makes up for a missing one.

Only reference -> user coverage is checked. Drawing outside the outline is
not penalised.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from app.services.glyphs.alphabet import VIEWBOX_HEIGHT, VIEWBOX_WIDTH, get_glyph

log = logging.getLogger("trace")

Point = Tuple[float, float]


@dataclass(frozen=True)
class TraceThresholds:
    tolerance: float = 20.0           # coverage radius, glyph units
    required_coverage: float = 0.80   # per-stroke pass ratio
    min_segment_length: float = 5.0   # shorter strokes are drawing artifacts
    sample_spacing: float = 5.0       # glyph units per reference sample
    min_samples: int = 10

    @classmethod
    def from_settings(cls, s) -> "TraceThresholds":
        return cls(
            tolerance=s.TRACE_TOLERANCE,
            required_coverage=s.TRACE_REQUIRED_COVERAGE,
            min_segment_length=s.TRACE_MIN_SEGMENT_LENGTH,
            sample_spacing=s.TRACE_SAMPLE_SPACING,
            min_samples=s.TRACE_MIN_SAMPLES,
        )


DEFAULT_THRESHOLDS = TraceThresholds()


@dataclass(frozen=True)
class SegmentCoverage:
    index: int
    samples: int
    covered: int
    ratio: float
    passed: bool


@dataclass(frozen=True)
class TraceResult:
    is_valid: bool
    score: float                      # 0-100
    segments: Tuple[SegmentCoverage, ...] = ()


FAILED = TraceResult(is_valid=False, score=0.0)


def _flatten(strokes: Iterable[Iterable[Sequence[float]]]) -> np.ndarray:
    pts = [(float(p[0]), float(p[1])) for stroke in strokes for p in stroke]
    if not pts:
        return np.empty((0, 2), dtype=float)
    arr = np.asarray(pts, dtype=float)
    return arr[np.isfinite(arr).all(axis=1)]


def sample_count(length: float, th: TraceThresholds = DEFAULT_THRESHOLDS) -> int:
    """Number of reference points taken on a stroke of `length` (ends included)."""
    return max(th.min_samples, math.floor(length / th.sample_spacing)) + 1


def covered_mask(reference: np.ndarray, user, tolerance: float) -> np.ndarray:
    """
    True for each reference point that has a user point within `tolerance`
    (inclusive). `user` is a point array or a prebuilt cKDTree over one.
    """
    if not isinstance(user, cKDTree):
        if len(user) == 0:
            return np.zeros(len(reference), dtype=bool)
        user = cKDTree(user)
    dist, _ = user.query(reference, k=1)
    return dist <= tolerance


def validate_trace(
    letter: str,
    strokes: Iterable[Iterable[Sequence[float]]],
    canvas_size: Tuple[float, float],
    thresholds: TraceThresholds = DEFAULT_THRESHOLDS,
) -> TraceResult:
    """
    Decide whether `strokes` (screen-space point lists, one per touch gesture)
    trace `letter` on a canvas of `canvas_size` = (width, height) pixels.

    Unknown letters, no points, or a non-positive canvas give FAILED.
    """
    glyph = get_glyph(letter)
    if glyph is None:
        return FAILED
    width, height = float(canvas_size[0]), float(canvas_size[1])
    if not (width > 0 and height > 0):
        return FAILED

    user = _flatten(strokes)
    if len(user) == 0:
        return FAILED
    user = user * np.array([VIEWBOX_WIDTH / width, VIEWBOX_HEIGHT / height])
    tree = cKDTree(user)

    all_valid = True
    total_covered = 0
    total_samples = 0
    report: List[SegmentCoverage] = []

    for index, segment in enumerate(glyph.segments):
        length = segment.total_length()
        if length < thresholds.min_segment_length:
            continue
        samples = sample_count(length, thresholds)
        ref = segment.sample(samples)
        covered = int(covered_mask(ref, tree, thresholds.tolerance).sum())
        ratio = covered / samples
        passed = ratio >= thresholds.required_coverage
        log.debug("[trace] %s segment %d: %.2f / required %.2f",
                  glyph.letter, index, ratio, thresholds.required_coverage)
        if not passed:
            all_valid = False
        total_covered += covered
        total_samples += samples
        report.append(SegmentCoverage(index, samples, covered, ratio, passed))

    if total_samples == 0:
        return FAILED
    score = total_covered / total_samples * 100.0
    log.debug("[trace] %s valid=%s score=%.1f", glyph.letter, all_valid, score)
    return TraceResult(is_valid=all_valid, score=score, segments=tuple(report))


def trace_feedback(result: TraceResult, stroke_count: int) -> str:
    if result.is_valid:
        return "great_job"
    if result.score < 30 and stroke_count > 2:
        return "try_again"
    return "keep_going"
