# app/services/geometry/path.py
"""
SVG path data -> typed commands -> arc-length geometry.

Parsing is delegated to `svg.path`. Its segments are rewritten into four
absolute command types (MoveTo / LineTo / QuadraticTo / CubicTo): closes
become a LineTo back to the sub-path start and elliptical arcs become a run
of LineTo points taken on the arc itself.
"""
from __future__ import annotations

import bisect
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np
from svg.path import Arc, Close, CubicBezier, Line, Move, QuadraticBezier
from svg.path import parse_path as parse_svg_path
from svg.path.parser import InvalidPathError

Point = Tuple[float, float]

# Parameter steps used to map a distance back onto a curve.
CURVE_STEPS = 64
# Chords per quarter turn when flattening elliptical arcs.
ARC_STEPS_PER_QUARTER = 8
# Max error for svg.path's iterative cubic length.
LENGTH_ERROR = 1e-6


class PathSyntaxError(ValueError):
    """Raised when path data cannot be parsed."""


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class QuadraticTo:
    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


PathCommand = Union[MoveTo, LineTo, QuadraticTo, CubicTo]

# ---- Parsing ----------------------------------------------------------------


def _flatten_arc(arc: Arc) -> List[LineTo]:
    if arc.start == arc.end:
        return []
    delta = getattr(arc, "delta", 0.0)     # unset for straight-line arcs
    steps = max(2, math.ceil(abs(delta) / 90.0 * ARC_STEPS_PER_QUARTER))
    out = [LineTo(p.real, p.imag) for p in (arc.point(k / steps) for k in range(1, steps))]
    out.append(LineTo(arc.end.real, arc.end.imag))
    return out


def parse_path(d: str) -> List[PathCommand]:
    """
    Parse SVG path data into absolute MoveTo/LineTo/QuadraticTo/CubicTo.

    Z closes back to the sub-path start with a LineTo (skipped when already
    there). S/T come back from svg.path with their reflected control point.
    """
    try:
        segments = parse_svg_path(d or "")
    except InvalidPathError as exc:
        raise PathSyntaxError(str(exc)) from exc
    if not len(segments) or not isinstance(segments[0], Move):
        raise PathSyntaxError("path must start with a move-to")

    out: List[PathCommand] = []
    for seg in segments:
        end = seg.end
        if isinstance(seg, Move):
            out.append(MoveTo(end.real, end.imag))
        elif isinstance(seg, Close):
            if seg.start != end:
                out.append(LineTo(end.real, end.imag))
        elif isinstance(seg, Line):
            out.append(LineTo(end.real, end.imag))
        elif isinstance(seg, QuadraticBezier):
            c = seg.control
            out.append(QuadraticTo(c.real, c.imag, end.real, end.imag))
        elif isinstance(seg, CubicBezier):
            c1, c2 = seg.control1, seg.control2
            out.append(CubicTo(c1.real, c1.imag, c2.real, c2.imag, end.real, end.imag))
        elif isinstance(seg, Arc):
            out.extend(_flatten_arc(seg))
        else:
            raise PathSyntaxError(f"unsupported path segment: {seg!r}")
    return out


def split_subpaths(commands: Sequence[PathCommand]) -> List[List[PathCommand]]:
    """Cut a command list at every MoveTo; each piece is one pen-down stroke."""
    parts: List[List[PathCommand]] = []
    for c in commands:
        if isinstance(c, MoveTo) or not parts:
            parts.append([])
        parts[-1].append(c)
    return parts


# ---- Geometry ---------------------------------------------------------------

def _to_segment(c: PathCommand, start: complex):
    end = complex(c.x, c.y)
    if isinstance(c, LineTo):
        return Line(start, end)
    if isinstance(c, QuadraticTo):
        return QuadraticBezier(start, complex(c.cx, c.cy), end)
    if isinstance(c, CubicTo):
        return CubicBezier(start, complex(c.c1x, c.c1y), complex(c.c2x, c.c2y), end)
    raise TypeError(f"unsupported path command: {c!r}")


class PathGeometry:
    """
    Arc-length view of one compound path.

    Segment lengths come from svg.path (exact for lines and quadratics,
    iterative for cubics). For curves a distance is mapped back to the
    segment parameter through a table of CURVE_STEPS chords scaled to that
    length, so returned points lie on the curve itself. A MoveTo after the
    first contributes no length.
    """

    def __init__(self, commands: Sequence[PathCommand], curve_steps: int = CURVE_STEPS):
        if not commands or not isinstance(commands[0], MoveTo):
            raise ValueError("a path must start with a MoveTo")
        self.commands: Tuple[PathCommand, ...] = tuple(commands)
        self._start: Point = (commands[0].x, commands[0].y)
        self._segments = []
        self._tables: List[Tuple[np.ndarray, np.ndarray]] = []
        self._starts: List[float] = []

        pos = complex(*self._start)
        total = 0.0
        for c in commands:
            if isinstance(c, MoveTo):
                pos = complex(c.x, c.y)
                continue
            seg = _to_segment(c, pos)
            length = float(seg.length(error=LENGTH_ERROR))
            if isinstance(seg, Line):
                ts = np.array([0.0, 1.0])
                cum = np.array([0.0, length])
            else:
                ts = np.linspace(0.0, 1.0, curve_steps + 1)
                pts = np.array([seg.point(t) for t in ts])
                cum = np.concatenate(([0.0], np.cumsum(np.abs(np.diff(pts)))))
                if cum[-1] > 0.0:
                    cum *= length / cum[-1]
            self._starts.append(total)
            self._segments.append(seg)
            self._tables.append((ts, cum))
            total += length
            pos = seg.end
        self._total = total

    @classmethod
    def from_path_data(cls, d: str) -> "PathGeometry":
        return cls(parse_path(d))

    def total_length(self) -> float:
        return self._total

    def start_point(self) -> Point:
        return self._start

    def end_point(self) -> Point:
        return self.point_at_length(self._total)

    def point_at_length(self, distance: float) -> Point:
        if not self._segments:
            return self._start
        d = min(max(float(distance), 0.0), self._total)
        idx = max(0, bisect.bisect_right(self._starts, d) - 1)
        ts, cum = self._tables[idx]
        t = float(np.interp(d - self._starts[idx], cum, ts)) if cum[-1] > 0.0 else 0.0
        p = self._segments[idx].point(t)
        return float(p.real), float(p.imag)

    def sample(self, count: int) -> np.ndarray:
        """`count` points evenly spaced by arc length, both ends included."""
        if count <= 1:
            return np.asarray([self._start], dtype=float)
        return np.asarray(
            [self.point_at_length(d) for d in np.linspace(0.0, self._total, count)],
            dtype=float,
        )
