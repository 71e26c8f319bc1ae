import random

import numpy as np
import pytest

from app.services.glyphs.alphabet import GLYPHS, build_glyph
from app.services.trace import validator
from app.services.trace.validator import (
    FAILED, TraceResult, TraceThresholds, covered_mask, sample_count, trace_feedback, validate_trace,
)

CANVAS = (520, 600)


@pytest.mark.parametrize("letter", sorted(GLYPHS))
def test_empty_strokes_never_pass(letter):
    assert validate_trace(letter, [], CANVAS) == FAILED
    assert validate_trace(letter, [[], []], CANVAS) == FAILED


@pytest.mark.parametrize("letter", ["", "1", "AB", "?", "Ä"])
def test_unknown_letters_never_pass(letter, retrace):
    strokes = retrace("A", CANVAS)
    result = validate_trace(letter, strokes, CANVAS)
    assert result.is_valid is False
    assert result.score == 0


@pytest.mark.parametrize("letter", sorted(GLYPHS))
def test_exact_retrace_passes_with_full_score(letter, retrace):
    result = validate_trace(letter, retrace(letter, CANVAS), CANVAS)
    assert result.is_valid is True
    assert result.score == pytest.approx(100.0)
    assert all(s.passed for s in result.segments)


def test_letter_a_without_crossbar_fails(retrace):
    strokes = retrace("A", CANVAS, segments={0})
    result = validate_trace("A", strokes, CANVAS)
    outer, bar = result.segments
    assert outer.passed and outer.ratio == 1.0
    assert not bar.passed
    assert result.is_valid is False
    # the triangle alone is well above the per-stroke threshold
    assert result.score > 80


def test_one_continuous_stroke_counts_like_many(retrace):
    strokes = retrace("H", CANVAS)
    joined = [[p for s in strokes for p in s]]
    assert validate_trace("H", joined, CANVAS) == validate_trace("H", strokes, CANVAS)


def test_score_never_drops_when_more_correct_points_are_added(retrace):
    points = [p for s in retrace("B", CANVAS) for p in s]
    random.Random(7).shuffle(points)
    sizes = list(range(0, len(points), 25)) + [len(points)]
    scores = [validate_trace("B", [points[:n]], CANVAS).score for n in sizes]
    assert scores == sorted(scores)
    assert scores[-1] == pytest.approx(100.0)


def test_repeated_calls_are_identical(retrace):
    strokes = retrace("S", CANVAS, segments={0})[:1]
    strokes = [strokes[0][: len(strokes[0]) // 2]]
    first = validate_trace("S", strokes, CANVAS)
    assert validate_trace("S", strokes, CANVAS) == first
    assert first.is_valid is False
    assert 0 < first.score < 100


def test_canvas_scaling_maps_back_to_glyph_space(retrace):
    small = validate_trace("K", retrace("K", (260, 300)), (260, 300))
    large = validate_trace("K", retrace("K", (1040, 1200)), (1040, 1200))
    assert small.is_valid and large.is_valid
    assert small.score == pytest.approx(large.score)


def test_drawing_far_from_the_outline_scores_zero():
    strokes = [[(x, 5.0) for x in range(0, 30)]]
    result = validate_trace("O", strokes, (260, 300))
    assert result.is_valid is False
    assert result.score == 0


@pytest.mark.parametrize("canvas", [(0, 300), (260, 0), (-1, -1)])
def test_non_positive_canvas_fails_closed(canvas, retrace):
    assert validate_trace("L", retrace("L"), canvas) == FAILED


def test_tolerance_controls_how_close_points_must_be(retrace):
    shifted = retrace("T", (260, 300), offset=(5.0, 0.0))
    assert validate_trace("T", shifted, (260, 300)).is_valid
    strict = TraceThresholds(tolerance=1.0)
    assert not validate_trace("T", shifted, (260, 300), strict).is_valid


def test_short_artifact_segments_are_ignored(monkeypatch):
    glyph = build_glyph("T", "M0 0 L100 0 M50 50 L52 50")
    monkeypatch.setattr(validator, "get_glyph", lambda letter: glyph)
    strokes = [[(float(x), 0.0) for x in range(0, 101)]]
    result = validate_trace("T", strokes, (260, 300))
    assert result.is_valid
    assert [s.index for s in result.segments] == [0]


def _straight_glyph(monkeypatch):
    # 70 units long: 15 samples at x = 0, 5, ..., 70
    glyph = build_glyph("T", "M0 0 L70 0")
    monkeypatch.setattr(validator, "get_glyph", lambda letter: glyph)
    return glyph


def test_coverage_exactly_at_the_required_ratio_passes(monkeypatch):
    _straight_glyph(monkeypatch)
    tight = TraceThresholds(tolerance=1.0)
    twelve = [(float(x), 0.0) for x in range(0, 60, 5)]

    result = validate_trace("T", [twelve], (260, 300), tight)
    seg, = result.segments
    assert (seg.samples, seg.covered) == (15, 12)
    assert seg.ratio == 0.80
    assert result.is_valid

    assert not validate_trace("T", [twelve[:-1]], (260, 300), tight).is_valid


@pytest.mark.parametrize("gap,covered", [(20.0, True), (20.0 + 1e-6, False)])
def test_point_at_exactly_the_tolerance_counts_as_covered(monkeypatch, gap, covered):
    _straight_glyph(monkeypatch)
    strokes = [[(float(x), gap) for x in range(0, 75, 5)]]
    result = validate_trace("T", strokes, (260, 300))
    assert result.is_valid is covered
    assert result.score == (100.0 if covered else 0.0)


def test_covered_mask_agrees_with_pairwise_distances():
    rng = np.random.default_rng(3)
    ref = rng.uniform(0, 100, size=(40, 2))
    user = rng.uniform(0, 100, size=(500, 2))
    pairwise = np.sqrt(((ref[:, None, :] - user[None, :, :]) ** 2).sum(axis=2))
    assert (covered_mask(ref, user, 8.0) == (pairwise <= 8.0).any(axis=1)).all()
    assert not covered_mask(ref, np.empty((0, 2)), 8.0).any()


def test_large_point_clouds_still_validate(retrace):
    scribble = [(float(i % 520), float(i % 600)) for i in range(200_000)]
    result = validate_trace("O", retrace("O", CANVAS) + [scribble], CANVAS)
    assert result.is_valid
    assert result.score == pytest.approx(100.0)


def test_sample_count_has_a_floor_and_includes_both_ends():
    assert sample_count(3) == 11
    assert sample_count(50) == 11
    assert sample_count(412.3) == 83


@pytest.mark.parametrize("result,strokes,expected", [
    (TraceResult(True, 100.0), 1, "great_job"),
    (TraceResult(False, 20.0), 3, "try_again"),
    (TraceResult(False, 20.0), 2, "keep_going"),
    (TraceResult(False, 55.0), 5, "keep_going"),
])
def test_feedback(result, strokes, expected):
    assert trace_feedback(result, strokes) == expected
