import math
import string

import pytest

from app.services.glyphs.alphabet import GLYPHS, build_glyph, get_glyph


def test_table_has_every_uppercase_letter():
    assert sorted(GLYPHS) == list(string.ascii_uppercase)


@pytest.mark.parametrize("letter", sorted(GLYPHS))
def test_every_glyph_has_strokes_with_positive_length(letter):
    glyph = GLYPHS[letter]
    assert glyph.letter == letter
    assert len(glyph.segments) >= 1
    for seg in glyph.segments:
        length = seg.total_length()
        assert math.isfinite(length) and length > 0


def test_letter_a_is_triangle_plus_crossbar():
    outer, bar = GLYPHS["A"].segments
    assert outer.total_length() == pytest.approx(2 * math.hypot(50, 200))
    assert bar.total_length() == pytest.approx(50.0)


def test_lookup_is_case_insensitive_and_rejects_unknown():
    assert get_glyph("a") is GLYPHS["A"]
    assert get_glyph(" q ") is GLYPHS["Q"]
    for bad in ("", "1", "AB", "?", None, 5):
        assert get_glyph(bad) is None


def test_table_is_read_only():
    with pytest.raises(TypeError):
        GLYPHS["A"] = build_glyph("A", "M0 0 L1 1")


def test_build_glyph_keeps_zero_length_artifacts():
    g = build_glyph("T", "M0 0 L100 0 M50 50 L52 50")
    assert [round(s.total_length(), 6) for s in g.segments] == [100.0, 2.0]
