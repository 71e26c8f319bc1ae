import math

from app.services.glyphs.alphabet import VIEWBOX_HEIGHT, VIEWBOX_WIDTH, get_glyph


def retrace_strokes(letter, canvas=(VIEWBOX_WIDTH, VIEWBOX_HEIGHT), segments=None, offset=(0.0, 0.0)):
    """Screen-space strokes that follow the reference outline at ~1 unit spacing."""
    glyph = get_glyph(letter)
    w, h = canvas
    strokes = []
    for i, seg in enumerate(glyph.segments):
        if segments is not None and i not in segments:
            continue
        pts = seg.sample(math.ceil(seg.total_length()) + 2)
        strokes.append([
            ((x + offset[0]) * w / VIEWBOX_WIDTH, (y + offset[1]) * h / VIEWBOX_HEIGHT)
            for x, y in pts
        ])
    return strokes
