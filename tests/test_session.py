from app.core.config import settings
from app.services.trace.session import TraceSession, TraceState

CANVAS = (260, 300)


def _session():
    return TraceSession(session_id="s1", letter="A", canvas_size=CANVAS, reward_points=10)


def test_new_session_is_idle():
    sess = _session()
    assert sess.state is TraceState.IDLE
    assert sess.feedback is None


def test_reward_is_given_once_per_completion(retrace):
    outer, bar = retrace("A", CANVAS)
    sess = _session()

    result, awarded = sess.add_stroke(outer)
    assert sess.state is TraceState.DRAWING
    assert not result.is_valid and awarded == 0
    assert sess.feedback == "keep_going"

    result, awarded = sess.add_stroke(bar)
    assert sess.state is TraceState.VALIDATED
    assert result.is_valid and awarded == 10
    assert sess.feedback == "great_job"

    _, awarded = sess.add_stroke(bar)
    assert sess.state is TraceState.VALIDATED
    assert awarded == 0


def test_clear_resets_and_allows_another_reward(retrace):
    sess = _session()
    for stroke in retrace("A", CANVAS):
        sess.add_stroke(stroke)
    assert sess.state is TraceState.VALIDATED

    sess.clear()
    assert sess.state is TraceState.IDLE
    assert sess.strokes == [] and sess.last_result is None

    awarded = [sess.add_stroke(s)[1] for s in retrace("A", CANVAS)]
    assert awarded == [0, 10]


def test_reward_defaults_to_configured_points(monkeypatch, retrace):
    monkeypatch.setattr(settings, "REWARD_POINTS", 25)
    sess = TraceSession(session_id="s2", letter="L", canvas_size=CANVAS)
    assert sess.reward_points == 25
    _, awarded = sess.add_stroke(retrace("L", CANVAS)[0])
    assert awarded == 25
