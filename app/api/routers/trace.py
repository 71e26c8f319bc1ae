# app/api/routers/trace.py
from __future__ import annotations

import uuid, logging
from typing import Dict

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.schemas.trace import (
    TraceValidateReq, TraceValidateRes, SegmentOut,
    TraceSessionStartReq, TraceSessionRes, StrokeIn, MAX_STROKES,
)
from app.services.trace.validator import TraceThresholds, validate_trace, trace_feedback
from app.services.trace.session import TraceSession

router = APIRouter(prefix="/trace", tags=["trace"])
log = logging.getLogger("trace")

_THRESHOLDS = TraceThresholds.from_settings(settings)

# NOTE: in-memory store resets on process restart and is not multi-worker safe.
_SESSIONS: Dict[str, TraceSession] = {}

def _get_session(session_id: str) -> TraceSession:
    sess = _SESSIONS.get(session_id)
    if not sess:
        raise HTTPException(status_code=404, detail="trace session not found")
    return sess

def _session_out(sess: TraceSession, awarded: int = 0) -> TraceSessionRes:
    res = sess.last_result
    return TraceSessionRes(
        session_id=sess.session_id,
        letter=sess.letter,
        state=sess.state.value,
        stroke_count=len(sess.strokes),
        is_valid=bool(res and res.is_valid),
        score=res.score if res else 0.0,
        feedback=sess.feedback,
        points_awarded=awarded,
    )

@router.post("/validate", response_model=TraceValidateRes)
def trace_validate(req: TraceValidateReq):
    strokes = [s.as_tuples() for s in req.strokes]
    result = validate_trace(
        req.letter, strokes, (req.canvas_size.width, req.canvas_size.height), _THRESHOLDS
    )
    return TraceValidateRes(
        is_valid=result.is_valid,
        score=result.score,
        feedback=trace_feedback(result, len(strokes)),
        segments=[SegmentOut(**vars(s)) for s in result.segments],
    )

@router.post("/sessions", response_model=TraceSessionRes)
def trace_session_start(req: TraceSessionStartReq):
    sid = uuid.uuid4().hex
    sess = TraceSession(
        session_id=sid,
        letter=req.letter.upper(),
        canvas_size=(req.canvas_size.width, req.canvas_size.height),
        thresholds=_THRESHOLDS,
    )
    _SESSIONS[sid] = sess
    log.info("[trace] session %s started letter=%s", sid, sess.letter)
    return _session_out(sess)

@router.get("/sessions/{session_id}", response_model=TraceSessionRes)
def trace_session_get(session_id: str):
    return _session_out(_get_session(session_id))

@router.post("/sessions/{session_id}/strokes", response_model=TraceSessionRes)
def trace_session_add_stroke(session_id: str, stroke: StrokeIn):
    sess = _get_session(session_id)
    if len(sess.strokes) >= MAX_STROKES:
        raise HTTPException(status_code=422, detail="too many strokes, clear the session first")
    result, awarded = sess.add_stroke(stroke.as_tuples())
    if awarded:
        log.info("[trace] session %s letter=%s validated score=%.1f",
                 session_id, sess.letter, result.score)
    return _session_out(sess, awarded)

@router.delete("/sessions/{session_id}/strokes", response_model=TraceSessionRes)
def trace_session_clear(session_id: str):
    sess = _get_session(session_id)
    sess.clear()
    return _session_out(sess)

@router.delete("/sessions/{session_id}")
def trace_session_end(session_id: str):
    _get_session(session_id)
    _SESSIONS.pop(session_id, None)
    return {"ok": True}
