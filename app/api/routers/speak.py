# app/api/routers/speak.py
import logging
from fastapi import APIRouter
from app.core.config import settings
from app.schemas.speak import SpeakMatchReq, SpeakMatchRes
from app.services.speech.matcher import match_spoken_letter

router = APIRouter(prefix="/speak", tags=["speak"])
log = logging.getLogger("speech")

@router.post("/match", response_model=SpeakMatchRes)
def speak_match(req: SpeakMatchReq):
    letter = req.letter.upper()
    matched, normalized = match_spoken_letter(req.transcription, letter)
    log.info("[speak] letter=%s heard=%r normalized=%r matched=%s",
             letter, req.transcription[:60], normalized, matched)
    return SpeakMatchRes(
        letter=letter,
        normalized=normalized,
        matched=matched,
        points_awarded=settings.REWARD_POINTS if matched else 0,
    )
