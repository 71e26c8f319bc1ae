# app/api/routers/quiz.py
from fastapi import APIRouter, HTTPException
from app.core.config import settings
from app.schemas.quiz import QuizQuestionOut, QuizAnswerReq, QuizAnswerRes
from app.services.quiz.questions import QUESTIONS, get_question, check_answer

router = APIRouter(prefix="/quiz", tags=["quiz"])

@router.get("/questions", response_model=list[QuizQuestionOut])
def quiz_questions():
    return [QuizQuestionOut(index=i, options=list(q.options)) for i, q in enumerate(QUESTIONS)]

@router.post("/answer", response_model=QuizAnswerRes)
def quiz_answer(req: QuizAnswerReq):
    q = get_question(req.index)
    if q is None:
        raise HTTPException(status_code=404, detail="question not found")
    ok = check_answer(q, req.selected)
    return QuizAnswerRes(
        correct=ok,
        answer=q.answer if ok else None,
        points_awarded=settings.REWARD_POINTS if ok else 0,
    )
