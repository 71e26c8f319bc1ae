# app/api/routers/homophones.py
from fastapi import APIRouter, HTTPException
from app.core.config import settings
from app.schemas.homophones import HomophoneExerciseOut, HomophoneCheckReq, HomophoneCheckRes
from app.services.homophones.exercises import get_exercise, deranged_order, check_pair

router = APIRouter(prefix="/homophones", tags=["homophones"])

@router.get("/exercises/{index}", response_model=HomophoneExerciseOut)
def homophone_exercise(index: int):
    ex = get_exercise(index)
    if ex is None:
        raise HTTPException(status_code=404, detail="exercise not found")
    order = deranged_order(len(ex.pairs))
    return HomophoneExerciseOut(
        index=index,
        id=ex.id,
        left_words=[p.left_word for p in ex.pairs],
        right_words=[ex.pairs[i].right_word for i in order],
    )

@router.post("/check", response_model=HomophoneCheckRes)
def homophone_check(req: HomophoneCheckReq):
    ex = get_exercise(req.exercise_index)
    if ex is None:
        raise HTTPException(status_code=404, detail="exercise not found")
    ok = check_pair(ex, req.left_index, req.right_word)
    return HomophoneCheckRes(correct=ok, points_awarded=settings.REWARD_POINTS if ok else 0)
