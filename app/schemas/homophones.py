# app/schemas/homophones.py
from pydantic import BaseModel
from typing import List

class HomophoneExerciseOut(BaseModel):
    index: int
    id: int
    left_words: List[str]
    right_words: List[str]       # shuffled so no word sits beside its partner

class HomophoneCheckReq(BaseModel):
    exercise_index: int
    left_index: int
    right_word: str

class HomophoneCheckRes(BaseModel):
    correct: bool
    points_awarded: int = 0
