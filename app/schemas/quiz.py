# app/schemas/quiz.py
from pydantic import BaseModel
from typing import List

class QuizQuestionOut(BaseModel):
    index: int
    options: List[str]

class QuizAnswerReq(BaseModel):
    index: int
    selected: str

class QuizAnswerRes(BaseModel):
    correct: bool
    answer: str | None = None     # only revealed once answered correctly
    points_awarded: int = 0
