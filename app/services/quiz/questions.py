# app/services/quiz/questions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class QuizQuestion:
    answer: str
    options: Tuple[str, ...]


# One question per letter: the child hears `answer` and picks among `options`.
QUESTIONS: Tuple[QuizQuestion, ...] = tuple(
    QuizQuestion(answer, tuple(options)) for answer, options in [
        ("A", "AFHB"), ("B", "EBMD"), ("C", "OCQG"), ("D", "PRDB"),
        ("E", "EFLT"), ("F", "FPBE"), ("G", "CGOQ"), ("H", "HKNM"),
        ("I", "ILTJ"), ("J", "JILU"), ("K", "KXYH"), ("L", "LITE"),
        ("M", "MWNV"), ("N", "NMHZ"), ("O", "OCQG"), ("P", "PRBF"),
        ("Q", "QOCG"), ("R", "RPBK"), ("S", "SZXC"), ("T", "TILF"),
        ("U", "UVWJ"), ("V", "VUWM"), ("W", "WMVN"), ("X", "XKYZ"),
        ("Y", "YXVI"), ("Z", "ZSNM"),
    ]
)


def get_question(index: int) -> Optional[QuizQuestion]:
    if 0 <= index < len(QUESTIONS):
        return QUESTIONS[index]
    return None


def check_answer(question: QuizQuestion, selected: Optional[str]) -> bool:
    return bool(selected) and selected.strip().upper() == question.answer
