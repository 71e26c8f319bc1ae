# app/services/speech/normalizer.py
from __future__ import annotations

import re
from typing import List, Optional, Tuple

PUNCT_RE = re.compile(r"[.,!?'\";:()\-]")
SPACE_RE = re.compile(r"\s+")
SINGLE_LETTER_RE = re.compile(r"^[A-Z]$")

# Multi-word spellings collapsed to one letter, applied in order.
CONVERSIONS: List[Tuple[str, str]] = [
    ("DOUBLE U", "W"),
    ("DOUBLE YOU", "W"),
    ("DOUBLEYOU", "W"),
    ("DOUBLEU", "W"),
]

# Letter names with their vowel sound spelled out (BEE, EF, AR, ...).
TRAILING_VOWEL_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"^([BCDFGPTVZ])EE$"), r"\1"),
    (re.compile(r"^([BCDFGPTVZ])E$"), r"\1"),
    (re.compile(r"^([BCDFGPTVZ])I$"), r"\1"),
    (re.compile(r"^E([FLMNSXY])$"), r"\1"),
    (re.compile(r"^A([RY])$"), r"\1"),
]


def normalize_speech(text: Optional[str]) -> str:
    """
    Canonical upper-case form of a transcription.

    Trailing-vowel rules only apply when they reduce the whole text to a
    single letter, so real words are never rewritten.
    """
    if not text:
        return ""
    s = PUNCT_RE.sub("", text.upper().strip())
    s = SPACE_RE.sub(" ", s).strip()

    for src, dst in CONVERSIONS:
        s = s.replace(src, dst)

    for pattern, repl in TRAILING_VOWEL_RULES:
        out = pattern.sub(repl, s)
        if SINGLE_LETTER_RE.match(out):
            s = out
            break
    return s
