# app/services/speech/matcher.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from app.services.speech.normalizer import normalize_speech
from app.services.speech.phonetics import alternatives_for

log = logging.getLogger("speech")


def levenshtein(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute edit distance."""
    n, m = len(a), len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1): dp[i][0] = i
    for j in range(m + 1): dp[0][j] = j
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
    return dp[n][m]


def _edit_threshold(sound: str) -> int:
    return 1 if len(sound) <= 3 else 2


def matches_spoken_letter(transcription: Optional[str], letter: Optional[str]) -> bool:
    """
    True when `transcription` is an acceptable spoken rendition of `letter`.
    Checks run from strictest to loosest and the first hit wins.
    """
    return match_spoken_letter(transcription, letter)[0]


def match_spoken_letter(transcription: Optional[str], letter: Optional[str]) -> Tuple[bool, str]:
    """Same as `matches_spoken_letter`, also returning the normalized transcription."""
    if not isinstance(transcription, str) or not isinstance(letter, str):
        return False, ""
    letter = letter.strip().upper()
    normalized = normalize_speech(transcription)
    return (bool(letter) and _matches(normalized, letter)), normalized


def _matches(normalized: str, letter: str) -> bool:
    if not normalized:
        return False

    if normalized == letter:
        return True

    sounds = alternatives_for(letter)
    if normalized in sounds:
        return True

    # filler words around the letter name ("IT IS BEE")
    for sound in sounds:
        if len(sound) > 1 and (sound in normalized or normalized in sound):
            log.debug("[speech] %r ~ %r (contains)", normalized, sound)
            return True

    # transcription noise, looser for longer spellings
    for sound in sounds:
        if len(sound) <= 2:
            continue
        if levenshtein(normalized, sound) <= _edit_threshold(sound):
            log.debug("[speech] %r ~ %r (edit distance)", normalized, sound)
            return True

    if letter in normalized.split(" "):
        return True

    if 1 <= len(normalized) <= 2 and normalized[0] == letter:
        return True

    return False
