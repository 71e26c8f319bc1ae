# app/services/homophones/exercises.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class HomophonePair:
    left_word: str
    right_word: str


@dataclass(frozen=True)
class HomophoneExercise:
    id: int
    pairs: Tuple[HomophonePair, ...]


_RAW = [
    [("sea", "see"), ("hear", "here"), ("write", "right"), ("flower", "flour")],
    [("night", "knight"), ("sun", "son"), ("bear", "bare"), ("tale", "tail")],
    [("week", "weak"), ("pair", "pear"), ("blue", "blew"), ("meet", "meat")],
    [("know", "no"), ("ate", "eight"), ("deer", "dear"), ("ant", "aunt")],
    [("eye", "I"), ("be", "bee"), ("road", "rode"), ("hair", "hare")],
    [("peace", "piece"), ("sale", "sail"), ("wear", "where"), ("wait", "weight")],
    [("break", "brake"), ("made", "maid"), ("rain", "reign"), ("wood", "would")],
    [("our", "hour"), ("knew", "new"), ("plane", "plain"), ("steal", "steel")],
    [("red", "read"), ("hole", "whole"), ("threw", "through"), ("won", "one")],
    [("heel", "heal"), ("flour", "flower"), ("bury", "berry"), ("bored", "board")],
]

EXERCISES: Tuple[HomophoneExercise, ...] = tuple(
    HomophoneExercise(id=i + 1, pairs=tuple(HomophonePair(l, r) for l, r in pairs))
    for i, pairs in enumerate(_RAW)
)


def get_exercise(index: int) -> Optional[HomophoneExercise]:
    if 0 <= index < len(EXERCISES):
        return EXERCISES[index]
    return None


def deranged_order(n: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Random permutation of range(n) with no index left in place (n >= 2).

    Fisher-Yates shuffle, then any fixed point is swapped forward with the
    next position whose element would not land back on its own index.
    """
    rng = rng or random.Random()
    order = list(range(n))
    if n < 2:
        return order
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)
        order[i], order[j] = order[j], order[i]

    while any(order[i] == i for i in range(n)):
        for i in range(n):
            if order[i] != i:
                continue
            k = (i + 1) % n
            while order[k] == i:
                k = (k + 1) % n
            order[i], order[k] = order[k], order[i]
    return order


def check_pair(exercise: HomophoneExercise, left_index: int, right_word: Optional[str]) -> bool:
    if not 0 <= left_index < len(exercise.pairs) or not right_word:
        return False
    return exercise.pairs[left_index].right_word.lower() == right_word.strip().lower()
