# app/services/speech/phonetics.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Accepted (upper-case) spellings a transcription service may return for
# each spoken letter name.
PHONETIC_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "A": ("A", "AY", "EY", "EI", "AE", "AH", "LETTER A", "THE LETTER A"),
    "B": ("B", "BE", "BEE", "BI", "BEA", "BEE BEE", "LETTER B", "THE LETTER B"),
    "C": ("C", "CE", "SEE", "SEA", "SI", "CEE", "THE SEA", "LETTER C", "THE LETTER C"),
    "D": ("D", "DE", "DEE", "DI", "DEA", "LETTER D", "THE LETTER D"),
    "E": ("E", "EE", "EA", "LETTER E", "THE LETTER E"),
    "F": ("F", "EF", "EFF", "IEFF", "LETTER F", "THE LETTER F"),
    "G": ("G", "GE", "GEE", "JI", "JEE", "JE", "GI", "GEA", "LETTER G", "THE LETTER G"),
    "H": ("H", "AITCH", "AYCH", "EICH", "EITCH", "ETCH", "ACH", "HAITCH", "LETTER H", "THE LETTER H"),
    "I": ("I", "AI", "AYE", "EYE", "AY", "EI", "LETTER I", "THE LETTER I"),
    "J": ("J", "JAY", "JE", "JA", "JAE", "GEY", "LETTER J", "THE LETTER J"),
    "K": ("K", "KAY", "KE", "KA", "KAE", "CAY", "LETTER K", "THE LETTER K"),
    "L": ("L", "EL", "ELL", "AL", "ELLE", "LETTER L", "THE LETTER L"),
    "M": ("M", "EM", "EMM", "AM", "LETTER M", "THE LETTER M"),
    "N": ("N", "EN", "ENN", "AN", "LETTER N", "THE LETTER N"),
    "O": ("O", "OH", "OW", "OE", "OOH", "LETTER O", "THE LETTER O"),
    "P": ("P", "PE", "PEE", "PI", "PEA", "LETTER P", "THE LETTER P"),
    "Q": ("Q", "QU", "CUE", "KIU", "KYU", "QUEUE", "CU", "KEW", "LETTER Q", "THE LETTER Q"),
    "R": ("R", "AR", "ARE", "ER", "OR", "AHR", "LETTER R", "THE LETTER R"),
    "S": ("S", "ES", "ESS", "AS", "LETTER S", "THE LETTER S"),
    "T": ("T", "TE", "TEE", "TI", "TEA", "LETTER T", "THE LETTER T"),
    "U": ("U", "YU", "YOU", "YOO", "EW", "OO", "LETTER U", "THE LETTER U"),
    "V": ("V", "VE", "VEE", "VI", "VEA", "WE", "LETTER V", "THE LETTER V"),
    "W": ("W", "DOUBLE U", "DOUBLE YOU", "DOUBLEU", "DOUBLEYOU", "DOUBLE", "LETTER W", "THE LETTER W"),
    "X": ("X", "EX", "EKS", "ECS", "EGS", "ECKS", "AX", "LETTER X", "THE LETTER X"),
    "Y": ("Y", "WY", "WAI", "WHY", "WI", "YEE", "LETTER Y", "THE LETTER Y"),
    "Z": ("Z", "ZE", "ZEE", "ZED", "ZI", "ZEA", "ZET", "LETTER Z", "THE LETTER Z"),
})


def alternatives_for(letter: str) -> Tuple[str, ...]:
    return PHONETIC_MAP.get(letter, (letter,))
