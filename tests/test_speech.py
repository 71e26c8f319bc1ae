import pytest

from app.services.speech.matcher import levenshtein, match_spoken_letter, matches_spoken_letter
from app.services.speech.normalizer import normalize_speech
from app.services.speech.phonetics import PHONETIC_MAP


@pytest.mark.parametrize("raw,expected", [
    ("  bee! ", "B"),
    ("Double-U", "W"),
    ("double you", "W"),
    ("ef", "F"),
    ("ar", "R"),
    ("The   letter B.", "THE LETTER B"),
    ("hello, world", "HELLO WORLD"),
    ("bees", "BEES"),
    ("", ""),
    (None, ""),
])
def test_normalize(raw, expected):
    assert normalize_speech(raw) == expected


@pytest.mark.parametrize("s", [
    "", " ", "bee", "SEE?", "double u", "Double-You!!", "doubleu doubleyou",
    "a  b\tc\n", "It's the letter Z.", "ef", "EL", "ay", "(zee)", "ñandú", "straße",
    "DOUBLE DOUBLE UU", "-- -- --", "x y z",
])
def test_normalize_is_idempotent(s):
    once = normalize_speech(s)
    assert normalize_speech(once) == once


@pytest.mark.parametrize("heard,letter", [
    ("BEE", "B"),
    ("SEE", "C"),
    ("sea", "C"),
    ("DOUBLE U", "W"),
    ("zed", "Z"),
    ("aitch", "H"),
    ("it's the letter b", "B"),
    ("EKZ", "X"),            # one edit from EKS
    ("I said Q please", "Q"),
    ("BX", "B"),             # short transcription, first character
    ("a", "A"),
])
def test_accepts_spoken_letter(heard, letter):
    assert matches_spoken_letter(heard, letter)


@pytest.mark.parametrize("heard,letter", [
    ("XYZ", "B"),
    ("", "A"),
    ("   ", "A"),
    ("dog", "A"),
    ("B", "D"),
    (None, "A"),
    ("BEE", None),
])
def test_rejects_other_sounds(heard, letter):
    assert not matches_spoken_letter(heard, letter)


def test_every_letter_matches_its_own_spellings():
    for letter, sounds in PHONETIC_MAP.items():
        assert sounds[0] == letter
        for sound in sounds:
            assert matches_spoken_letter(sound, letter), (letter, sound)


@pytest.mark.parametrize("a,b,expected", [
    ("KITTEN", "SITTING", 3),
    ("A", "A", 0),
    ("", "ABC", 3),
    ("FLAW", "LAWN", 2),
])
def test_levenshtein(a, b, expected):
    assert levenshtein(a, b) == expected
    assert levenshtein(b, a) == expected


def test_match_reports_the_normalized_transcription():
    assert match_spoken_letter("Double you!", "w") == (True, "W")
    assert match_spoken_letter("  see  ", "C") == (True, "SEE")
    assert match_spoken_letter("xyz", "B") == (False, "XYZ")
    assert match_spoken_letter(None, "B") == (False, "")
