"""
Answer-key codec.

Turns an uppercase letter string such as ``"BAD"`` into the stored mapping
``{"q1": 1, "q2": 0, "q3": 3}``.
"""
import re
from typing import Dict, Optional

from igloo.errors import ValidationError

CHOICE_LETTERS = "ABCDE"
ALLOWED_CHOICE_COUNTS = (4, 5)
MIN_QUESTIONS = 1
MAX_QUESTIONS = 200

_WHITESPACE = re.compile(r"\s+")


def choice_letters(choices_count: int) -> str:
    """Return the first ``choices_count`` letters of ``ABCDE``."""
    if choices_count not in ALLOWED_CHOICE_COUNTS:
        raise ValidationError("choices_count must be 4 or 5")
    return CHOICE_LETTERS[:choices_count]


def normalize_key(raw: Optional[str]) -> str:
    """Strip, uppercase and drop all whitespace from a raw key string."""
    return _WHITESPACE.sub("", str(raw or "").strip().upper())


def validate_num_questions(num_questions: int) -> int:
    if num_questions < MIN_QUESTIONS or num_questions > MAX_QUESTIONS:
        raise ValidationError(f"num_questions must be {MIN_QUESTIONS}-{MAX_QUESTIONS}")
    return num_questions


def encode_answer_key(raw: Optional[str], num_questions: int, choices_count: int) -> Dict[str, int]:
    """
    Encode a letter string into a ``{"q<i>": index}`` mapping.

    Args:
        raw: Answer letters, one per question (case and whitespace are ignored)
        num_questions: Declared question count; the key must match it exactly
        choices_count: 4 or 5, selecting ``ABCD`` or ``ABCDE``

    Returns:
        Mapping of question id to zero-based choice index

    Raises:
        ValidationError: on a length mismatch or a letter outside the allowed set
    """
    letters = choice_letters(choices_count)
    key = normalize_key(raw)
    if len(key) != num_questions:
        raise ValidationError(f"answer_key must be length {num_questions}")

    encoded: Dict[str, int] = {}
    for i, letter in enumerate(key, start=1):
        idx = letters.find(letter)
        if idx == -1:
            raise ValidationError(f"answer_key must use only {letters}")
        encoded[f"q{i}"] = idx
    return encoded
