import math
from typing import Any, Mapping, Optional, Tuple


def count_correct(answer_key: Mapping[str, Any], answers: Optional[Mapping[str, Any]]) -> Tuple[int, int]:
    """Return ``(correct, total)`` over the question ids in the key."""
    answers = answers or {}
    correct = 0
    total = 0
    for question_id, correct_idx in answer_key.items():
        total += 1
        if question_id in answers and _same_answer(answers[question_id], correct_idx):
            correct += 1
    return correct, total


def _same_answer(given: Any, expected: Any) -> bool:
    # Numbers compare by value (1.0 matches 1); "1" and True never match
    if isinstance(given, bool) or not isinstance(given, (int, float)):
        return False
    return given == expected


def score_submission(answer_key: Optional[Mapping[str, Any]], answers: Optional[Mapping[str, Any]]) -> int:
    """
    Percentage score in ``[0, 100]``, rounded half up.

    Question ids that only appear in ``answers`` are ignored and an empty
    key scores 0.
    """
    correct, total = count_correct(answer_key or {}, answers)
    return int(math.floor(correct / max(total, 1) * 100 + 0.5))
