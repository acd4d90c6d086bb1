# quizmaster/core/utils.py
import math
import string
from typing import Any, Dict, List

from quizmaster.schemas import DIFFICULTIES

# Options are lettered A-Z in the plain-text export
MAX_OPTIONS = len(string.ascii_uppercase)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (matches score display)"""
    return int(math.floor(value + 0.5))


def calculate_percentage(correct_answers: int, total_questions: int) -> int:
    """Calculate quiz score as whole percentage"""
    if total_questions == 0:
        return 0
    return round_half_up(100 * correct_answers / total_questions)


def _has_line_break(values: List[Any]) -> bool:
    # Stripping first, so only inner line breaks count
    return any(len(str(value).strip().splitlines()) > 1 for value in values)


def validate_question(data: Dict[str, Any]) -> dict:
    """Validate an admin question form"""
    errors: List[str] = []

    question = data.get("question") or ""
    options = data.get("options") or []
    explanation = data.get("explanation") or ""
    category = data.get("category") or ""
    difficulty = data.get("difficulty", "medium")
    correct_answer = data.get("correct_answer")

    if not question.strip():
        errors.append("Question is required")
    if len(options) < 2:
        errors.append("Must have at least 2 options")
    if len(options) > MAX_OPTIONS:
        errors.append(f"Must have at most {MAX_OPTIONS} options")
    if any(not str(option).strip() for option in options):
        errors.append("All options must be filled")
    if _has_line_break([question, category, explanation, *options]):
        errors.append("Question, options, category and explanation must each fit on one line")
    if not explanation.strip():
        errors.append("Explanation is required")
    if not category.strip():
        errors.append("Category is required")
    if difficulty not in DIFFICULTIES:
        errors.append(f"Difficulty must be one of: {', '.join(DIFFICULTIES)}")
    if not isinstance(correct_answer, int) or not 0 <= correct_answer < len(options):
        errors.append("Correct answer must point at one of the options")

    return {"is_valid": len(errors) == 0, "errors": errors}


def derive_level(total_points: int) -> int:
    """One level per 1000 points, starting at level 1"""
    return total_points // 1000 + 1
