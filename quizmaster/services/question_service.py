# quizmaster/services/question_service.py
import logging
import re
import string
from datetime import date
from typing import Any, Dict, List, Optional

from quizmaster.core.utils import validate_question
from quizmaster.schemas import QuestionRecord
from quizmaster.stores.base import QuestionStore

logger = logging.getLogger(__name__)

EXPORT_TITLE = "Quiz Questions Export"
CORRECT_MARK = "✓"
OPTION_LETTERS = string.ascii_uppercase

QUESTION_LINE = re.compile(r"^(\d+)\.\s+(.+)$")
META_LINE = re.compile(r"^Category:\s*(.+?)\s*\|\s*Difficulty:\s*(.+)$")
OPTION_LINE = re.compile(r"^([A-Z])\.\s*(.+)$")
EXPLANATION_PREFIX = "Explanation:"


class QuestionValidationError(Exception):
    """Question form failed validation; nothing was written"""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class ImportFormatError(Exception):
    """Import text could not be parsed; the whole batch is rejected"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


def ensure_valid(data: Dict[str, Any]):
    result = validate_question(data)
    if not result["is_valid"]:
        raise QuestionValidationError(result["errors"])


def _clean(data: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = dict(data)
    for field in ("question", "explanation", "category"):
        if isinstance(cleaned.get(field), str):
            cleaned[field] = cleaned[field].strip()
    if isinstance(cleaned.get("options"), list):
        cleaned["options"] = [str(option).strip() for option in cleaned["options"]]
    return cleaned


# ================================
# CRUD
# ================================

def list_questions(question_store: QuestionStore, category: Optional[str] = None,
                   difficulty: Optional[str] = None, limit: int = 50) -> List[QuestionRecord]:
    return question_store.list_questions(category=category, difficulty=difficulty, limit=limit)


def create_question(question_store: QuestionStore, data: Dict[str, Any]) -> dict:
    """Validate and insert a question"""
    data = _clean(data)
    try:
        ensure_valid(data)
    except QuestionValidationError as e:
        return {"success": False, "message": str(e), "errors": e.errors}

    try:
        question_id = question_store.insert_question(data)
    except Exception as e:
        logger.error(f"❌ Error creating question: {str(e)}")
        return {"success": False, "message": f"Error creating question: {str(e)}"}

    logger.info(f"✅ Question {question_id} created in {data['category']}")
    return {"success": True, "message": "Question created successfully", "question_id": question_id}


def update_question(question_store: QuestionStore, question_id: str, data: Dict[str, Any]) -> dict:
    """Merge changes into a question; the merged result must still be valid"""
    existing = question_store.get_question(question_id)
    if not existing:
        return {"success": False, "message": "Question not found"}

    changes = _clean({key: value for key, value in data.items() if value is not None})
    merged = existing.model_dump(include={"question", "options", "correct_answer", "difficulty",
                                          "category", "explanation"})
    merged.update(changes)

    try:
        ensure_valid(merged)
    except QuestionValidationError as e:
        return {"success": False, "message": str(e), "errors": e.errors}

    try:
        question_store.update_question(question_id, changes)
    except KeyError:
        return {"success": False, "message": "Question not found"}
    except Exception as e:
        logger.error(f"❌ Error updating question {question_id}: {str(e)}")
        return {"success": False, "message": f"Error updating question: {str(e)}"}

    return {"success": True, "message": "Question updated successfully"}


def delete_question(question_store: QuestionStore, question_id: str) -> dict:
    """Soft delete: the question is hidden from lists and quizzes"""
    try:
        question_store.soft_delete_question(question_id)
    except KeyError:
        return {"success": False, "message": "Question not found"}
    except Exception as e:
        logger.error(f"❌ Error deleting question {question_id}: {str(e)}")
        return {"success": False, "message": f"Error deleting question: {str(e)}"}

    return {"success": True, "message": "Question deleted successfully"}


# ================================
# EXPORT / IMPORT
# ================================

def format_questions(questions: List[QuestionRecord], export_date: Optional[date] = None) -> str:
    """Render questions in the plain-text export layout"""
    export_date = export_date or date.today()
    lines = [
        EXPORT_TITLE,
        f"Total Questions: {len(questions)}",
        f"Export Date: {export_date.isoformat()}",
        ""
    ]

    for number, question in enumerate(questions, start=1):
        lines.append(f"{number}. {question.question}")
        lines.append(f"Category: {question.category} | Difficulty: {question.difficulty}")
        for index, option in enumerate(question.options):
            mark = f" {CORRECT_MARK}" if index == question.correct_answer else ""
            lines.append(f"{OPTION_LETTERS[index]}. {option}{mark}")
        if question.explanation:
            lines.append(f"{EXPLANATION_PREFIX} {question.explanation}")
        lines.append("")

    return "\n".join(lines)


def export_questions(question_store: QuestionStore) -> str:
    questions = question_store.list_questions(limit=0)
    logger.info(f"✅ Exporting {len(questions)} questions")
    return format_questions(questions)


def _finish_block(block: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if block is None:
        return None

    start = block.pop("_line")
    marked = block.pop("_marked")

    if "category" not in block:
        raise ImportFormatError("Question is missing its 'Category: ... | Difficulty: ...' line", start)
    if len(marked) != 1:
        raise ImportFormatError(f"Question must mark exactly one option with {CORRECT_MARK}", start)

    block["correct_answer"] = marked[0]
    result = validate_question(block)
    if not result["is_valid"]:
        raise ImportFormatError("; ".join(result["errors"]), start)
    return block


def parse_questions_text(text: str) -> List[Dict[str, Any]]:
    """Parse the export layout back into question dicts. Any malformed block fails the whole batch"""
    questions: List[Dict[str, Any]] = []
    block: Optional[Dict[str, Any]] = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()

        # Skip empty lines and the export header
        if not line or line == EXPORT_TITLE or line.startswith(("Total Questions:", "Export Date:")):
            continue

        match = QUESTION_LINE.match(line)
        if match:
            finished = _finish_block(block)
            if finished:
                questions.append(finished)
            block = {"question": match.group(2).strip(), "options": [], "explanation": "",
                     "_line": line_number, "_marked": []}
            continue

        if block is None:
            raise ImportFormatError(f"Expected a numbered question, got '{line[:40]}'", line_number)

        match = META_LINE.match(line)
        if match:
            block["category"] = match.group(1).strip()
            block["difficulty"] = match.group(2).strip().lower()
            continue

        match = OPTION_LINE.match(line)
        if match:
            letter, option = match.groups()
            if OPTION_LETTERS.index(letter) != len(block["options"]):
                raise ImportFormatError(f"Option {letter} is out of order", line_number)
            option = option.strip()
            if option.endswith(CORRECT_MARK):
                option = option[:-len(CORRECT_MARK)].strip()
                block["_marked"].append(len(block["options"]))
            block["options"].append(option)
            continue

        if line.startswith(EXPLANATION_PREFIX):
            block["explanation"] = line[len(EXPLANATION_PREFIX):].strip()
            continue

        raise ImportFormatError(f"Unrecognized line '{line[:40]}'", line_number)

    finished = _finish_block(block)
    if finished:
        questions.append(finished)

    if not questions:
        raise ImportFormatError("No questions found")
    return questions


def import_questions(question_store: QuestionStore, text: str) -> dict:
    """Parse and bulk insert; nothing is written if any block is malformed"""
    try:
        questions = parse_questions_text(text)
    except ImportFormatError as e:
        logger.warning(f"⚠️ Import rejected: {str(e)}")
        return {"success": False, "message": f"Import failed: {str(e)}"}

    try:
        count = question_store.bulk_import(questions)
    except Exception as e:
        logger.error(f"❌ Bulk import failed: {str(e)}")
        return {"success": False, "message": f"Import failed: {str(e)}"}

    logger.info(f"✅ Imported {count} questions")
    return {"success": True, "message": f"Successfully imported {count} questions", "imported": count}
