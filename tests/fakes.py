"""In-memory stores used in place of the database-backed ones."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

from quizmaster.schemas import AttemptRecord, ProgressRecord, QuestionRecord, UserRecord
from quizmaster.stores.base import QuestionStore, UserStore

BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryQuestionStore(QuestionStore):
    def __init__(self, questions: Optional[List[Dict[str, Any]]] = None):
        self.rows: Dict[str, Dict[str, Any]] = {}
        self._next_id = 1
        for data in questions or []:
            self.insert_question(data)

    def _record(self, question_id: str) -> QuestionRecord:
        row = self.rows[question_id]
        return QuestionRecord(id=question_id, **{k: v for k, v in row.items() if k != "deleted"})

    def list_questions(self, category=None, difficulty=None, limit=50):
        matches = [
            qid for qid, row in self.rows.items()
            if not row["deleted"]
            and (category is None or row["category"] == category)
            and (difficulty is None or row["difficulty"] == difficulty)
        ]
        matches.sort(key=lambda qid: self.rows[qid]["created_at"], reverse=True)
        if limit > 0:
            matches = matches[:limit]
        return [self._record(qid) for qid in matches]

    def get_question(self, question_id):
        row = self.rows.get(question_id)
        if row is None or row["deleted"]:
            return None
        return self._record(question_id)

    def insert_question(self, data):
        question_id = str(self._next_id)
        self.rows[question_id] = {
            "question": data["question"],
            "options": list(data["options"]),
            "correct_answer": data["correct_answer"],
            "difficulty": data.get("difficulty", "medium"),
            "category": data["category"],
            "explanation": data.get("explanation", ""),
            "created_at": BASE_TIME + timedelta(minutes=self._next_id),
            "deleted": False,
        }
        self._next_id += 1
        return question_id

    def update_question(self, question_id, data):
        if self.get_question(question_id) is None:
            raise KeyError(question_id)
        self.rows[question_id].update(data)

    def soft_delete_question(self, question_id):
        if self.get_question(question_id) is None:
            raise KeyError(question_id)
        self.rows[question_id]["deleted"] = True

    def bulk_import(self, questions):
        for data in questions:
            QuestionRecord(**data)
        for data in questions:
            self.insert_question(data)
        return len(questions)

    def active_count(self) -> int:
        return sum(1 for row in self.rows.values() if not row["deleted"])


class UnreachableQuestionStore(InMemoryQuestionStore):
    """Every read fails, as if the store were offline"""

    def list_questions(self, category=None, difficulty=None, limit=50):
        raise ConnectionError("question store unreachable")


class InMemoryUserStore(UserStore):
    def __init__(self):
        self.users: Dict[int, Dict[str, Any]] = {}
        self.progress: Dict[Tuple[int, str], Dict[str, Any]] = {}
        self.attempts: List[Dict[str, Any]] = []
        self._next_user_id = 1

    def get_user(self, user_id):
        row = self.users.get(user_id)
        return UserRecord(**row) if row else None

    def create_user(self, data):
        user_id = self._next_user_id
        self._next_user_id += 1
        self.users[user_id] = {"id": user_id, "role": "student", **data}
        return user_id

    def merge_update_user(self, user_id, data):
        if user_id not in self.users:
            raise KeyError(user_id)
        self.users[user_id].update(data)

    def list_top_users(self, limit=50):
        ranked = sorted(self.users.values(), key=lambda row: (-row.get("total_points", 0), row["id"]))
        return [UserRecord(**row) for row in ranked[:limit]]

    def get_user_progress(self, user_id):
        records = [ProgressRecord(**row) for (uid, _), row in self.progress.items() if uid == user_id]
        dated = sorted((r for r in records if r.last_attempt_at), key=lambda r: r.last_attempt_at, reverse=True)
        return dated + [r for r in records if not r.last_attempt_at]

    def upsert_user_progress(self, user_id, category, data):
        row = self.progress.setdefault((user_id, category), {"user_id": user_id, "category": category})
        row.update(data)

    def append_quiz_attempt(self, data):
        session_id = data.get("session_id")
        if session_id:
            for row in self.attempts:
                if row["session_id"] == session_id:
                    return row["id"], False

        attempt_id = len(self.attempts) + 1
        record = AttemptRecord(**data)
        row = record.model_dump()
        row["id"] = attempt_id
        if row["completed_at"] is None:
            row["completed_at"] = BASE_TIME + timedelta(hours=attempt_id)
        self.attempts.append(row)
        return attempt_id, True

    def list_user_attempts(self, user_id, limit=10):
        rows = [row for row in self.attempts if row["user_id"] == user_id]
        rows.sort(key=lambda row: (row["completed_at"], row["id"]), reverse=True)
        if limit > 0:
            rows = rows[:limit]
        return [AttemptRecord(**row) for row in rows]


class FlakyProgressUserStore(InMemoryUserStore):
    """Appends succeed but progress writes fail"""

    def upsert_user_progress(self, user_id, category, data):
        raise ConnectionError("progress write failed")


def make_question(text="What is 2 + 2?", category="Math", correct_answer=1, difficulty="medium"):
    return {
        "question": text,
        "options": ["3", "4", "5", "6"],
        "correct_answer": correct_answer,
        "difficulty": difficulty,
        "category": category,
        "explanation": f"Explanation for: {text}",
    }
