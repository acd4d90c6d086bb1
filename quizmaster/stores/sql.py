# quizmaster/stores/sql.py
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from quizmaster.models import Question, QuizAttempt, User, UserProgress
from quizmaster.schemas import AttemptRecord, ProgressRecord, QuestionRecord, UserRecord
from quizmaster.stores.base import QuestionStore, UserStore

logger = logging.getLogger(__name__)

QUESTION_FIELDS = ("question", "options", "correct_answer", "difficulty", "category", "explanation")
USER_FIELDS = (
    "name", "role", "bio", "location", "favorite_categories", "achievements",
    "total_points", "level", "streak", "quizzes_taken", "average_score"
)
PROGRESS_FIELDS = ("total_attempts", "average_score", "best_score", "total_time_spent", "last_attempt_at")


def _question_record(row: Question) -> QuestionRecord:
    return QuestionRecord(
        id=str(row.id),
        question=row.question,
        options=list(row.options or []),
        correct_answer=row.correct_answer,
        difficulty=row.difficulty,
        category=row.category,
        explanation=row.explanation or "",
        created_at=row.created_at
    )


def _user_record(row: User) -> UserRecord:
    return UserRecord(
        id=row.id,
        email=row.email,
        name=row.name,
        role=row.role or "student",
        total_points=row.total_points or 0,
        level=row.level or 1,
        streak=row.streak or 0,
        quizzes_taken=row.quizzes_taken or 0,
        average_score=row.average_score or 0,
        favorite_categories=list(row.favorite_categories or []),
        achievements=list(row.achievements or []),
        bio=row.bio,
        location=row.location,
        created_at=row.created_at,
        updated_at=row.updated_at
    )


class SqlQuestionStore(QuestionStore):
    def __init__(self, db: Session):
        self.db = db

    def _get_row(self, question_id: str) -> Optional[Question]:
        try:
            pk = int(question_id)
        except (TypeError, ValueError):
            return None
        return self.db.query(Question).filter(Question.id == pk, Question.deleted == False).first()

    def list_questions(self, category: Optional[str] = None, difficulty: Optional[str] = None,
                       limit: int = 50) -> List[QuestionRecord]:
        query = self.db.query(Question).filter(Question.deleted == False)

        if category:
            query = query.filter(Question.category == category)
        if difficulty:
            query = query.filter(Question.difficulty == difficulty)

        query = query.order_by(Question.created_at.desc(), Question.id.desc())
        if limit > 0:
            query = query.limit(limit)

        return [_question_record(row) for row in query.all()]

    def get_question(self, question_id: str) -> Optional[QuestionRecord]:
        row = self._get_row(question_id)
        return _question_record(row) if row else None

    def insert_question(self, data: Dict[str, Any]) -> str:
        row = Question(**{field: data[field] for field in QUESTION_FIELDS if field in data})
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return str(row.id)

    def update_question(self, question_id: str, data: Dict[str, Any]) -> None:
        row = self._get_row(question_id)
        if not row:
            raise KeyError(question_id)

        for field in QUESTION_FIELDS:
            if field in data and data[field] is not None:
                setattr(row, field, data[field])
        self.db.commit()

    def soft_delete_question(self, question_id: str) -> None:
        row = self._get_row(question_id)
        if not row:
            raise KeyError(question_id)

        row.deleted = True
        self.db.commit()

    def bulk_import(self, questions: List[Dict[str, Any]]) -> int:
        try:
            for data in questions:
                self.db.add(Question(**{field: data[field] for field in QUESTION_FIELDS if field in data}))
            self.db.commit()
            return len(questions)
        except Exception:
            self.db.rollback()
            raise


class SqlUserStore(UserStore):
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        row = self.db.query(User).filter(User.id == user_id).first()
        return _user_record(row) if row else None

    def create_user(self, data: Dict[str, Any]) -> int:
        row = User(**data)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row.id

    def merge_update_user(self, user_id: int, data: Dict[str, Any]) -> None:
        row = self.db.query(User).filter(User.id == user_id).first()
        if not row:
            raise KeyError(user_id)

        for field in USER_FIELDS:
            if field in data:
                setattr(row, field, data[field])
        self.db.commit()

    def list_top_users(self, limit: int = 50) -> List[UserRecord]:
        rows = self.db.query(User).order_by(User.total_points.desc(), User.id.asc()).limit(limit).all()
        return [_user_record(row) for row in rows]

    def get_user_progress(self, user_id: int) -> List[ProgressRecord]:
        rows = self.db.query(UserProgress).filter(UserProgress.user_id == user_id).all()
        records = [ProgressRecord.model_validate(row) for row in rows]

        # Most recent first, records without a timestamp last
        dated = sorted((r for r in records if r.last_attempt_at), key=lambda r: r.last_attempt_at, reverse=True)
        undated = [r for r in records if not r.last_attempt_at]
        return dated + undated

    def upsert_user_progress(self, user_id: int, category: str, data: Dict[str, Any]) -> None:
        row = self.db.query(UserProgress).filter(
            UserProgress.user_id == user_id,
            UserProgress.category == category
        ).first()

        if not row:
            row = UserProgress(user_id=user_id, category=category)
            self.db.add(row)

        for field in PROGRESS_FIELDS:
            if field in data:
                setattr(row, field, data[field])
        self.db.commit()

    def append_quiz_attempt(self, data: Dict[str, Any]) -> Tuple[int, bool]:
        session_id = data.get("session_id")
        if session_id:
            existing = self.db.query(QuizAttempt).filter(QuizAttempt.session_id == session_id).first()
            if existing:
                logger.warning(f"⚠️ Attempt for session {session_id} already recorded")
                return existing.id, False

        record = AttemptRecord(**data)
        row = QuizAttempt(**record.model_dump(exclude={"id"}, exclude_none=True))
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row.id, True

    def list_user_attempts(self, user_id: int, limit: int = 10) -> List[AttemptRecord]:
        query = self.db.query(QuizAttempt).filter(
            QuizAttempt.user_id == user_id
        ).order_by(
            QuizAttempt.completed_at.desc(), QuizAttempt.id.desc()
        )
        if limit > 0:
            query = query.limit(limit)

        return [AttemptRecord.model_validate(row) for row in query.all()]
