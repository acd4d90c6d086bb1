# quizmaster/services/quiz_service.py
import logging
import random
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from quizmaster.catalog import DEFAULT_CATEGORIES, FALLBACK_QUESTIONS
from quizmaster.core.utils import calculate_percentage
from quizmaster.models import QuizSession
from quizmaster.schemas import AppSettingsRecord, QuestionRecord
from quizmaster.stores.base import QuestionStore

logger = logging.getLogger(__name__)

# How many matching questions are pulled from the store before sampling
QUESTION_POOL_SIZE = 1000


class SessionStatus(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class SessionStateError(Exception):
    """Raised when an operation does not fit the session's current state"""


# ================================
# QUESTION SELECTION
# ================================

def fallback_questions(category: Optional[str] = None) -> List[QuestionRecord]:
    """Built-in questions, filtered by category when one is given"""
    questions = [QuestionRecord(**data) for data in FALLBACK_QUESTIONS]
    if category:
        questions = [q for q in questions if q.category == category]
    return questions


def fetch_questions(question_store: QuestionStore, count: int, category: Optional[str] = None,
                    difficulty: Optional[str] = None) -> List[QuestionRecord]:
    """Random question set from the store, or the built-in set if the store fails"""
    try:
        pool = question_store.list_questions(category=category, difficulty=difficulty, limit=QUESTION_POOL_SIZE)
    except Exception as e:
        logger.warning(f"⚠️ Question store unavailable, using built-in questions: {str(e)}")
        return fallback_questions(category)[:count]

    if len(pool) <= count:
        random.shuffle(pool)
        return pool
    return random.sample(pool, count)


def list_categories(question_store: QuestionStore) -> List[str]:
    """Distinct categories in the question store"""
    try:
        questions = question_store.list_questions(limit=0)
        return sorted({q.category for q in questions})
    except Exception as e:
        logger.warning(f"⚠️ Error loading categories: {str(e)}")
        return list(DEFAULT_CATEGORIES)


def public_question(question: QuestionRecord) -> Dict[str, Any]:
    """Question as shown to the player, without the answer key"""
    return {
        "id": question.id,
        "question": question.question,
        "options": question.options,
        "difficulty": question.difficulty,
        "category": question.category
    }


# ================================
# SESSION ENGINE
# ================================

class QuizSessionEngine:
    """
    One quiz run: NOT_STARTED -> LOADING -> IN_PROGRESS -> COMPLETED.

    The engine holds the question set, the answer log (one slot per question,
    None until answered), the running correct count and the adaptive
    difficulty. Callers must submit answers one at a time; the engine does not
    guard against a double submit for the same question.
    """

    def __init__(self, category: Optional[str] = None, *, hard_threshold: int = 80,
                 easy_threshold: int = 50, adaptive: bool = True, show_explanations: bool = True,
                 session_id: Optional[str] = None):
        self.session_id = session_id or uuid.uuid4().hex
        self.category = category
        self.hard_threshold = hard_threshold
        self.easy_threshold = easy_threshold
        self.adaptive = adaptive
        self.show_explanations = show_explanations

        self.status = SessionStatus.NOT_STARTED
        self.questions: List[QuestionRecord] = []
        self.answers: List[Optional[int]] = []
        self.current_index = 0
        self.correct_count = 0
        self.difficulty = "medium"
        self.started_at: Optional[datetime] = None
        self.completed_at: Optional[datetime] = None

    @classmethod
    def from_settings(cls, app_settings: AppSettingsRecord, category: Optional[str] = None) -> "QuizSessionEngine":
        return cls(
            category,
            hard_threshold=app_settings.difficulty_threshold_hard,
            easy_threshold=app_settings.difficulty_threshold_easy,
            adaptive=app_settings.adaptive_difficulty_enabled,
            show_explanations=app_settings.show_explanations
        )

    # ---------- lifecycle ----------

    def begin_loading(self):
        if self.status != SessionStatus.NOT_STARTED:
            raise SessionStateError(f"Cannot start a session that is {self.status.value}")
        self.status = SessionStatus.LOADING
        self.started_at = datetime.now(timezone.utc)

    def load(self, questions: List[QuestionRecord]):
        if self.status != SessionStatus.LOADING:
            raise SessionStateError(f"Cannot load questions into a session that is {self.status.value}")

        self.questions = list(questions)
        self.answers = [None] * len(self.questions)
        self.current_index = 0
        self.correct_count = 0
        self.difficulty = "medium"

        if not self.questions:
            # Nothing to ask, finish with an empty result
            logger.warning(f"⚠️ No questions available for category {self.category or 'any'}")
            self._complete()
        else:
            self.status = SessionStatus.IN_PROGRESS

    def start(self, question_store: QuestionStore, count: int = 10, difficulty: Optional[str] = None):
        """Fetch a question set and move to IN_PROGRESS (or COMPLETED if empty)"""
        self.begin_loading()
        self.load(fetch_questions(question_store, count, self.category, difficulty))
        return self

    def abandon(self):
        if self.status in (SessionStatus.COMPLETED, SessionStatus.ABANDONED):
            raise SessionStateError(f"Session is already {self.status.value}")
        self.status = SessionStatus.ABANDONED

    def _complete(self):
        self.status = SessionStatus.COMPLETED
        self.completed_at = datetime.now(timezone.utc)

    # ---------- answering ----------

    @property
    def current_question(self) -> Optional[QuestionRecord]:
        if self.status != SessionStatus.IN_PROGRESS:
            return None
        return self.questions[self.current_index]

    @property
    def questions_answered(self) -> int:
        return sum(1 for answer in self.answers if answer is not None)

    def submit_answer(self, selected_index: int) -> Dict[str, Any]:
        """Score the answer to the current question and advance"""
        question = self.current_question
        if question is None:
            raise SessionStateError(f"Cannot answer a session that is {self.status.value}")

        if not 0 <= selected_index < len(question.options):
            raise SessionStateError(
                f"Option {selected_index} is out of range for a question with {len(question.options)} options"
            )

        is_correct = selected_index == question.correct_answer
        if is_correct:
            self.correct_count += 1
        self.answers[self.current_index] = selected_index

        self._adapt_difficulty()

        feedback = {
            "is_correct": is_correct,
            "correct_answer": question.correct_answer,
            "explanation": question.explanation if self.show_explanations else None,
            "difficulty": self.difficulty
        }

        if self.current_index >= len(self.questions) - 1:
            self._complete()
            feedback["quiz_completed"] = True
            feedback["result"] = self.result()
        else:
            self.current_index += 1
            feedback["quiz_completed"] = False
            feedback["next_question"] = public_question(self.questions[self.current_index])

        return feedback

    def running_accuracy(self) -> float:
        """Accuracy with one extra pseudo-correct answer credited"""
        return (self.correct_count + 1) / (self.questions_answered + 1) * 100

    def _adapt_difficulty(self):
        if not self.adaptive:
            return

        accuracy = self.running_accuracy()
        if accuracy >= self.hard_threshold and self.difficulty != "hard":
            logger.info(f"🧠 Session {self.session_id}: difficulty -> hard ({accuracy:.0f}%)")
            self.difficulty = "hard"
        elif accuracy < self.easy_threshold and self.difficulty != "easy":
            logger.info(f"🧠 Session {self.session_id}: difficulty -> easy ({accuracy:.0f}%)")
            self.difficulty = "easy"

    # ---------- results ----------

    def result(self) -> Dict[str, Any]:
        total = self.questions_answered
        return {
            "score": self.correct_count,
            "total": total,
            "percentage": calculate_percentage(self.correct_count, total),
            "final_difficulty": self.difficulty,
            "category": self.category or "General",
            "answers": list(self.answers)
        }

    def answer_log(self) -> List[Dict[str, Any]]:
        """Per-question answers for the attempt record"""
        return [
            {
                "question_id": question.id,
                "selected_answer": answer,
                "correct": answer == question.correct_answer
            }
            for question, answer in zip(self.questions, self.answers)
            if answer is not None
        ]

    def time_spent_seconds(self) -> int:
        if not self.started_at:
            return 0
        end = self.completed_at or datetime.now(timezone.utc)
        return max(0, int((end - self.started_at).total_seconds()))

    # ---------- persistence ----------

    def to_state(self) -> Dict[str, Any]:
        return {
            "id": self.session_id,
            "category": self.category,
            "status": self.status.value,
            "questions": [q.model_dump(mode="json") for q in self.questions],
            "answers": list(self.answers),
            "current_index": self.current_index,
            "correct_count": self.correct_count,
            "difficulty": self.difficulty,
            "config": {
                "hard_threshold": self.hard_threshold,
                "easy_threshold": self.easy_threshold,
                "adaptive": self.adaptive,
                "show_explanations": self.show_explanations
            },
            "started_at": self.started_at,
            "completed_at": self.completed_at
        }

    @classmethod
    def from_state(cls, state: Dict[str, Any]) -> "QuizSessionEngine":
        config = state.get("config") or {}
        engine = cls(
            state.get("category"),
            hard_threshold=config.get("hard_threshold", 80),
            easy_threshold=config.get("easy_threshold", 50),
            adaptive=config.get("adaptive", True),
            show_explanations=config.get("show_explanations", True),
            session_id=state["id"]
        )
        engine.status = SessionStatus(state["status"])
        engine.questions = [QuestionRecord(**q) for q in state.get("questions") or []]
        engine.answers = list(state.get("answers") or [None] * len(engine.questions))
        engine.current_index = state.get("current_index", 0)
        engine.correct_count = state.get("correct_count", 0)
        engine.difficulty = state.get("difficulty", "medium")
        engine.started_at = _as_utc(state.get("started_at"))
        engine.completed_at = _as_utc(state.get("completed_at"))
        return engine


def start_session(question_store: QuestionStore, app_settings: AppSettingsRecord, category: Optional[str] = None,
                  difficulty: Optional[str] = None) -> QuizSessionEngine:
    """New engine parameterized by the app settings, already loaded with questions"""
    engine = QuizSessionEngine.from_settings(app_settings, category)
    return engine.start(question_store, app_settings.max_questions_per_quiz, difficulty)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ================================
# PERSISTED SESSIONS
# ================================

def _save_session(db: Session, engine: QuizSessionEngine, user_id: Optional[int],
                  row: Optional[QuizSession] = None) -> QuizSession:
    state = engine.to_state()
    if row is None:
        row = QuizSession(id=engine.session_id, user_id=user_id)
        db.add(row)

    row.category = state["category"]
    row.status = state["status"]
    row.questions = state["questions"]
    row.answers = state["answers"]
    row.current_index = state["current_index"]
    row.correct_count = state["correct_count"]
    row.difficulty = state["difficulty"]
    row.config = state["config"]
    row.started_at = state["started_at"]
    row.completed_at = state["completed_at"]
    db.commit()
    return row


def _load_session(db: Session, session_id: str, user_id: Optional[int]) -> Optional[QuizSession]:
    return db.query(QuizSession).filter(
        QuizSession.id == session_id,
        QuizSession.user_id == user_id
    ).first()


def _engine_for(row: QuizSession) -> QuizSessionEngine:
    return QuizSessionEngine.from_state({
        "id": row.id,
        "category": row.category,
        "status": row.status,
        "questions": row.questions,
        "answers": row.answers,
        "current_index": row.current_index,
        "correct_count": row.correct_count,
        "difficulty": row.difficulty,
        "config": row.config,
        "started_at": row.started_at,
        "completed_at": row.completed_at
    })


def session_summary(engine: QuizSessionEngine, app_settings: Optional[AppSettingsRecord] = None) -> Dict[str, Any]:
    """Session view returned by the API"""
    question = engine.current_question
    summary = {
        "quiz_id": engine.session_id,
        "status": engine.status.value,
        "category": engine.category,
        "difficulty": engine.difficulty,
        "current_question": engine.current_index + 1 if question else None,
        "total_questions": len(engine.questions),
        "question": public_question(question) if question else None,
    }
    if app_settings is not None and app_settings.enable_timer:
        summary["timer_seconds"] = app_settings.timer_duration
    if engine.status == SessionStatus.COMPLETED:
        summary["result"] = engine.result()
    return summary


def start_quiz(db: Session, question_store: QuestionStore, app_settings: AppSettingsRecord,
               user_id: Optional[int] = None, category: Optional[str] = None,
               difficulty: Optional[str] = None) -> Dict:
    """Start a new quiz session"""
    if app_settings.maintenance_mode:
        return {"success": False, "message": "Quizzes are unavailable during maintenance"}

    if user_id is None and not app_settings.allow_guest_play:
        return {"success": False, "message": "Not authorized: sign in to play"}

    try:
        engine = start_session(question_store, app_settings, category, difficulty)
        _save_session(db, engine, user_id)
        logger.info(f"✅ Quiz {engine.session_id} started with {len(engine.questions)} questions")

        return {
            "success": True,
            "message": "Quiz started successfully",
            "engine": engine
        }

    except Exception as e:
        db.rollback()
        logger.error(f"❌ Error starting quiz: {str(e)}")
        return {"success": False, "message": f"Error starting quiz: {str(e)}"}


def submit_answer(db: Session, session_id: str, selected_index: int, user_id: Optional[int] = None,
                  aggregator=None) -> Dict:
    """Submit answer to current quiz question"""
    row = _load_session(db, session_id, user_id)
    if not row:
        return {"success": False, "message": "Quiz session not found"}

    engine = _engine_for(row)
    try:
        feedback = engine.submit_answer(selected_index)
    except SessionStateError as e:
        return {"success": False, "message": str(e)}

    try:
        _save_session(db, engine, user_id, row)
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Error saving quiz session {session_id}: {str(e)}")
        return {"success": False, "message": f"Error submitting answer: {str(e)}"}

    if engine.status == SessionStatus.COMPLETED:
        result = feedback["result"]
        logger.info(f"✅ Quiz {session_id} completed: {result['score']}/{result['total']}")

        if aggregator is not None and user_id is not None and result["total"] > 0:
            attempt_id = aggregator.record_attempt(
                user_id,
                result["category"],
                result["percentage"],
                engine.time_spent_seconds(),
                total_questions=result["total"],
                difficulty=result["final_difficulty"],
                answers=engine.answer_log(),
                session_id=engine.session_id
            )
            if attempt_id is not None:
                row.attempt_id = attempt_id
                db.commit()

    return {"success": True, "message": "Answer submitted successfully", "feedback": feedback}


def get_session(db: Session, session_id: str, user_id: Optional[int] = None) -> Dict:
    row = _load_session(db, session_id, user_id)
    if not row:
        return {"success": False, "message": "Quiz session not found"}
    return {"success": True, "message": "Quiz session retrieved", "engine": _engine_for(row)}


def abandon_quiz(db: Session, session_id: str, user_id: Optional[int] = None) -> Dict:
    """Abandon an in-progress quiz; nothing is recorded"""
    row = _load_session(db, session_id, user_id)
    if not row:
        return {"success": False, "message": "Quiz session not found"}

    engine = _engine_for(row)
    try:
        engine.abandon()
    except SessionStateError as e:
        return {"success": False, "message": str(e)}

    _save_session(db, engine, user_id, row)
    return {"success": True, "message": "Quiz abandoned successfully"}
