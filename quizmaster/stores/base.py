# quizmaster/stores/base.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from quizmaster.schemas import AttemptRecord, ProgressRecord, QuestionRecord, UserRecord


class QuestionStore(ABC):
    """Document store holding question records"""

    @abstractmethod
    def list_questions(self, category: Optional[str] = None, difficulty: Optional[str] = None,
                       limit: int = 50) -> List[QuestionRecord]:
        """Newest first, soft-deleted questions excluded. limit <= 0 means no limit"""
        pass

    @abstractmethod
    def get_question(self, question_id: str) -> Optional[QuestionRecord]:
        pass

    @abstractmethod
    def insert_question(self, data: Dict[str, Any]) -> str:
        pass

    @abstractmethod
    def update_question(self, question_id: str, data: Dict[str, Any]) -> None:
        """Merge the given fields into the stored question"""
        pass

    @abstractmethod
    def soft_delete_question(self, question_id: str) -> None:
        pass

    @abstractmethod
    def bulk_import(self, questions: List[Dict[str, Any]]) -> int:
        """Insert all questions in one batch or none of them"""
        pass


class UserStore(ABC):
    """Document store holding users, their attempts and per-category progress"""

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        pass

    @abstractmethod
    def create_user(self, data: Dict[str, Any]) -> int:
        pass

    @abstractmethod
    def merge_update_user(self, user_id: int, data: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def list_top_users(self, limit: int = 50) -> List[UserRecord]:
        """Users ordered by total points, highest first"""
        pass

    @abstractmethod
    def get_user_progress(self, user_id: int) -> List[ProgressRecord]:
        """Progress records, most recently attempted category first"""
        pass

    @abstractmethod
    def upsert_user_progress(self, user_id: int, category: str, data: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def append_quiz_attempt(self, data: Dict[str, Any]) -> Tuple[int, bool]:
        """
        Append an attempt to the log.

        Returns (attempt_id, created). An attempt carrying a session_id that
        is already in the log is not stored twice; the existing id is
        returned with created=False.
        """
        pass

    @abstractmethod
    def list_user_attempts(self, user_id: int, limit: int = 10) -> List[AttemptRecord]:
        """Newest first. limit <= 0 returns the whole log"""
        pass

    def list_all_user_attempts(self, user_id: int) -> List[AttemptRecord]:
        return self.list_user_attempts(user_id, limit=0)
