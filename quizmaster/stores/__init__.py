# quizmaster/stores/__init__.py
"""
Question and user store collaborators
"""

from quizmaster.stores.base import QuestionStore, UserStore
from quizmaster.stores.sql import SqlQuestionStore, SqlUserStore

__all__ = [
    "QuestionStore",
    "UserStore",
    "SqlQuestionStore",
    "SqlUserStore"
]
