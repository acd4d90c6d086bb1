# quizmaster/models/__init__.py
"""
Import all models to ensure they are registered with SQLAlchemy
"""

from quizmaster.models.user import User
from quizmaster.models.question import Question
from quizmaster.models.quiz import QuizSession, QuizAttempt
from quizmaster.models.progress import UserProgress
from quizmaster.models.app_settings import AppSettings

# Export all models
__all__ = [
    "User",
    "Question",
    "QuizSession",
    "QuizAttempt",
    "UserProgress",
    "AppSettings"
]
