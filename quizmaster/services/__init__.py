# quizmaster/services/__init__.py
"""
Import all services for easy access
"""

from quizmaster.services import auth_service
from quizmaster.services import progress_service
from quizmaster.services import question_service
from quizmaster.services import quiz_service
from quizmaster.services import settings_service

# Export services
__all__ = [
    "auth_service",
    "progress_service",
    "question_service",
    "quiz_service",
    "settings_service"
]
