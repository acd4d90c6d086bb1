"""QuizMaster: adaptive quiz and learning API."""

__version__ = "1.0.0"
