# quizmaster/models/app_settings.py
from sqlalchemy import Column, Integer, String, Boolean, Text
from quizmaster.database import Base


class AppSettings(Base):
    """Process-wide settings, a single row with id=1"""
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, default=1)
    app_name = Column(String, default="QuizMaster")
    app_description = Column(Text, default="An interactive quiz application for learning and fun")
    max_questions_per_quiz = Column(Integer, default=10)
    enable_timer = Column(Boolean, default=False)
    timer_duration = Column(Integer, default=30)
    show_explanations = Column(Boolean, default=True)
    allow_guest_play = Column(Boolean, default=True)
    maintenance_mode = Column(Boolean, default=False)
    adaptive_difficulty_enabled = Column(Boolean, default=True)
    difficulty_threshold_easy = Column(Integer, default=50)
    difficulty_threshold_hard = Column(Integer, default=80)
