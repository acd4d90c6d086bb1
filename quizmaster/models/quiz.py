# quizmaster/models/quiz.py
from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from quizmaster.database import Base


class QuizSession(Base):
    __tablename__ = "quiz_sessions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # null for guest play
    category = Column(String, nullable=True)

    # SESSION STATE
    status = Column(String, default="in_progress")  # in_progress, completed, abandoned
    questions = Column(JSON, nullable=False)  # snapshot of the question set
    answers = Column(JSON, nullable=False)  # one slot per question, null until answered
    current_index = Column(Integer, default=0)
    correct_count = Column(Integer, default=0)
    difficulty = Column(String, default="medium")
    config = Column(JSON, nullable=False)  # thresholds and flags the session was started with

    started_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)
    attempt_id = Column(Integer, ForeignKey("quiz_attempts.id"), nullable=True)

    user = relationship("User")


class QuizAttempt(Base):
    __tablename__ = "quiz_attempts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    session_id = Column(String, unique=True, index=True, nullable=True)

    # RESULTS
    score = Column(Float, nullable=False)  # percentage 0-100
    total_questions = Column(Integer, nullable=False)
    category = Column(String, nullable=False, index=True)
    difficulty = Column(String, nullable=False)
    answers = Column(JSON, default=list)
    time_spent = Column(Integer, default=0)  # seconds

    completed_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
