# quizmaster/models/question.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, JSON
from sqlalchemy.sql import func
from quizmaster.database import Base


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # ordered, index is the answer key
    correct_answer = Column(Integer, nullable=False)
    difficulty = Column(String, default="medium", index=True)  # easy, medium, hard
    category = Column(String, nullable=False, index=True)
    explanation = Column(Text, nullable=False, default="")

    deleted = Column(Boolean, default=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
