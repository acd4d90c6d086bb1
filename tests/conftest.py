import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep the app off the real database and away from real providers
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
for key in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "TOGETHER_API_KEY"):
    os.environ[key] = ""
for key in ("OPENAI_BASE_URL", "ANTHROPIC_BASE_URL", "TOGETHER_BASE_URL"):
    os.environ.pop(key, None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quizmaster import models  # noqa: F401
from quizmaster.api.deps import get_tutor_resolver
from quizmaster.database import Base, get_db
from quizmaster.main import app
from quizmaster.services.tutor import TutorResolver
from tests.fakes import InMemoryQuestionStore, InMemoryUserStore, make_question


@pytest.fixture
def question_store():
    return InMemoryQuestionStore(
        [make_question(f"Math question {i}") for i in range(1, 13)]
        + [make_question(f"Science question {i}", category="Science") for i in range(1, 4)]
    )


@pytest.fixture
def user_store():
    store = InMemoryUserStore()
    store.create_user({
        "email": "student@example.com",
        "name": "Sam Student",
        "total_points": 0,
        "level": 1,
        "streak": 0,
        "quizzes_taken": 0,
        "average_score": 0,
        "favorite_categories": [],
        "achievements": [],
    })
    return store


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_tutor_resolver] = lambda: TutorResolver([])
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
