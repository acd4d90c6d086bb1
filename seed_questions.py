# seed_questions.py
"""
One-shot seeding script for QuizMaster
Inserts the built-in question catalog into the question store.
Run once after the tables exist: python seed_questions.py [--force]
"""

import sys

from quizmaster import models  # noqa: F401 - registers tables
from quizmaster.catalog import SEED_QUESTIONS
from quizmaster.database import Base, SessionLocal, engine
from quizmaster.stores import SqlQuestionStore


def seed_questions(force: bool = False) -> int:
    """Insert the catalog in one batch. Skips a non-empty store unless forced"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        store = SqlQuestionStore(db)
        existing = store.list_questions(limit=1)
        if existing and not force:
            print("Questions already present, skipping. Use --force to insert anyway.")
            return 0

        print(f"Seeding {len(SEED_QUESTIONS)} questions...")
        count = store.bulk_import(SEED_QUESTIONS)

        categories = sorted({q["category"] for q in SEED_QUESTIONS})
        print(f"\n✅ Seeded {count} questions")
        print(f"Categories: {', '.join(categories)}")
        return count

    except Exception as e:
        print(f"\n❌ Seeding failed: {str(e)}")
        raise

    finally:
        db.close()


if __name__ == "__main__":
    seed_questions(force="--force" in sys.argv[1:])
