import pytest

from quizmaster.schemas import AppSettingsRecord, QuestionRecord
from quizmaster.services.quiz_service import (
    QuizSessionEngine,
    SessionStateError,
    SessionStatus,
    fallback_questions,
    fetch_questions,
    list_categories,
    start_session,
)
from tests.fakes import InMemoryQuestionStore, UnreachableQuestionStore, make_question


def build_questions(count, category="Math"):
    return [
        QuestionRecord(id=f"q{i}", **make_question(f"Question {i}", category=category))
        for i in range(count)
    ]


def loaded_engine(count=10, **kwargs):
    engine = QuizSessionEngine("Math", **kwargs)
    engine.begin_loading()
    engine.load(build_questions(count))
    return engine


# ================================
# STATE MACHINE
# ================================

def test_new_engine_moves_through_loading_to_in_progress():
    engine = QuizSessionEngine("Math")
    assert engine.status == SessionStatus.NOT_STARTED

    engine.begin_loading()
    assert engine.status == SessionStatus.LOADING

    engine.load(build_questions(3))
    assert engine.status == SessionStatus.IN_PROGRESS
    assert engine.difficulty == "medium"
    assert engine.answers == [None, None, None]
    assert engine.current_question.id == "q0"


def test_session_completes_after_last_answer():
    engine = loaded_engine(3)

    first = engine.submit_answer(1)
    assert first["quiz_completed"] is False
    assert first["next_question"]["id"] == "q1"
    assert "correct_answer" not in first["next_question"]

    engine.submit_answer(0)
    last = engine.submit_answer(1)

    assert last["quiz_completed"] is True
    assert engine.status == SessionStatus.COMPLETED
    assert last["result"] == {
        "score": 2,
        "total": 3,
        "percentage": 67,
        "final_difficulty": engine.difficulty,
        "category": "Math",
        "answers": [1, 0, 1],
    }


def test_cannot_start_twice():
    engine = loaded_engine(2)
    with pytest.raises(SessionStateError):
        engine.begin_loading()


def test_out_of_range_answer_is_rejected_without_recording():
    engine = loaded_engine(2)

    with pytest.raises(SessionStateError):
        engine.submit_answer(4)
    with pytest.raises(SessionStateError):
        engine.submit_answer(-1)

    assert engine.answers == [None, None]
    assert engine.current_index == 0


def test_answer_after_completion_is_rejected():
    engine = loaded_engine(1)
    engine.submit_answer(1)

    with pytest.raises(SessionStateError):
        engine.submit_answer(1)


def test_abandon_in_progress_session():
    engine = loaded_engine(3)
    engine.submit_answer(1)
    engine.abandon()

    assert engine.status == SessionStatus.ABANDONED
    with pytest.raises(SessionStateError):
        engine.submit_answer(1)


def test_cannot_abandon_completed_session():
    engine = loaded_engine(1)
    engine.submit_answer(1)

    with pytest.raises(SessionStateError):
        engine.abandon()


# ================================
# SCORING
# ================================

def test_seven_of_ten_scores_seventy_percent():
    engine = loaded_engine(10)
    for i in range(10):
        engine.submit_answer(1 if i < 7 else 0)

    result = engine.result()
    assert result["score"] == 7
    assert result["total"] == 10
    assert result["percentage"] == 70


def test_percentage_rounds_half_up():
    engine = loaded_engine(8)
    for i in range(8):
        engine.submit_answer(1 if i == 0 else 0)

    # 12.5% shows as 13%
    assert engine.result()["percentage"] == 13


def test_empty_question_set_completes_with_zero_percent():
    engine = QuizSessionEngine("History")
    engine.begin_loading()
    engine.load([])

    assert engine.status == SessionStatus.COMPLETED
    assert engine.current_question is None
    assert engine.result()["total"] == 0
    assert engine.result()["percentage"] == 0


def test_result_defaults_category_to_general():
    engine = QuizSessionEngine()
    engine.begin_loading()
    engine.load(build_questions(1))
    engine.submit_answer(1)

    assert engine.result()["category"] == "General"


def test_feedback_hides_explanation_when_disabled():
    shown = loaded_engine(2).submit_answer(0)
    hidden = loaded_engine(2, show_explanations=False).submit_answer(0)

    assert shown["explanation"] == "Explanation for: Question 0"
    assert shown["correct_answer"] == 1
    assert shown["is_correct"] is False
    assert hidden["explanation"] is None


def test_answer_log_records_each_answer():
    engine = loaded_engine(2)
    engine.submit_answer(1)
    engine.submit_answer(3)

    assert engine.answer_log() == [
        {"question_id": "q0", "selected_answer": 1, "correct": True},
        {"question_id": "q1", "selected_answer": 3, "correct": False},
    ]


# ================================
# ADAPTIVE DIFFICULTY
# ================================

def test_all_correct_escalates_to_hard():
    engine = loaded_engine(5)
    engine.submit_answer(1)

    # (1 + 1) / (1 + 1) = 100%
    assert engine.difficulty == "hard"

    for _ in range(4):
        engine.submit_answer(1)
    assert engine.difficulty == "hard"


def test_all_incorrect_drops_to_easy():
    engine = loaded_engine(5)

    engine.submit_answer(0)
    # (0 + 1) / (1 + 1) = 50% is not below the easy threshold
    assert engine.difficulty == "medium"

    engine.submit_answer(0)
    # (0 + 1) / (2 + 1) = 33%
    assert engine.difficulty == "easy"


def test_middle_band_leaves_difficulty_unchanged():
    engine = loaded_engine(5)
    engine.submit_answer(1)
    assert engine.difficulty == "hard"

    engine.submit_answer(0)
    # (1 + 1) / (2 + 1) = 67% sits between the thresholds
    assert engine.difficulty == "hard"


def test_custom_thresholds_are_respected():
    engine = loaded_engine(5, hard_threshold=101, easy_threshold=60)
    engine.submit_answer(1)
    assert engine.difficulty == "medium"

    engine.submit_answer(0)
    engine.submit_answer(0)
    # (1 + 1) / (3 + 1) = 50% < 60%
    assert engine.difficulty == "easy"


def test_adaptive_disabled_keeps_medium():
    engine = loaded_engine(4, adaptive=False)
    for _ in range(4):
        engine.submit_answer(1)

    assert engine.difficulty == "medium"
    assert engine.result()["final_difficulty"] == "medium"


# ================================
# QUESTION SELECTION
# ================================

def test_fetch_samples_up_to_count(question_store):
    questions = fetch_questions(question_store, 10, "Math")

    assert len(questions) == 10
    assert len({q.id for q in questions}) == 10
    assert all(q.category == "Math" for q in questions)


def test_fetch_returns_everything_when_pool_is_small(question_store):
    questions = fetch_questions(question_store, 10, "Science")
    assert sorted(q.question for q in questions) == [
        "Science question 1", "Science question 2", "Science question 3"
    ]


def test_unreachable_store_falls_back_to_builtin_questions():
    questions = fetch_questions(UnreachableQuestionStore(), 10, "Math")

    assert [q.id for q in questions] == ["fallback-1"]
    assert questions == fallback_questions("Math")


def test_unreachable_store_without_fallback_for_category_completes_empty():
    engine = start_session(UnreachableQuestionStore(), AppSettingsRecord(), "History")

    assert engine.status == SessionStatus.COMPLETED
    assert engine.result()["total"] == 0
    assert engine.result()["percentage"] == 0


def test_start_session_uses_app_settings(question_store):
    app_settings = AppSettingsRecord(
        max_questions_per_quiz=4,
        show_explanations=False,
        adaptive_difficulty_enabled=False,
    )
    engine = start_session(question_store, app_settings, "Math")

    assert engine.status == SessionStatus.IN_PROGRESS
    assert len(engine.questions) == 4
    assert engine.adaptive is False
    assert engine.show_explanations is False


def test_list_categories(question_store):
    assert list_categories(question_store) == ["Math", "Science"]


def test_list_categories_falls_back_when_store_fails():
    assert "Geography" in list_categories(UnreachableQuestionStore())


# ================================
# PERSISTENCE
# ================================

def test_state_round_trip_resumes_session():
    engine = loaded_engine(3)
    engine.submit_answer(1)

    restored = QuizSessionEngine.from_state(engine.to_state())

    assert restored.session_id == engine.session_id
    assert restored.status == SessionStatus.IN_PROGRESS
    assert restored.current_index == 1
    assert restored.correct_count == 1
    assert restored.difficulty == "hard"
    assert restored.answers == [1, None, None]
    assert restored.started_at == engine.started_at

    restored.submit_answer(1)
    feedback = restored.submit_answer(1)
    assert feedback["result"]["score"] == 3
