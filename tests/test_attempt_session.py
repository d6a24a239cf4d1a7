import pytest

from quiz_maker.core.models import multiple_choice
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.services.attempt_session import AttemptSession


def test_full_attempt(mixed_quiz, clock):
    session = AttemptSession(clock=clock)
    result = session.start(mixed_quiz, "  Ada  ", "S-7")
    assert result.student_name == "Ada"
    assert result.student_id == "S-7"
    assert session.question_count() == 4
    assert session.remaining_seconds() is None

    assert session.current_question().text == "Capital of France?"
    assert session.submit_answer("a")
    assert session.submit_answer("true")
    assert session.submit_answer("h2o")
    assert session.submit_answer("skip")
    assert session.is_finished()
    assert session.current_question() is None

    clock.advance(75)
    graded = session.finish()
    assert graded is result
    assert graded.time_taken == 75
    assert graded.student_answers == {0: "Paris", 1: "True", 2: "h2o"}
    assert graded.marks_obtained == 3
    assert graded.percentage == pytest.approx(30.0)
    assert not graded.passed
    assert not session.is_active()


def test_invalid_choice_keeps_current_question(arithmetic_quiz, clock):
    session = AttemptSession(clock=clock)
    session.start(arithmetic_quiz, "Ada")
    assert not session.submit_answer("z")
    assert not session.submit_answer("9")
    assert not session.submit_answer("   ")
    assert session.current_index() == 0

    assert session.submit_answer("2")
    assert session.finish().passed


def test_free_text_multiple_choice_answer(arithmetic_quiz, clock):
    session = AttemptSession(clock=clock)
    session.start(arithmetic_quiz, "Ada")
    assert session.submit_answer("four")
    assert session.finish().marks_obtained == 0


def test_time_limit_stops_answer_collection(clock):
    quiz = Quiz(title="Speed round", time_limit=1)
    quiz.add_question(multiple_choice("First pick?", ["x", "y"], "x"))
    quiz.add_question(multiple_choice("Second pick?", ["x", "y"], "y"))

    session = AttemptSession(clock=clock)
    session.start(quiz, "Ada")
    assert session.remaining_seconds() == 60
    assert session.submit_answer("a")
    clock.advance(61)

    assert session.remaining_seconds() == 0
    assert session.is_time_up()
    assert session.is_finished()
    assert not session.submit_answer("b")

    result = session.finish()
    assert result.time_taken == 61
    assert result.marks_obtained == 1
    assert result.percentage == pytest.approx(50.0)


def test_questions_come_from_snapshot(arithmetic_quiz, clock):
    session = AttemptSession(clock=clock)
    session.start(arithmetic_quiz, "Ada")
    arithmetic_quiz.questions[0].set_text("Changed after start")
    assert session.current_question().text == "2+2=?"


def test_start_rejects_bad_input(arithmetic_quiz, clock):
    session = AttemptSession(clock=clock)
    assert session.start(Quiz(title="Empty"), "Ada") is None
    assert session.start(None, "Ada") is None
    assert session.start(arithmetic_quiz, "   ") is None
    assert not session.is_active()


def test_lifecycle_errors(arithmetic_quiz, clock):
    session = AttemptSession(clock=clock)
    with pytest.raises(RuntimeError):
        session.finish()
    with pytest.raises(RuntimeError):
        session.submit_answer("a")

    session.start(arithmetic_quiz, "Ada")
    session.finish()
    with pytest.raises(RuntimeError):
        session.finish()
    with pytest.raises(RuntimeError):
        session.skip()


def test_advance_keeps_recorded_answer(mixed_quiz, clock):
    session = AttemptSession(clock=clock)
    result = session.start(mixed_quiz, "Ada")
    result.record_answer(0, "Paris")
    assert session.advance()
    assert session.current_index() == 1
    assert session.advance() and session.advance() and session.advance()
    assert not session.advance()
    assert session.finish().marks_obtained == 2
