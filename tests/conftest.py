from __future__ import annotations

import pytest

from quiz_maker.core.models import multiple_choice, short_answer, true_false
from quiz_maker.core.quiz import Quiz


@pytest.fixture
def arithmetic_quiz() -> Quiz:
    quiz = Quiz(title="Arithmetic", passing_percentage=50)
    quiz.add_question(multiple_choice("2+2=?", ["3", "4", "5"], "4"))
    return quiz


@pytest.fixture
def mixed_quiz() -> Quiz:
    quiz = Quiz(title="General Knowledge", description="A bit of everything", created_by="Ms. Rivera")
    quiz.set_passing_percentage(60)
    quiz.add_question(multiple_choice("Capital of France?", ["Paris", "Rome", "Berlin"], "Paris", marks=2))
    quiz.add_question(true_false("The earth orbits the sun.", "t", marks=1))
    quiz.add_question(short_answer("Chemical symbol for water?", "H2O", marks=3, case_sensitive=True))
    quiz.add_question(short_answer("Largest planet?", "Jupiter", marks=4))
    return quiz


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
