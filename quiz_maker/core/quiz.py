"""Quiz aggregate: an ordered, exclusively owned list of questions plus metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import math
import random
from uuid import uuid4

from quiz_maker.constants.quiz_constants import (
    DEFAULT_CREATED_BY,
    DEFAULT_PASSING_PERCENTAGE,
    DEFAULT_QUIZ_TITLE,
    DEFAULT_TIME_LIMIT_MINUTES,
)
from quiz_maker.core.models import Question


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, eq=False)
class Quiz:
    """A titled collection of questions with a time limit and passing threshold.

    Mutators never raise for bad input: they return ``False`` (or ``None``)
    and leave the quiz untouched. Totals are recomputed on every call.
    """

    title: str = DEFAULT_QUIZ_TITLE
    description: str = ""
    created_by: str = DEFAULT_CREATED_BY
    time_limit: int = DEFAULT_TIME_LIMIT_MINUTES  # minutes, 0 = unlimited
    passing_percentage: int = DEFAULT_PASSING_PERCENTAGE
    is_active: bool = True
    questions: list[Question] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid4().hex)
    date_created: datetime = field(default_factory=_now)
    last_modified: datetime = field(default_factory=_now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quiz):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Quiz[id={self.id}, title={self.title}, questions={len(self.questions)}, "
            f"totalMarks={self.total_marks()}]"
        )

    def touch(self) -> None:
        self.last_modified = _now()

    # --- Metadata ---

    def set_title(self, title: str) -> bool:
        if not title or not title.strip():
            return False
        self.title = title
        self.touch()
        return True

    def set_description(self, description: str) -> None:
        self.description = description or ""
        self.touch()

    def set_created_by(self, created_by: str) -> None:
        self.created_by = created_by

    def set_time_limit(self, minutes: int) -> bool:
        if minutes < 0:
            return False
        self.time_limit = minutes
        self.touch()
        return True

    def set_passing_percentage(self, percentage: int) -> bool:
        if not 0 <= percentage <= 100:
            return False
        self.passing_percentage = percentage
        self.touch()
        return True

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self.touch()

    def has_time_limit(self) -> bool:
        return self.time_limit > 0

    # --- Question management ---

    def get_questions(self) -> list[Question]:
        """Return a shallow copy of the question list."""
        return list(self.questions)

    def get_question(self, index: int) -> Question | None:
        if 0 <= index < len(self.questions):
            return self.questions[index]
        return None

    def question_count(self) -> int:
        return len(self.questions)

    def has_questions(self) -> bool:
        return bool(self.questions)

    def add_question(self, question: Question | None) -> bool:
        if question is None or not question.is_valid():
            return False
        self.questions.append(question)
        self.touch()
        return True

    def add_question_at(self, index: int, question: Question | None) -> bool:
        if question is None or not question.is_valid():
            return False
        if not 0 <= index <= len(self.questions):
            return False
        self.questions.insert(index, question)
        self.touch()
        return True

    def remove_question(self, question: Question) -> bool:
        for index, existing in enumerate(self.questions):
            if existing is question:
                del self.questions[index]
                self.touch()
                return True
        return False

    def remove_question_at(self, index: int) -> Question | None:
        if not 0 <= index < len(self.questions):
            return None
        removed = self.questions.pop(index)
        self.touch()
        return removed

    def update_question(self, index: int, question: Question | None) -> bool:
        if not 0 <= index < len(self.questions):
            return False
        if question is None or not question.is_valid():
            return False
        self.questions[index] = question
        self.touch()
        return True

    def clear_questions(self) -> None:
        self.questions.clear()
        self.touch()

    def shuffle_questions(self, rng: random.Random | None = None) -> None:
        """Reorder questions with a uniform permutation. Editing only, never mid-attempt."""
        (rng or random).shuffle(self.questions)
        self.touch()

    # --- Derived statistics ---

    def total_marks(self) -> int:
        return sum(question.marks for question in self.questions)

    def passing_marks(self) -> int:
        return math.ceil(self.total_marks() * self.passing_percentage / 100)

    def average_marks_per_question(self) -> float:
        if not self.questions:
            return 0.0
        return self.total_marks() / len(self.questions)

    def count_questions_by_type(self, question_type: str) -> int:
        return len(self.questions_by_type(question_type))

    def questions_by_type(self, question_type: str) -> list[Question]:
        wanted = question_type.lower()
        return [q for q in self.questions if q.question_type().lower() == wanted]

    def estimated_minutes(self, seconds_per_question: int) -> int:
        return len(self.questions) * seconds_per_question // 60

    # --- Validation ---

    def is_valid(self) -> bool:
        if not self.title or not self.title.strip():
            return False
        if not self.questions:
            return False
        return all(question.is_valid() for question in self.questions)

    def validation_errors(self) -> list[str]:
        errors: list[str] = []
        if not self.title or not self.title.strip():
            errors.append("Quiz title is required")
        if not self.questions:
            errors.append("Quiz must have at least one question")
        for number, question in enumerate(self.questions, start=1):
            if not question.is_valid():
                errors.append(f"Question {number} is invalid")
        return errors

    def clone(self) -> Quiz:
        """Copy the quiz under a fresh id, deep-cloning every question."""
        return Quiz(
            title=self.title,
            description=self.description,
            created_by=self.created_by,
            time_limit=self.time_limit,
            passing_percentage=self.passing_percentage,
            is_active=self.is_active,
            questions=[question.clone() for question in self.questions],
        )
