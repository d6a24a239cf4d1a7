"""Result of one attempt and the grading engine that scores it."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from quiz_maker.constants.quiz_constants import FAILING_GRADE, GRADE_BANDS
from quiz_maker.core.models import Question
from quiz_maker.core.quiz import Quiz


def grade_for_percentage(percentage: float) -> str:
    for lower_bound, grade in GRADE_BANDS:
        if percentage >= lower_bound:
            return grade
    return FAILING_GRADE


@dataclass(slots=True, eq=False)
class Result:
    """One student's attempt at a quiz.

    ``questions`` is a snapshot taken when the attempt starts, so later edits to
    the quiz never change how this attempt is graded. ``student_answers`` only
    holds answered questions; a missing index means the question was skipped.
    """

    quiz_id: str = ""
    quiz_title: str = ""
    student_name: str = ""
    student_id: str = ""
    total_marks: int = 0
    marks_obtained: int = 0
    percentage: float = 0.0
    passed: bool = False
    time_taken: int = 0  # seconds
    student_answers: dict[int, str] = field(default_factory=dict)
    answer_correctness: dict[int, bool] = field(default_factory=dict)
    questions: list[Question] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid4().hex)
    attempt_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def for_quiz(cls, quiz: Quiz, student_name: str, student_id: str = "") -> Result:
        """Start a result for ``quiz``, snapshotting its questions and total marks."""
        return cls(
            quiz_id=quiz.id,
            quiz_title=quiz.title,
            student_name=student_name,
            student_id=student_id or "",
            total_marks=quiz.total_marks(),
            questions=[question.clone() for question in quiz.questions],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Result[id={self.id}, student={self.student_name}, quiz={self.quiz_title}, "
            f"score={self.marks_obtained}/{self.total_marks}, percentage={self.percentage:.2f}%, "
            f"passed={self.passed}]"
        )

    # --- Answers ---

    def record_answer(self, question_index: int, answer: str | None) -> bool:
        if answer is None or not 0 <= question_index < len(self.questions):
            return False
        self.student_answers[question_index] = answer
        return True

    def skip_question(self, question_index: int) -> None:
        self.student_answers.pop(question_index, None)

    def answer_for(self, question_index: int) -> str | None:
        return self.student_answers.get(question_index)

    def is_question_answered(self, question_index: int) -> bool:
        return question_index in self.student_answers

    def answered_count(self) -> int:
        return len(self.student_answers)

    def unanswered_count(self) -> int:
        return len(self.questions) - self.answered_count()

    # --- Grading ---

    def calculate_result(self, passing_percentage: float) -> None:
        """Grade every question from scratch.

        Unanswered questions are marked incorrect. Calling this again without
        recording new answers yields the same outcome.
        """
        self.marks_obtained = 0
        self.answer_correctness = {}

        for index, question in enumerate(self.questions):
            answer = self.student_answers.get(index)
            if answer is None:
                self.answer_correctness[index] = False
                continue
            is_correct = question.check_answer(answer)
            self.answer_correctness[index] = is_correct
            if is_correct:
                self.marks_obtained += question.marks

        if self.total_marks > 0:
            self.percentage = self.marks_obtained * 100 / self.total_marks
        else:
            self.percentage = 0.0
        self.passed = self.percentage >= passing_percentage

    def correct_answers_count(self) -> int:
        return sum(1 for is_correct in self.answer_correctness.values() if is_correct)

    def incorrect_answers_count(self) -> int:
        return self.answered_count() - self.correct_answers_count()

    def is_answer_correct(self, question_index: int) -> bool:
        return self.answer_correctness.get(question_index, False)

    def grade(self) -> str:
        return grade_for_percentage(self.percentage)

    def summary(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        return (
            f"{self.quiz_title} - {self.student_name}: {self.percentage:.2f}% "
            f"({self.marks_obtained}/{self.total_marks}) - {status}"
        )

    def is_valid(self) -> bool:
        return bool(self.student_name) and bool(self.quiz_id) and self.total_marks > 0
