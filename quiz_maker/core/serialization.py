"""Pydantic records describing the on-disk JSON form of quizzes and results.

Records are a storage schema only; the domain objects in ``models``, ``quiz``
and ``result`` never depend on them.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from quiz_maker.core.models import Question, QuestionType
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.result import Result


class QuestionRecord(BaseModel):
    """Stored form of a single question."""

    kind: QuestionType
    text: str
    correct_answer: str
    marks: int = 1
    options: list[str] = Field(default_factory=list)
    case_sensitive: bool = False

    @classmethod
    def from_domain(cls, question: Question) -> QuestionRecord:
        return cls(
            kind=question.kind,
            text=question.text,
            correct_answer=question.correct_answer,
            marks=question.marks,
            options=list(question.options),
            case_sensitive=question.case_sensitive,
        )

    def to_domain(self) -> Question:
        return Question(
            kind=self.kind,
            text=self.text,
            correct_answer=self.correct_answer,
            marks=self.marks,
            options=list(self.options),
            case_sensitive=self.case_sensitive,
        )


class QuizRecord(BaseModel):
    id: str
    title: str
    description: str = ""
    created_by: str = ""
    date_created: datetime
    last_modified: datetime
    time_limit: int = 0
    passing_percentage: int = 50
    is_active: bool = True
    questions: list[QuestionRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, quiz: Quiz) -> QuizRecord:
        return cls(
            id=quiz.id,
            title=quiz.title,
            description=quiz.description,
            created_by=quiz.created_by,
            date_created=quiz.date_created,
            last_modified=quiz.last_modified,
            time_limit=quiz.time_limit,
            passing_percentage=quiz.passing_percentage,
            is_active=quiz.is_active,
            questions=[QuestionRecord.from_domain(q) for q in quiz.questions],
        )

    def to_domain(self) -> Quiz:
        return Quiz(
            id=self.id,
            title=self.title,
            description=self.description,
            created_by=self.created_by,
            date_created=self.date_created,
            last_modified=self.last_modified,
            time_limit=self.time_limit,
            passing_percentage=self.passing_percentage,
            is_active=self.is_active,
            questions=[record.to_domain() for record in self.questions],
        )


class ResultRecord(BaseModel):
    """Stored form of an attempt, including its question snapshot."""

    id: str
    quiz_id: str
    quiz_title: str
    student_name: str
    student_id: str = ""
    attempt_date: datetime
    total_marks: int
    marks_obtained: int = 0
    percentage: float = 0.0
    passed: bool = False
    time_taken: int = 0
    # JSON object keys are strings; pydantic converts them back to ints.
    student_answers: dict[int, str] = Field(default_factory=dict)
    answer_correctness: dict[int, bool] = Field(default_factory=dict)
    questions: list[QuestionRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: Result) -> ResultRecord:
        return cls(
            id=result.id,
            quiz_id=result.quiz_id,
            quiz_title=result.quiz_title,
            student_name=result.student_name,
            student_id=result.student_id,
            attempt_date=result.attempt_date,
            total_marks=result.total_marks,
            marks_obtained=result.marks_obtained,
            percentage=result.percentage,
            passed=result.passed,
            time_taken=result.time_taken,
            student_answers=dict(result.student_answers),
            answer_correctness=dict(result.answer_correctness),
            questions=[QuestionRecord.from_domain(q) for q in result.questions],
        )

    def to_domain(self) -> Result:
        return Result(
            id=self.id,
            quiz_id=self.quiz_id,
            quiz_title=self.quiz_title,
            student_name=self.student_name,
            student_id=self.student_id,
            attempt_date=self.attempt_date,
            total_marks=self.total_marks,
            marks_obtained=self.marks_obtained,
            percentage=self.percentage,
            passed=self.passed,
            time_taken=self.time_taken,
            student_answers=dict(self.student_answers),
            answer_correctness=dict(self.answer_correctness),
            questions=[record.to_domain() for record in self.questions],
        )


def quiz_to_json(quiz: Quiz, indent: int | None = None) -> str:
    return QuizRecord.from_domain(quiz).model_dump_json(indent=indent)


def quiz_from_json(document: str | bytes) -> Quiz:
    return QuizRecord.model_validate_json(document).to_domain()


def result_to_json(result: Result, indent: int | None = None) -> str:
    return ResultRecord.from_domain(result).model_dump_json(indent=indent)


def result_from_json(document: str | bytes) -> Result:
    return ResultRecord.model_validate_json(document).to_domain()
