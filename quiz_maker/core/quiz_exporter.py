"""Utilities for exporting quizzes to the plain-text format used for imports."""

from __future__ import annotations

from pathlib import Path

from quiz_maker.core.models import Question, QuestionType
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.quiz_importer import OPTION_LETTERS

_TYPE_CODES = {
    QuestionType.MULTIPLE_CHOICE: "MC",
    QuestionType.TRUE_FALSE: "TF",
    QuestionType.SHORT_ANSWER: "SA",
}


def save_quiz_to_file(file_path: Path, quiz: Quiz) -> None:
    """Persist the quiz to disk in the text import format."""

    if not quiz.has_questions():
        raise ValueError("Cannot export an empty quiz.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_quiz(quiz), encoding="utf-8")


def serialize_quiz(quiz: Quiz) -> str:
    blocks = [_serialize_header(quiz)]
    blocks.extend(_serialize_question(question) for question in quiz.questions)
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_header(quiz: Quiz) -> str:
    lines = [f"TITLE: {quiz.title}"]
    if quiz.description:
        description_lines = quiz.description.splitlines()
        lines.append(f"DESCRIPTION: {description_lines[0]}")
        lines.extend(description_lines[1:])
    if quiz.created_by:
        lines.append(f"AUTHOR: {quiz.created_by}")
    lines.append(f"TIMELIMIT: {quiz.time_limit}")
    lines.append(f"PASSING: {quiz.passing_percentage}")
    return "\n".join(lines)


def _serialize_question(question: Question) -> str:
    lines: list[str] = []

    question_lines = question.text.splitlines() or [question.text]
    lines.append(f"Q: {question_lines[0] if question_lines else ''}")
    lines.extend(question_lines[1:])
    lines.append(f"TYPE: {_TYPE_CODES[question.kind]}")

    for letter, option_text in zip(OPTION_LETTERS, question.options):
        option_lines = option_text.splitlines() or [option_text]
        lines.append(f"{letter}: {option_lines[0] if option_lines else ''}")
        lines.extend(option_lines[1:])

    lines.append(f"CORRECT: {_correct_value(question)}")
    lines.append(f"MARKS: {question.marks}")
    if question.kind is QuestionType.SHORT_ANSWER and question.case_sensitive:
        lines.append("CASE: sensitive")

    return "\n".join(lines)


def _correct_value(question: Question) -> str:
    if question.kind is QuestionType.MULTIPLE_CHOICE:
        wanted = question.correct_answer.strip().casefold()
        for letter, option in zip(OPTION_LETTERS, question.options):
            if option.strip().casefold() == wanted:
                return letter
    return question.correct_answer
