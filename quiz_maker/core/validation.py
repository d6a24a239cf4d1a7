"""Authoring-time validation helpers that report problems as messages.

Nothing here raises: single checks return ``None`` when the value is fine and a
message otherwise, aggregate checks return a list of messages.
"""

from __future__ import annotations

import re

from quiz_maker.constants.quiz_constants import (
    FALSE_CHOICE_TOKENS,
    MAX_ANSWER_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_MARKS,
    MAX_NAME_LENGTH,
    MAX_OPTIONS,
    MAX_QUESTION_LENGTH,
    MAX_TIME_LIMIT_MINUTES,
    MAX_TITLE_LENGTH,
    MIN_MARKS,
    MIN_NAME_LENGTH,
    MIN_OPTIONS,
    MIN_QUESTION_LENGTH,
    MIN_TIME_LIMIT_MINUTES,
    MIN_TITLE_LENGTH,
    TRUE_TOKENS,
)
from quiz_maker.core.models import Question, QuestionType
from quiz_maker.core.quiz import Quiz

_NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
_WHITESPACE_RUN = re.compile(r"\s+")
_TRUE_FALSE_TOKENS = TRUE_TOKENS | (FALSE_CHOICE_TOKENS - {"b"})


def is_not_empty(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def sanitize_input(value: str | None) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    if value is None:
        return ""
    return _WHITESPACE_RUN.sub(" ", value.strip())


def parse_integer(value: str | None) -> int | None:
    if not is_not_empty(value):
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def validate_integer(value: str | None, minimum: int, maximum: int, field_name: str) -> str | None:
    if not is_not_empty(value):
        return f"{field_name} cannot be empty"
    parsed = parse_integer(value)
    if parsed is None:
        return f"{field_name} must be a valid number"
    if not minimum <= parsed <= maximum:
        return f"{field_name} must be between {minimum} and {maximum}"
    return None


def validate_name(name: str | None) -> str | None:
    if not is_not_empty(name):
        return "Name cannot be empty"
    length = len(name.strip())
    if length < MIN_NAME_LENGTH:
        return f"Name must be at least {MIN_NAME_LENGTH} characters long"
    if length > MAX_NAME_LENGTH:
        return f"Name must not exceed {MAX_NAME_LENGTH} characters"
    if not _NAME_PATTERN.match(name):
        return "Name can only contain letters and spaces"
    return None


# --- Questions ---


def validate_question_text(text: str | None) -> str | None:
    if not is_not_empty(text):
        return "Question text cannot be empty"
    length = len(text.strip())
    if length < MIN_QUESTION_LENGTH:
        return f"Question must be at least {MIN_QUESTION_LENGTH} characters long"
    if length > MAX_QUESTION_LENGTH:
        return f"Question must not exceed {MAX_QUESTION_LENGTH} characters"
    return None


def validate_answer(answer: str | None) -> str | None:
    if not is_not_empty(answer):
        return "Answer cannot be empty"
    if len(answer.strip()) > MAX_ANSWER_LENGTH:
        return f"Answer must not exceed {MAX_ANSWER_LENGTH} characters"
    return None


def validate_marks(marks: int) -> str | None:
    if not MIN_MARKS <= marks <= MAX_MARKS:
        return f"Marks must be between {MIN_MARKS} and {MAX_MARKS}"
    return None


def validate_options(options: list[str] | None) -> str | None:
    if not options:
        return "Options list cannot be empty"
    if len(options) < MIN_OPTIONS:
        return f"Must have at least {MIN_OPTIONS} options"
    if len(options) > MAX_OPTIONS:
        return f"Cannot have more than {MAX_OPTIONS} options"
    for number, option in enumerate(options, start=1):
        if not is_not_empty(option):
            return f"Option {number} cannot be empty"
    seen: set[str] = set()
    for option in options:
        key = option.strip().casefold()
        if key in seen:
            return f"Duplicate option found: {option}"
        seen.add(key)
    return None


def is_answer_in_options(answer: str | None, options: list[str] | None) -> bool:
    if not is_not_empty(answer) or options is None:
        return False
    wanted = answer.strip().casefold()
    return any(option.strip().casefold() == wanted for option in options)


def validate_true_false_answer(answer: str | None) -> str | None:
    if not is_not_empty(answer):
        return "Answer cannot be empty"
    if answer.strip().lower() not in _TRUE_FALSE_TOKENS:
        return "Answer must be True or False"
    return None


def validate_question(question: Question | None) -> list[str]:
    if question is None:
        return ["Question object is null"]

    errors = [
        message
        for message in (
            validate_question_text(question.text),
            validate_marks(question.marks),
            validate_answer(question.correct_answer),
        )
        if message is not None
    ]
    if question.kind is QuestionType.MULTIPLE_CHOICE:
        options_error = validate_options(question.options)
        if options_error is not None:
            errors.append(options_error)
        elif not is_answer_in_options(question.correct_answer, question.options):
            errors.append("Correct answer must be one of the options")
    return errors


# --- Quizzes ---


def validate_quiz_title(title: str | None) -> str | None:
    if not is_not_empty(title):
        return "Quiz title cannot be empty"
    length = len(title.strip())
    if length < MIN_TITLE_LENGTH:
        return f"Quiz title must be at least {MIN_TITLE_LENGTH} characters long"
    if length > MAX_TITLE_LENGTH:
        return f"Quiz title must not exceed {MAX_TITLE_LENGTH} characters"
    return None


def is_valid_description(description: str | None) -> bool:
    return description is None or len(description) <= MAX_DESCRIPTION_LENGTH


def validate_time_limit(minutes: int) -> str | None:
    if not MIN_TIME_LIMIT_MINUTES <= minutes <= MAX_TIME_LIMIT_MINUTES:
        return (
            f"Time limit must be between {MIN_TIME_LIMIT_MINUTES} and "
            f"{MAX_TIME_LIMIT_MINUTES} minutes"
        )
    return None


def validate_passing_percentage(percentage: int) -> str | None:
    if not 0 <= percentage <= 100:
        return "Passing percentage must be between 0 and 100"
    return None


def validate_quiz(quiz: Quiz | None) -> list[str]:
    if quiz is None:
        return ["Quiz object is null"]

    errors: list[str] = []
    title_error = validate_quiz_title(quiz.title)
    if title_error is not None:
        errors.append(title_error)
    if not quiz.has_questions():
        errors.append("Quiz must have at least one question")
    if not is_valid_description(quiz.description):
        errors.append(f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters")
    for message in (
        validate_time_limit(quiz.time_limit),
        validate_passing_percentage(quiz.passing_percentage),
    ):
        if message is not None:
            errors.append(message)
    for number, question in enumerate(quiz.questions, start=1):
        errors.extend(f"Question {number}: {message}" for message in validate_question(question))
    return errors


def format_errors(errors: list[str] | None) -> str:
    if not errors:
        return "No errors"
    lines = [f"Validation Errors ({len(errors)}):"]
    lines.extend(f"{number}. {error}" for number, error in enumerate(errors, start=1))
    return "\n".join(lines) + "\n"
