"""Utilities for importing quizzes from a human-friendly text file.

File format (blocks separated by blank lines or '---'; blank lines inside
question, option or description text are kept as paragraph breaks):

    TITLE: Quiz title            (optional header block, must come first)
    DESCRIPTION: Free text       (optional; following lines continue it)
    AUTHOR: Name                 (optional)
    TIMELIMIT: minutes           (optional, 0 = unlimited)
    PASSING: percentage          (optional, 0-100)

    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    TYPE: MC|TF|SA               (optional; MC when options are given, else SA)
    A: First option text         (multiple choice only, letters A-J in order)
    B: Second option text
    CORRECT: B                   (MC: letter or option text, TF: True/False, SA: text)
    MARKS: 2                     (optional, defaults to 1)
    CASE: sensitive              (short answer only, optional)

Example:

    TITLE: Arithmetic
    PASSING: 60

    Q: What is $2 + 2$?
    A: 3
    B: 4
    C: 5
    CORRECT: B

    ---

    Q: $7$ is a prime number.
    TYPE: TF
    CORRECT: true
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quiz_maker.constants.quiz_constants import MAX_OPTIONS
from quiz_maker.core.models import Question, QuestionType, multiple_choice, short_answer, true_false
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.validation import validate_question, validate_true_false_answer


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for an imported quiz and where it came from."""

    source_path: Path
    quiz: Quiz


OPTION_LETTERS = tuple(chr(ord("A") + idx) for idx in range(MAX_OPTIONS))

_TYPE_ALIASES = {
    "MC": QuestionType.MULTIPLE_CHOICE,
    "MULTIPLE CHOICE": QuestionType.MULTIPLE_CHOICE,
    "TF": QuestionType.TRUE_FALSE,
    "TRUE/FALSE": QuestionType.TRUE_FALSE,
    "SA": QuestionType.SHORT_ANSWER,
    "SHORT ANSWER": QuestionType.SHORT_ANSWER,
}
_CASE_SENSITIVE_VALUES = {"sensitive", "yes", "true", "1"}
_CASE_INSENSITIVE_VALUES = {"insensitive", "no", "false", "0"}
_HEADER_KEYS = ("TITLE:", "DESCRIPTION:", "AUTHOR:", "TIMELIMIT:", "PASSING:")
_FIELD_KEYS = _HEADER_KEYS + ("TYPE:", "CORRECT:", "MARKS:", "CASE:")


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    quiz = parse_quiz_text(text, default_title=file_path.stem)
    return ImportedQuiz(source_path=file_path, quiz=quiz)


def parse_quiz_text(text: str, default_title: str | None = None) -> Quiz:
    blocks = _split_blocks(text)
    quiz = Quiz()
    if default_title:
        quiz.set_title(default_title)

    if blocks and blocks[0].upper().startswith(_HEADER_KEYS):
        _apply_header(quiz, blocks.pop(0))

    for number, block in enumerate(blocks, start=1):
        question = _parse_block(block)
        if not quiz.add_question(question):
            problems = validate_question(question) or ["question is not valid"]
            raise QuizImportError(f"Question {number}: {'; '.join(problems)}")

    if not quiz.has_questions():
        raise QuizImportError("Quiz file did not contain any questions.")
    return quiz


def _split_blocks(text: str) -> list[str]:
    """Split on '---' and blank lines.

    Blank lines inside question, option or description text belong to that
    text; they only end a block once a field such as CORRECT has closed it, or
    when the next line starts a new question.
    """
    blocks: list[str] = []
    current_block: list[str] = []
    pending_blank_lines = 0
    in_free_text = False

    def finalize() -> None:
        nonlocal current_block, in_free_text
        if current_block:
            blocks.append("\n".join(current_block).strip())
        current_block = []
        in_free_text = False

    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            pending_blank_lines = 0
            finalize()
            continue
        if not stripped:
            if in_free_text:
                pending_blank_lines += 1
            else:
                finalize()
            continue

        upper = stripped.upper()
        if pending_blank_lines:
            if upper.startswith("Q:"):
                finalize()
            else:
                current_block.extend([""] * pending_blank_lines)
            pending_blank_lines = 0
        current_block.append(raw_line)
        in_free_text = _opens_free_text(upper, in_free_text)
    finalize()
    return [block for block in blocks if block]


def _is_option_line(line: str) -> bool:
    return len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":"


def _opens_free_text(upper: str, currently_open: bool) -> bool:
    if upper.startswith(("Q:", "DESCRIPTION:")) or _is_option_line(upper):
        return True
    if upper.startswith(_FIELD_KEYS):
        return False
    return currently_open


def _split_value(line: str) -> str:
    return line.split(":", 1)[1].strip()


def _parse_int(raw_value: str, key: str) -> int:
    if not raw_value:
        raise QuizImportError(f"{key} must include an integer value.")
    try:
        return int(raw_value)
    except ValueError as exc:
        raise QuizImportError(f"{key} must be an integer.") from exc


def _apply_header(quiz: Quiz, block: str) -> None:
    description_lines: list[str] = []
    in_description = False

    for raw_line in block.splitlines():
        line = raw_line.strip()
        upper = line.upper()
        if upper.startswith("TITLE:"):
            if not quiz.set_title(_split_value(line)):
                raise QuizImportError("TITLE cannot be empty.")
            in_description = False
        elif upper.startswith("DESCRIPTION:"):
            description_lines = [_split_value(line)]
            in_description = True
        elif upper.startswith("AUTHOR:"):
            quiz.set_created_by(_split_value(line))
            in_description = False
        elif upper.startswith("TIMELIMIT:"):
            if not quiz.set_time_limit(_parse_int(_split_value(line), "TIMELIMIT")):
                raise QuizImportError("TIMELIMIT must not be negative.")
            in_description = False
        elif upper.startswith("PASSING:"):
            if not quiz.set_passing_percentage(_parse_int(_split_value(line), "PASSING")):
                raise QuizImportError("PASSING must be between 0 and 100.")
            in_description = False
        elif in_description:
            description_lines.append(line)
        else:
            raise QuizImportError(f"Encountered text outside of a known header field: '{line}'.")

    if description_lines:
        quiz.set_description("\n".join(description_lines).strip())


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    question_type: QuestionType | None = None
    correct_value: str | None = None
    marks = 1
    case_sensitive = False
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            if current_section == "Q":
                question_lines.append("")
            elif current_section in OPTION_LETTERS:
                options[current_section] += "\n"
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("TYPE:"):
            raw_type = _split_value(line).upper()
            if raw_type not in _TYPE_ALIASES:
                raise QuizImportError("TYPE must be one of MC, TF or SA.")
            question_type = _TYPE_ALIASES[raw_type]
            current_section = None
            continue

        if upper.startswith("CORRECT:"):
            correct_value = _split_value(line)
            current_section = None
            continue

        if upper.startswith("MARKS:"):
            marks = _parse_int(_split_value(line), "MARKS")
            if marks <= 0:
                raise QuizImportError("MARKS must be a positive integer.")
            current_section = None
            continue

        if upper.startswith("CASE:"):
            raw_case = _split_value(line).lower()
            if raw_case in _CASE_SENSITIVE_VALUES:
                case_sensitive = True
            elif raw_case in _CASE_INSENSITIVE_VALUES:
                case_sensitive = False
            else:
                raise QuizImportError("CASE must be 'sensitive' or 'insensitive'.")
            current_section = None
            continue

        if _is_option_line(line):
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")
    if correct_value is None or not correct_value:
        raise QuizImportError("CORRECT answer missing for question: " + question_text)

    if question_type is None:
        question_type = QuestionType.MULTIPLE_CHOICE if options else QuestionType.SHORT_ANSWER

    match question_type:
        case QuestionType.MULTIPLE_CHOICE:
            option_list = _ordered_options(options)
            return multiple_choice(
                question_text, option_list, _resolve_correct_option(correct_value, option_list), marks
            )
        case QuestionType.TRUE_FALSE:
            if options:
                raise QuizImportError("True/false questions cannot define options.")
            if validate_true_false_answer(correct_value) is not None:
                raise QuizImportError("CORRECT must be True or False.")
            return true_false(question_text, correct_value, marks)
        case QuestionType.SHORT_ANSWER:
            if options:
                raise QuizImportError("Short answer questions cannot define options.")
            return short_answer(question_text, correct_value, marks, case_sensitive)
    raise QuizImportError(f"Unsupported question type: {question_type}")


def _ordered_options(options: dict[str, str]) -> list[str]:
    if len(options) < 2:
        raise QuizImportError("Multiple choice questions need at least two options (A, B, ...).")
    expected = OPTION_LETTERS[: len(options)]
    if set(options) != set(expected):
        raise QuizImportError(f"Options must use consecutive letters starting at A ({', '.join(expected)}).")
    option_list = [_sanitize_option(options[letter]) for letter in expected]
    if any(not opt for opt in option_list):
        raise QuizImportError("Option text cannot be empty.")
    return option_list


def _resolve_correct_option(correct_value: str, option_list: list[str]) -> str:
    """Accept either an option letter or the option text itself."""
    upper = correct_value.upper()
    if len(upper) == 1 and upper in OPTION_LETTERS:
        index = OPTION_LETTERS.index(upper)
        if index >= len(option_list):
            raise QuizImportError(f"CORRECT refers to missing option {upper}.")
        return option_list[index]
    wanted = correct_value.casefold()
    for option in option_list:
        if option.strip().casefold() == wanted:
            return option
    raise QuizImportError("CORRECT must name one of the options.")


def _sanitize_option(option_text: str) -> str:
    return option_text.strip()
