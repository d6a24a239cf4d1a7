"""Domain models for quiz questions.

Every question is a :class:`Question` tagged with a :class:`QuestionType`.
The variant set is closed, so behaviour that differs per variant is written
as a ``match`` over ``kind`` rather than spread across subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from quiz_maker.constants.quiz_constants import (
    DEFAULT_MARKS,
    FALSE_CHOICE_TOKENS,
    FALSE_LABEL,
    MAX_OPTIONS,
    MIN_OPTIONS,
    TRUE_CHOICE_TOKENS,
    TRUE_LABEL,
    TRUE_TOKENS,
)


class QuestionType(str, Enum):
    """Supported question variants; the value is the display label."""

    MULTIPLE_CHOICE = "Multiple Choice"
    TRUE_FALSE = "True/False"
    SHORT_ANSWER = "Short Answer"


def normalize_true_false(answer: str | None) -> str:
    """Map any string onto ``"True"`` or ``"False"``.

    ``"true"``, ``"t"`` and ``"1"`` (trimmed, any case) become ``"True"``;
    everything else becomes ``"False"``.
    """
    if answer is None:
        return TRUE_LABEL
    if answer.strip().lower() in TRUE_TOKENS:
        return TRUE_LABEL
    return FALSE_LABEL


def coerce_marks(marks: object) -> int:
    """Return ``marks`` when it is a positive integer, otherwise the default."""
    if isinstance(marks, bool) or not isinstance(marks, int):
        return DEFAULT_MARKS
    return marks if marks > 0 else DEFAULT_MARKS


def options_are_distinct(options: list[str]) -> bool:
    seen: set[str] = set()
    for option in options:
        key = option.strip().casefold()
        if key in seen:
            return False
        seen.add(key)
    return True


@dataclass(slots=True)
class Question:
    """A single quiz question together with its grading rule."""

    kind: QuestionType
    text: str
    correct_answer: str
    marks: int = DEFAULT_MARKS
    options: list[str] = field(default_factory=list)  # multiple choice only
    case_sensitive: bool = False  # short answer only

    def __post_init__(self) -> None:
        self.kind = QuestionType(self.kind)
        self.text = self.text or ""
        self.marks = coerce_marks(self.marks)
        if self.kind is QuestionType.MULTIPLE_CHOICE:
            self.options = list(self.options)
        else:
            self.options = []
        if self.kind is QuestionType.TRUE_FALSE:
            if self.correct_answer is not None:
                self.correct_answer = normalize_true_false(self.correct_answer)
        self.correct_answer = self.correct_answer or ""
        self.case_sensitive = bool(self.case_sensitive) and self.kind is QuestionType.SHORT_ANSWER

    def __str__(self) -> str:
        return f"[{self.question_type()}] {self.text} (Marks: {self.marks})"

    def question_type(self) -> str:
        return self.kind.value

    def answer_options(self) -> list[str]:
        """Return the choices presented to a test-taker (empty for short answer)."""
        match self.kind:
            case QuestionType.MULTIPLE_CHOICE:
                return list(self.options)
            case QuestionType.TRUE_FALSE:
                return [TRUE_LABEL, FALSE_LABEL]
            case QuestionType.SHORT_ANSWER:
                return []
        return []

    def check_answer(self, candidate: str | None) -> bool:
        """Grade a raw answer string against the stored correct answer."""
        if candidate is None:
            return False
        match self.kind:
            case QuestionType.MULTIPLE_CHOICE:
                # Matches the stored text even if it is no longer one of the options.
                return candidate.strip().casefold() == self.correct_answer.strip().casefold()
            case QuestionType.TRUE_FALSE:
                return normalize_true_false(candidate) == self.correct_answer
            case QuestionType.SHORT_ANSWER:
                given = candidate.strip()
                expected = self.correct_answer.strip()
                if self.case_sensitive:
                    return given == expected
                return given.casefold() == expected.casefold()
        return False

    def is_valid(self) -> bool:
        if not self.text.strip() or self.marks <= 0 or not self.correct_answer.strip():
            return False
        match self.kind:
            case QuestionType.MULTIPLE_CHOICE:
                if not MIN_OPTIONS <= len(self.options) <= MAX_OPTIONS:
                    return False
                if any(not option.strip() for option in self.options):
                    return False
                if not options_are_distinct(self.options):
                    return False
                return self.has_option(self.correct_answer)
            case QuestionType.TRUE_FALSE:
                return self.correct_answer in (TRUE_LABEL, FALSE_LABEL)
            case QuestionType.SHORT_ANSWER:
                return True
        return False

    def has_option(self, text: str) -> bool:
        wanted = text.strip().casefold()
        return any(option.strip().casefold() == wanted for option in self.options)

    def clone(self) -> Question:
        return replace(self, options=list(self.options))

    def option_for_choice(self, raw: str) -> str | None:
        """Translate what a test-taker typed into the answer to record.

        Multiple choice accepts an option letter (``"b"``) or a 1-based number
        (``"2"``); anything else is kept as free text. True/false accepts the
        usual tokens plus ``a``/``b``. Returns ``None`` when the input names an
        option that does not exist, or is blank.
        """
        cleaned = (raw or "").strip()
        if not cleaned:
            return None
        match self.kind:
            case QuestionType.MULTIPLE_CHOICE:
                if len(cleaned) == 1 and cleaned.isalpha():
                    index = ord(cleaned.upper()) - ord("A")
                    return self.options[index] if 0 <= index < len(self.options) else None
                try:
                    number = int(cleaned)
                except ValueError:
                    return cleaned
                return self.options[number - 1] if 1 <= number <= len(self.options) else None
            case QuestionType.TRUE_FALSE:
                lowered = cleaned.lower()
                if lowered in TRUE_CHOICE_TOKENS:
                    return TRUE_LABEL
                if lowered in FALSE_CHOICE_TOKENS:
                    return FALSE_LABEL
                return None
            case QuestionType.SHORT_ANSWER:
                return cleaned
        return None

    # --- Editing ---

    def set_text(self, text: str) -> None:
        self.text = text or ""

    def set_marks(self, marks: int) -> None:
        self.marks = coerce_marks(marks)

    def set_correct_answer(self, answer: str) -> None:
        if self.kind is QuestionType.TRUE_FALSE:
            self.correct_answer = normalize_true_false(answer)
        else:
            self.correct_answer = answer or ""

    def set_options(self, options: list[str]) -> None:
        if self.kind is QuestionType.MULTIPLE_CHOICE:
            self.options = list(options)

    def add_option(self, option: str) -> bool:
        if self.kind is not QuestionType.MULTIPLE_CHOICE or not option or not option.strip():
            return False
        self.options.append(option)
        return True

    def remove_option(self, option: str) -> bool:
        if option not in self.options:
            return False
        self.options.remove(option)
        return True

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        if self.kind is QuestionType.SHORT_ANSWER:
            self.case_sensitive = bool(case_sensitive)


def multiple_choice(
    text: str, options: list[str], correct_answer: str, marks: int = DEFAULT_MARKS
) -> Question:
    return Question(
        kind=QuestionType.MULTIPLE_CHOICE,
        text=text,
        correct_answer=correct_answer,
        marks=marks,
        options=options,
    )


def true_false(text: str, correct_answer: str, marks: int = DEFAULT_MARKS) -> Question:
    return Question(kind=QuestionType.TRUE_FALSE, text=text, correct_answer=correct_answer, marks=marks)


def short_answer(
    text: str, correct_answer: str, marks: int = DEFAULT_MARKS, case_sensitive: bool = False
) -> Question:
    return Question(
        kind=QuestionType.SHORT_ANSWER,
        text=text,
        correct_answer=correct_answer,
        marks=marks,
        case_sensitive=case_sensitive,
    )
