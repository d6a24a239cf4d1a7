"""Service for driving one student's attempt at a quiz."""

from __future__ import annotations

from collections.abc import Callable
import logging
import time

from quiz_maker.constants.quiz_constants import SKIP_KEYWORD
from quiz_maker.core.models import Question
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.result import Result

logger = logging.getLogger(__name__)


class AttemptSession:
    """Walks a test-taker through the questions of a quiz, front to back.

    The session owns the :class:`Result` being built. Questions are served from
    the result's snapshot, so editing the quiz mid-attempt changes nothing.
    Once the quiz time limit expires no further answers are accepted and
    :meth:`finish` grades whatever was recorded.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._result: Result | None = None
        self._passing_percentage: int = 0
        self._time_limit_seconds: int = 0
        self._position: int = -1
        self._started_at: float | None = None
        self._finished: bool = False
        self._timed_out: bool = False

    def start(self, quiz: Quiz | None, student_name: str, student_id: str = "") -> Result | None:
        """Begin an attempt. Returns ``None`` for an invalid quiz or a blank name."""
        if quiz is None or not quiz.is_valid():
            logger.warning("Cannot start an attempt on an invalid quiz")
            return None
        if not student_name or not student_name.strip():
            logger.warning("Cannot start an attempt without a student name")
            return None

        self._result = Result.for_quiz(quiz, student_name.strip(), (student_id or "").strip())
        self._passing_percentage = quiz.passing_percentage
        self._time_limit_seconds = quiz.time_limit * 60
        self._position = 0
        self._started_at = self._clock()
        self._finished = False
        self._timed_out = False
        logger.info("Attempt %s started on quiz '%s' by %s", self._result.id, quiz.title, student_name)
        return self._result

    def is_active(self) -> bool:
        return self._result is not None and not self._finished

    def get_result(self) -> Result | None:
        return self._result

    def current_index(self) -> int:
        return self._position

    def question_count(self) -> int:
        return len(self._result.questions) if self._result else 0

    def current_question(self) -> Question | None:
        if self._result is None or self.is_finished():
            return None
        return self._result.questions[self._position]

    def submit_answer(self, raw_answer: str) -> bool:
        """Record an answer for the current question and move on.

        Typing ``skip`` skips the question. Returns ``False`` when the input
        names an option that does not exist, is blank, or time has run out;
        the session stays on the same question in the first two cases.
        """
        self._require_active()
        question = self.current_question()
        if question is None or self.is_time_up():
            return False
        if raw_answer is not None and raw_answer.strip().lower() == SKIP_KEYWORD:
            self.skip()
            return True

        answer = question.option_for_choice(raw_answer)
        if answer is None:
            return False
        self._result.record_answer(self._position, answer)
        return self.advance()

    def skip(self) -> None:
        self._require_active()
        if self.current_question() is None or self.is_time_up():
            return
        self._result.skip_question(self._position)
        self.advance()

    def advance(self) -> bool:
        """Move to the next question, keeping whatever was recorded for this one."""
        self._require_active()
        if self.current_question() is None or self.is_time_up():
            return False
        self._position += 1
        return True

    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        return max(0.0, self._clock() - self._started_at)

    def remaining_seconds(self) -> float | None:
        """Seconds left before the time limit, or ``None`` for an unlimited quiz."""
        if self._time_limit_seconds <= 0:
            return None
        return max(0.0, self._time_limit_seconds - self.elapsed_seconds())

    def is_time_up(self) -> bool:
        if self._timed_out:
            return True
        remaining = self.remaining_seconds()
        if remaining is not None and remaining <= 0:
            self._timed_out = True
            logger.info("Time limit reached; answer collection stopped")
        return self._timed_out

    def is_finished(self) -> bool:
        if self._result is None:
            return False
        return self._finished or self._position >= len(self._result.questions) or self.is_time_up()

    def finish(self) -> Result:
        """Stop the attempt, record the time taken and grade the result."""
        if self._result is None:
            raise RuntimeError("No attempt has been started.")
        if self._finished:
            raise RuntimeError("Attempt has already been finished.")

        self._result.time_taken = int(self.elapsed_seconds())
        self._result.calculate_result(self._passing_percentage)
        self._finished = True
        logger.info(
            "Attempt %s finished: %d/%d (%.2f%%)",
            self._result.id,
            self._result.marks_obtained,
            self._result.total_marks,
            self._result.percentage,
        )
        return self._result

    def _require_active(self) -> None:
        if self._result is None:
            raise RuntimeError("No attempt has been started.")
        if self._finished:
            raise RuntimeError("Attempt has already been finished.")
