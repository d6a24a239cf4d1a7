"""Business logic shared by whatever interaction layer drives Quiz Maker."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
import time

from quiz_maker.constants.quiz_constants import (
    DEFAULT_CREATED_BY,
    DEFAULT_PASSING_PERCENTAGE,
    DEFAULT_TIME_LIMIT_MINUTES,
)
from quiz_maker.constants.storage_constants import DEFAULT_DATA_DIRECTORY
from quiz_maker.core.models import Question
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.quiz_exporter import save_quiz_to_file
from quiz_maker.core.quiz_importer import load_quiz_from_file
from quiz_maker.core.result import Result
from quiz_maker.core.services.attempt_session import AttemptSession
from quiz_maker.core.services.quiz_store import QuizStore
from quiz_maker.core.services.result_statistics import ResultStatistics, summarize
from quiz_maker.core.services.result_store import ResultStore

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade for quiz services: QuizStore, ResultStore and AttemptSession."""

    def __init__(
        self,
        data_dir: Path | str = DEFAULT_DATA_DIRECTORY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        # Services
        self._quizzes = QuizStore(data_dir)
        self._results = ResultStore(data_dir)
        self._session = AttemptSession(clock=clock)

        self._current_quiz: Quiz | None = None

    # --- Authoring ---

    def new_quiz(
        self,
        title: str,
        description: str = "",
        created_by: str = DEFAULT_CREATED_BY,
        time_limit: int = DEFAULT_TIME_LIMIT_MINUTES,
        passing_percentage: int = DEFAULT_PASSING_PERCENTAGE,
    ) -> Quiz:
        quiz = Quiz(description=description, created_by=created_by)
        quiz.set_title(title)
        quiz.set_time_limit(time_limit)
        quiz.set_passing_percentage(passing_percentage)
        self._current_quiz = quiz
        return quiz

    def get_current_quiz(self) -> Quiz | None:
        return self._current_quiz

    def add_question(self, question: Question) -> bool:
        if self._current_quiz is None:
            return False
        return self._current_quiz.add_question(question)

    def update_question(self, index: int, question: Question) -> bool:
        if self._current_quiz is None:
            return False
        return self._current_quiz.update_question(index, question)

    def delete_question(self, index: int) -> Question | None:
        if self._current_quiz is None:
            return None
        return self._current_quiz.remove_question_at(index)

    def save_current_quiz(self) -> bool:
        return self._quizzes.save(self._current_quiz)

    # --- Quiz store delegation ---

    def list_quizzes(self) -> list[str]:
        return self._quizzes.list_all()

    def open_quiz(self, name: str) -> Quiz | None:
        quiz = self._quizzes.load(name)
        if quiz is not None:
            self._current_quiz = quiz
        return quiz

    def delete_quiz(self, name: str) -> bool:
        return self._quizzes.delete(name)

    def import_quiz_file(self, file_path: Path) -> Quiz:
        """Load a quiz from the text format; raises ``QuizImportError`` on bad input."""
        imported = load_quiz_from_file(file_path)
        self._current_quiz = imported.quiz
        logger.info("Imported quiz '%s' from %s", imported.quiz.title, imported.source_path)
        return imported.quiz

    def export_quiz_file(self, file_path: Path) -> bool:
        if self._current_quiz is None or not self._current_quiz.has_questions():
            return False
        save_quiz_to_file(file_path, self._current_quiz)
        return True

    # --- Attempt delegation ---

    def start_attempt(self, student_name: str, student_id: str = "", quiz: Quiz | None = None) -> Result | None:
        return self._session.start(quiz or self._current_quiz, student_name, student_id)

    def current_question(self) -> Question | None:
        return self._session.current_question()

    def current_question_number(self) -> int:
        return self._session.current_index() + 1

    def submit_answer(self, raw_answer: str) -> bool:
        return self._session.submit_answer(raw_answer)

    def skip_question(self) -> None:
        self._session.skip()

    def remaining_seconds(self) -> float | None:
        return self._session.remaining_seconds()

    def is_attempt_finished(self) -> bool:
        return self._session.is_finished()

    def finish_attempt(self, save: bool = True) -> Result:
        result = self._session.finish()
        if save and self._results.save(result) is None:
            logger.warning("Result %s was graded but could not be saved", result.id)
        return result

    # --- Result store delegation ---

    def list_results(self) -> list[Result]:
        return self._results.load_all()

    def results_for_quiz(self, quiz_id: str) -> list[Result]:
        return self._results.results_for_quiz(quiz_id)

    def results_for_student(self, student_name: str) -> list[Result]:
        return self._results.results_for_student(student_name)

    def quiz_statistics(self, quiz_id: str) -> ResultStatistics:
        return summarize(self._results.results_for_quiz(quiz_id))
