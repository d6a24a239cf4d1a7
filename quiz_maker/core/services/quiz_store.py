"""Service for persisting quizzes as JSON documents on disk."""

from __future__ import annotations

import logging
from pathlib import Path
import re
from uuid import uuid4

from pydantic import ValidationError

from quiz_maker.constants.storage_constants import (
    DEFAULT_DATA_DIRECTORY,
    JSON_INDENT,
    QUIZ_FILE_EXTENSION,
    QUIZ_SUBDIRECTORY,
)
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.serialization import quiz_from_json, quiz_to_json

logger = logging.getLogger(__name__)

_UNSAFE_CHARACTERS = re.compile(r"[^a-zA-Z0-9.-]")


def slugify(name: str | None) -> str:
    """Turn a title or name into a filesystem-safe identifier."""
    if name is None or not name.strip():
        return f"unnamed_{uuid4().hex[:12]}"
    return _UNSAFE_CHARACTERS.sub("_", name)


class QuizStore:
    """Loads and saves quizzes under ``<base_dir>/quizzes`` keyed by title slug."""

    def __init__(self, base_dir: Path | str = DEFAULT_DATA_DIRECTORY) -> None:
        self._directory = Path(base_dir) / QUIZ_SUBDIRECTORY
        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        return self._directory / f"{slugify(name)}{QUIZ_FILE_EXTENSION}"

    def save(self, quiz: Quiz | None) -> bool:
        """Save under a name derived from the title, overwriting any existing file."""
        if quiz is None:
            logger.warning("Cannot save a missing quiz")
            return False
        return self.save_as(quiz, quiz.title)

    def save_as(self, quiz: Quiz | None, name: str) -> bool:
        if quiz is None or not quiz.is_valid():
            logger.warning("Cannot save invalid quiz")
            return False
        return self._write(quiz, self.path_for(name))

    def load(self, name: str) -> Quiz | None:
        return self.load_from_path(self.path_for(name))

    def load_from_path(self, file_path: Path | str) -> Quiz | None:
        file_path = Path(file_path)
        if not file_path.is_file():
            logger.warning("Quiz file not found: %s", file_path)
            return None
        try:
            quiz = quiz_from_json(file_path.read_text(encoding="utf-8"))
        except (OSError, ValidationError, ValueError):
            logger.exception("Error loading quiz from %s", file_path)
            return None
        logger.info("Quiz loaded from %s", file_path)
        return quiz

    def delete(self, name: str) -> bool:
        file_path = self.path_for(name)
        if not file_path.is_file():
            logger.warning("Quiz file not found: %s", file_path)
            return False
        try:
            file_path.unlink()
        except OSError:
            logger.exception("Failed to delete quiz %s", file_path)
            return False
        logger.info("Quiz deleted: %s", file_path)
        return True

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def list_all(self) -> list[str]:
        """Return the identifiers of every stored quiz, sorted."""
        return sorted(path.stem for path in self._directory.glob(f"*{QUIZ_FILE_EXTENSION}"))

    def load_all(self) -> list[Quiz]:
        quizzes: list[Quiz] = []
        for name in self.list_all():
            quiz = self.load(name)
            if quiz is not None:
                quizzes.append(quiz)
        return quizzes

    def clear_all(self) -> int:
        count = sum(1 for name in self.list_all() if self.delete(name))
        logger.info("Cleared %d quiz files", count)
        return count

    def export_quiz(self, quiz: Quiz | None, export_path: Path | str) -> bool:
        """Write the quiz document to an arbitrary path outside the store."""
        if quiz is None or not quiz.is_valid():
            logger.warning("Cannot export invalid quiz")
            return False
        return self._write(quiz, Path(export_path))

    def import_quiz(self, import_path: Path | str) -> Quiz | None:
        return self.load_from_path(import_path)

    @staticmethod
    def _write(quiz: Quiz, file_path: Path) -> bool:
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(quiz_to_json(quiz, indent=JSON_INDENT), encoding="utf-8")
        except OSError:
            logger.exception("Error saving quiz to %s", file_path)
            return False
        logger.info("Quiz saved: %s", file_path)
        return True
