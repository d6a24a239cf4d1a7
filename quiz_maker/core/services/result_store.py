"""Service for persisting attempt results as JSON documents on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from quiz_maker.constants.storage_constants import (
    DEFAULT_DATA_DIRECTORY,
    JSON_INDENT,
    RESULT_FILE_EXTENSION,
    RESULT_SUBDIRECTORY,
)
from quiz_maker.core.result import Result
from quiz_maker.core.serialization import result_from_json, result_to_json
from quiz_maker.core.services.quiz_store import slugify

logger = logging.getLogger(__name__)


class ResultStore:
    """Loads and saves results under ``<base_dir>/results``.

    Identifiers are file names (``<student>_<result id>.result``). Filtering by
    quiz or student loads every stored result and scans it.
    """

    def __init__(self, base_dir: Path | str = DEFAULT_DATA_DIRECTORY) -> None:
        self._directory = Path(base_dir) / RESULT_SUBDIRECTORY
        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._directory

    @staticmethod
    def identifier_for(result: Result) -> str:
        return f"{slugify(result.student_name)}_{result.id}{RESULT_FILE_EXTENSION}"

    def path_for(self, identifier: str) -> Path:
        return self._directory / Path(identifier).name

    def save(self, result: Result | None) -> str | None:
        """Persist the result and return its identifier, or ``None`` on failure."""
        if result is None:
            logger.warning("Cannot save a missing result")
            return None
        identifier = self.identifier_for(result)
        file_path = self.path_for(identifier)
        try:
            file_path.write_text(result_to_json(result, indent=JSON_INDENT), encoding="utf-8")
        except OSError:
            logger.exception("Error saving result to %s", file_path)
            return None
        logger.info("Result saved: %s", file_path)
        return identifier

    def load(self, identifier: str) -> Result | None:
        file_path = self.path_for(identifier)
        if not file_path.is_file():
            logger.warning("Result file not found: %s", identifier)
            return None
        try:
            return result_from_json(file_path.read_text(encoding="utf-8"))
        except (OSError, ValidationError, ValueError):
            logger.exception("Error loading result %s", identifier)
            return None

    def list_all(self) -> list[str]:
        return sorted(path.name for path in self._directory.glob(f"*{RESULT_FILE_EXTENSION}"))

    def load_all(self) -> list[Result]:
        results: list[Result] = []
        for identifier in self.list_all():
            result = self.load(identifier)
            if result is not None:
                results.append(result)
        return results

    def results_for_quiz(self, quiz_id: str) -> list[Result]:
        return [result for result in self.load_all() if result.quiz_id == quiz_id]

    def results_for_student(self, student_name: str) -> list[Result]:
        wanted = student_name.casefold()
        return [result for result in self.load_all() if result.student_name.casefold() == wanted]

    def delete(self, identifier: str) -> bool:
        file_path = self.path_for(identifier)
        if not file_path.is_file():
            logger.warning("Result file not found: %s", identifier)
            return False
        try:
            file_path.unlink()
        except OSError:
            logger.exception("Failed to delete result %s", identifier)
            return False
        logger.info("Result deleted: %s", identifier)
        return True

    def clear_all(self) -> int:
        count = sum(1 for identifier in self.list_all() if self.delete(identifier))
        logger.info("Cleared %d result files", count)
        return count
