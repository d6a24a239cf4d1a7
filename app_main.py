"""Application entry point: print a report of the stored quizzes and results."""

from __future__ import annotations

import sys

from quiz_maker.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quiz_maker.core.quiz_manager import QuizManager
from quiz_maker.core.text_renderer import render_quiz_summary, render_results_table, render_statistics
from quiz_maker.utils.logging_config import configure_logging


def build_about_text() -> str:
    return f"{APP_NAME} {APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}\n\n{HELP_TEXT}"


def build_report(quiz_manager: QuizManager) -> str:
    """Summarize every stored quiz with its attempt statistics."""
    sections = [f"{APP_NAME} {APP_VERSION}"]
    names = quiz_manager.list_quizzes()
    if not names:
        sections.append("No quizzes saved yet.")
    for name in names:
        quiz = quiz_manager.open_quiz(name)
        if quiz is None:
            continue
        sections.append(render_quiz_summary(quiz))
        sections.append(render_statistics(quiz_manager.quiz_statistics(quiz.id)))
    sections.append(render_results_table(quiz_manager.list_results()))
    return "\n".join(sections)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging and print the storage report (or the help text)."""
    args = sys.argv[1:] if argv is None else argv
    if "--help" in args or "-h" in args:
        print(build_about_text())
        return

    logger = configure_logging()
    logger.info("Starting %s…", APP_NAME)

    quiz_manager = QuizManager()
    print(build_report(quiz_manager))


if __name__ == "__main__":
    main()
