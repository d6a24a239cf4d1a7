"""Plain-text renderings of questions, quizzes and results for console display."""

from __future__ import annotations

from quiz_maker.constants.quiz_constants import (
    FALLBACK_PERFORMANCE_MESSAGE,
    PERFORMANCE_MESSAGES,
)
from quiz_maker.core.models import Question, QuestionType
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.result import Result
from quiz_maker.core.services.result_statistics import ResultComparison, ResultStatistics

_RULE = "=" * 32
_BAR_LENGTH = 30


def format_duration(seconds: int) -> str:
    """Format seconds as ``45s``, ``5m 30s`` or ``1h 2m 3s``."""
    hours, remainder = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def render_question(question: Question) -> str:
    lines = [f"Q. {question.text}", f"Marks: {question.marks}"]
    match question.kind:
        case QuestionType.SHORT_ANSWER:
            suffix = " (Case Sensitive)" if question.case_sensitive else ""
            lines.append(f"Type: Short Answer{suffix}")
        case _:
            lines.append("Options:")
            for idx, option in enumerate(question.answer_options()):
                letter = chr(ord("A") + idx)
                lines.append(f"  {letter}) {option}")
    return "\n".join(lines) + "\n"


def render_quiz(quiz: Quiz) -> str:
    """Render every question of the quiz with a metadata header."""
    if not quiz.has_questions():
        return "No questions in this quiz."

    lines = [
        f"Quiz: {quiz.title}",
        f"Description: {quiz.description}",
        f"Total Questions: {quiz.question_count()}",
        f"Total Marks: {quiz.total_marks()}",
        f"Passing Marks: {quiz.passing_marks()}",
    ]
    if quiz.has_time_limit():
        lines.append(f"Time Limit: {quiz.time_limit} minutes")
    lines.append("")
    for number, question in enumerate(quiz.questions, start=1):
        lines.append(f"Question {number}:")
        lines.append(render_question(question))
    return "\n".join(lines)


def render_quiz_summary(quiz: Quiz) -> str:
    lines = [
        f"Title: {quiz.title}",
        f"Created by: {quiz.created_by}",
        f"Date Created: {quiz.date_created:%Y-%m-%d %H:%M}",
        f"Total Questions: {quiz.question_count()}",
        f"Total Marks: {quiz.total_marks()}",
        f"Passing Percentage: {quiz.passing_percentage}%",
    ]
    if quiz.has_time_limit():
        lines.append(f"Time Limit: {quiz.time_limit} minutes")
    for question_type in QuestionType:
        lines.append(f"{question_type.value} Questions: {quiz.count_questions_by_type(question_type.value)}")
    return "\n".join(lines) + "\n"


def render_instructions(quiz: Quiz) -> str:
    """Instructions shown to a test-taker before an attempt starts."""
    time_limit = f"{quiz.time_limit} minutes" if quiz.has_time_limit() else "No limit"
    return "\n".join(
        [
            f"Quiz: {quiz.title}",
            f"Total Questions: {quiz.question_count()}",
            f"Total Marks: {quiz.total_marks()}",
            f"Passing Marks: {quiz.passing_marks()} ({quiz.passing_percentage}%)",
            f"Time Limit: {time_limit}",
            "",
            "Instructions:",
            "- Read each question carefully",
            "- For Multiple Choice: enter the option letter, number or full text",
            "- For True/False: enter 'True' or 'False'",
            "- Type 'skip' to skip a question",
        ]
    ) + "\n"


def render_result(result: Result) -> str:
    student = result.student_name
    if result.student_id:
        student += f" (ID: {result.student_id})"
    lines = [
        "========== QUIZ RESULT ==========",
        f"Result ID: {result.id}",
        f"Quiz: {result.quiz_title} ({result.quiz_id})",
        f"Student: {student}",
        f"Date: {result.attempt_date:%Y-%m-%d %H:%M:%S}",
        f"Time Taken: {format_duration(result.time_taken)}",
        "",
        f"Score: {result.marks_obtained} / {result.total_marks}",
        f"Percentage: {result.percentage:.2f}%",
        f"Grade: {result.grade()}",
        f"Result: {'PASSED' if result.passed else 'FAILED'}",
        "",
        f"Correct Answers: {result.correct_answers_count()} / {len(result.questions)}",
        f"Incorrect Answers: {result.incorrect_answers_count()}",
        f"Unanswered: {result.unanswered_count()}",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def render_detailed_result(result: Result) -> str:
    """Render the result followed by a per-question breakdown."""
    lines = [render_result(result), "========== DETAILED BREAKDOWN ==========", ""]
    for index, question in enumerate(result.questions):
        answer = result.answer_for(index)
        lines.append(f"Question {index + 1}:")
        lines.append(render_question(question).rstrip("\n"))
        lines.append(f"Your Answer: {answer if answer is not None else '[Not Answered]'}")
        lines.append(f"Correct Answer: {question.correct_answer}")
        if result.is_answer_correct(index):
            lines.append(f"Status: CORRECT ({question.marks} marks)")
        else:
            lines.append("Status: INCORRECT (0 marks)")
        lines.append("")
    lines.append("=" * 40)
    return "\n".join(lines) + "\n"


def render_progress_bar(label: str, value: int, maximum: int) -> str:
    filled = value * _BAR_LENGTH // maximum if maximum > 0 else 0
    bar = "#" * filled + "-" * (_BAR_LENGTH - filled)
    return f"{label + ':':<12} [{bar}] {value}/{maximum}"


def performance_message(percentage: float) -> str:
    for lower_bound, message in PERFORMANCE_MESSAGES:
        if percentage >= lower_bound:
            return message
    return FALLBACK_PERFORMANCE_MESSAGE


def render_performance_analysis(result: Result) -> str:
    total = len(result.questions)
    lines = [
        f"Grade: {result.grade()}",
        "",
        "Score Distribution:",
        render_progress_bar("Correct", result.correct_answers_count(), total),
        render_progress_bar("Incorrect", result.incorrect_answers_count(), total),
        render_progress_bar("Unanswered", result.unanswered_count(), total),
        "",
        performance_message(result.percentage),
    ]
    return "\n".join(lines) + "\n"


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def render_results_table(results: list[Result]) -> str:
    if not results:
        return "No results to display."
    rule = "=" * 71
    lines = [rule, f"{'QUIZ':<25} {'STUDENT':<20} {'SCORE':<10} {'PERCENT':<10} {'STATUS':<10}", rule]
    for result in results:
        score = f"{result.marks_obtained}/{result.total_marks}"
        percent = f"{result.percentage:.1f}%"
        status = "PASS" if result.passed else "FAIL"
        lines.append(
            f"{_truncate(result.quiz_title, 24):<25} {_truncate(result.student_name, 19):<20} "
            f"{score:<10} {percent:<10} {status}"
        )
    lines.append(rule)
    lines.append(f"Total Results: {len(results)}")
    return "\n".join(lines) + "\n"


def render_statistics(statistics: ResultStatistics) -> str:
    if statistics.total_attempts == 0:
        return "No results available for statistics."
    lines = [
        f"Total Attempts: {statistics.total_attempts}",
        f"Passed: {statistics.passed}",
        f"Failed: {statistics.failed}",
        f"Pass Rate: {statistics.pass_rate:.1f}%",
        "",
        f"Average Score: {statistics.average_percentage:.2f}%",
        f"Highest Score: {statistics.highest_percentage:.2f}%",
        f"Lowest Score: {statistics.lowest_percentage:.2f}%",
        "",
        "Score Distribution:",
    ]
    lines.extend(
        render_progress_bar(label, count, statistics.total_attempts)
        for label, count in statistics.distribution.items()
    )
    return "\n".join(lines) + "\n"


def render_comparison(comparison: ResultComparison) -> str:
    first, second = comparison.first, comparison.second
    rows = [
        ("Student:", first.student_name, second.student_name),
        ("Quiz:", _truncate(first.quiz_title, 14), _truncate(second.quiz_title, 14)),
        (
            "Score:",
            f"{first.marks_obtained}/{first.total_marks}",
            f"{second.marks_obtained}/{second.total_marks}",
        ),
        ("Percentage:", f"{first.percentage:.2f}%", f"{second.percentage:.2f}%"),
        ("Status:", "PASSED" if first.passed else "FAILED", "PASSED" if second.passed else "FAILED"),
        ("Grade:", first.grade(), second.grade()),
    ]
    lines = [f"{'':<30} {'Result 1':<15} {'Result 2':<15}", "-" * 61]
    lines.extend(f"{label:<30} {left:<15} {right:<15}" for label, left, right in rows)
    lines.append("-" * 61)
    if comparison.is_same():
        lines.append("Performance is approximately the same.")
    elif comparison.difference > 0:
        lines.append(f"Result 2 is {comparison.difference:.2f}% better than Result 1")
    else:
        lines.append(f"Result 1 is {abs(comparison.difference):.2f}% better than Result 2")
    return "\n".join(lines) + "\n"
