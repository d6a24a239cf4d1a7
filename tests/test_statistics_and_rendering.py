import pytest

from quiz_maker.core import text_renderer
from quiz_maker.core.markdown_math_renderer import MarkdownMathRenderer, renderer
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.result import Result
from quiz_maker.core.services.result_statistics import compare, distribution_label, leaderboard, summarize


def _result(name: str, marks: int, time_taken: int = 60) -> Result:
    return Result(
        quiz_id="quiz-1",
        quiz_title="Arithmetic",
        student_name=name,
        total_marks=10,
        marks_obtained=marks,
        percentage=marks * 10.0,
        passed=marks >= 5,
        time_taken=time_taken,
    )


def test_summarize():
    stats = summarize([_result("Ada", 9), _result("Grace", 5), _result("Alan", 2), _result("Edsger", 10)])
    assert stats.total_attempts == 4
    assert stats.passed == 3
    assert stats.failed == 1
    assert stats.pass_rate == pytest.approx(75.0)
    assert stats.average_percentage == pytest.approx(65.0)
    assert stats.highest_percentage == 100.0
    assert stats.lowest_percentage == 20.0
    assert stats.distribution == {"0-20%": 1, "21-40%": 0, "41-60%": 1, "61-80%": 0, "81-100%": 2}


def test_summarize_empty():
    stats = summarize([])
    assert stats.total_attempts == 0
    assert sum(stats.distribution.values()) == 0
    assert text_renderer.render_statistics(stats) == "No results available for statistics."


@pytest.mark.parametrize(
    "percentage, label",
    [(0.0, "0-20%"), (20.0, "0-20%"), (20.5, "21-40%"), (80.0, "61-80%"), (100.0, "81-100%")],
)
def test_distribution_label(percentage, label):
    assert distribution_label(percentage) == label


def test_compare_and_leaderboard():
    ada, grace = _result("Ada", 5), _result("Grace", 9)
    comparison = compare(ada, grace)
    assert comparison.difference == pytest.approx(40.0)
    assert comparison.better() is grace
    assert "Result 2 is 40.00% better than Result 1" in text_renderer.render_comparison(comparison)

    tie = compare(ada, _result("Alan", 5))
    assert tie.is_same()
    assert tie.better() is None
    assert "approximately the same" in text_renderer.render_comparison(tie)

    slow, fast = _result("Slow", 9, time_taken=300), _result("Fast", 9, time_taken=100)
    board = leaderboard([ada, slow, fast, _result("Alan", 2)])
    assert [r.student_name for r in board] == ["Fast", "Slow", "Ada"]


@pytest.mark.parametrize("seconds, expected", [(45, "45s"), (330, "5m 30s"), (3723, "1h 2m 3s"), (-5, "0s")])
def test_format_duration(seconds, expected):
    assert text_renderer.format_duration(seconds) == expected


def test_render_quiz(mixed_quiz):
    assert text_renderer.render_quiz(Quiz()) == "No questions in this quiz."
    text = text_renderer.render_quiz(mixed_quiz)
    assert "Quiz: General Knowledge" in text
    assert "Total Marks: 10" in text
    assert "Passing Marks: 6" in text
    assert "  B) Rome" in text
    assert "  A) True" in text
    assert "Type: Short Answer (Case Sensitive)" in text

    summary = text_renderer.render_quiz_summary(mixed_quiz)
    assert "Short Answer Questions: 2" in summary
    assert "Time Limit: No limit" in text_renderer.render_instructions(mixed_quiz)


def test_render_results(mixed_quiz):
    result = Result.for_quiz(mixed_quiz, "Ada", "S-1")
    result.record_answer(0, "Paris")
    result.record_answer(3, "Saturn")
    result.time_taken = 90
    result.calculate_result(mixed_quiz.passing_percentage)

    text = text_renderer.render_result(result)
    assert "Student: Ada (ID: S-1)" in text
    assert "Time Taken: 1m 30s" in text
    assert "Score: 2 / 10" in text
    assert "Result: FAILED" in text
    assert "Unanswered: 2" in text

    detailed = text_renderer.render_detailed_result(result)
    assert "Your Answer: [Not Answered]" in detailed
    assert "Status: CORRECT (2 marks)" in detailed
    assert "Status: INCORRECT (0 marks)" in detailed

    analysis = text_renderer.render_performance_analysis(result)
    assert "Grade: F" in analysis
    assert "Keep practicing!" in analysis

    table = text_renderer.render_results_table([result])
    assert "General Knowledge" in table
    assert "20.0%" in table
    assert "Total Results: 1" in table
    assert text_renderer.render_results_table([]) == "No results to display."


def test_progress_bar_and_messages():
    assert text_renderer.render_progress_bar("Correct", 1, 2) == "Correct:     [" + "#" * 15 + "-" * 15 + "] 1/2"
    assert text_renderer.render_progress_bar("None", 0, 0).endswith("0/0")
    assert text_renderer.performance_message(100.0) == "Outstanding! Perfect performance!"
    assert text_renderer.performance_message(50.0).startswith("Not bad!")


def test_markdown_quiz_document(arithmetic_quiz):
    document = renderer.render_quiz_document(arithmetic_quiz)
    assert document.startswith("<!doctype html>")
    assert "<title>Arithmetic</title>" in document
    assert "mathjax" in document
    assert "<strong>B.</strong> 4" in document


def test_markdown_result_document(mixed_quiz):
    result = Result.for_quiz(mixed_quiz, "Ada")
    result.record_answer(0, "<Paris>")
    result.calculate_result(mixed_quiz.passing_percentage)

    document = renderer.render_result_document(result)
    assert "&lt;Paris&gt;" in document
    assert "<em>Not answered</em>" in document
    assert "<em>Short answer</em>" in document
    assert 'class="incorrect"' in document


def test_markdown_fragment_and_escaping():
    local = MarkdownMathRenderer()
    assert local.render_fragment("   ") == "<p><em>No content provided.</em></p>"
    assert "<em>x</em>" in local.render_fragment("*x*")
    assert "<title>a &lt; b</title>" in local.wrap_with_mathjax("<p></p>", title="a < b")
