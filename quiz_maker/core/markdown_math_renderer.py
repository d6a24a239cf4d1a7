"""Markdown + LaTeX rendering of quizzes and results as HTML handouts.

Question text may be written in Markdown with ``$...$`` math. The renderer
converts markup to HTML with markdown-it and leaves the math to MathJax at
display time, so a printed quiz and a graded result sheet share one pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

from quiz_maker.core.models import Question, QuestionType
from quiz_maker.core.quiz import Quiz
from quiz_maker.core.result import Result

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip() or ""
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_with_mathjax(self, body_html: str, title: str = "Quiz Maker") -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; }}
      .question {{ margin-bottom: 1.5rem; line-height: 1.5; }}
      .correct {{ color: #15803d; }}
      .incorrect {{ color: #b91c1c; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
{body_html}
  </body>
</html>"""

    def render_question(self, question: Question, number: int) -> str:
        """Render one question and its choices as a markdown-derived fragment."""

        markdown_lines = [
            f"**Question {number}** ({question.marks} marks)",
            question.text.strip() or "(No question text)",
        ]
        match question.kind:
            case QuestionType.SHORT_ANSWER:
                markdown_lines.append("*Short answer*")
            case _:
                for idx, option in enumerate(question.answer_options()):
                    letter = chr(ord("A") + idx)
                    markdown_lines.append(f"**{letter}.** {option or '(empty)'}")
        fragment = self._markdown.render("\n\n".join(markdown_lines))
        return f'<div class="question">{fragment}</div>'

    def render_quiz_document(self, quiz: Quiz) -> str:
        """Render a printable quiz handout."""

        header = [f"# {quiz.title}"]
        if quiz.description:
            header.append(quiz.description)
        details = f"Total marks: {quiz.total_marks()} · Passing marks: {quiz.passing_marks()}"
        if quiz.has_time_limit():
            details += f" · Time limit: {quiz.time_limit} minutes"
        header.append(details)
        body = [self.render_fragment("\n\n".join(header))]
        body.extend(
            self.render_question(question, number)
            for number, question in enumerate(quiz.questions, start=1)
        )
        return self.wrap_with_mathjax("\n".join(body), title=quiz.title)

    def render_result_document(self, result: Result) -> str:
        """Render a graded result sheet with the per-question outcome."""

        status = "PASSED" if result.passed else "FAILED"
        summary = "\n\n".join(
            [
                f"# {result.quiz_title}",
                f"Student: {result.student_name}",
                f"Score: {result.marks_obtained} / {result.total_marks} "
                f"({result.percentage:.2f}%, grade {result.grade()}) - **{status}**",
            ]
        )
        body = [self.render_fragment(summary)]
        for index, question in enumerate(result.questions):
            answer = result.answer_for(index)
            verdict = "correct" if result.is_answer_correct(index) else "incorrect"
            given = html.escape(answer) if answer is not None else "<em>Not answered</em>"
            body.append(self.render_question(question, index + 1))
            body.append(
                f'<p class="{verdict}">Your answer: {given} '
                f"(correct answer: {html.escape(question.correct_answer)})</p>"
            )
        return self.wrap_with_mathjax("\n".join(body), title=f"{result.quiz_title} - {result.student_name}")


# Shared instance; MarkdownIt is safe to reuse for read-only renders.
renderer = MarkdownMathRenderer()
