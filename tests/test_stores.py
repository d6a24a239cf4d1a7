from pathlib import Path
import re

from quiz_maker.core.quiz import Quiz
from quiz_maker.core.result import Result
from quiz_maker.core.services.quiz_store import QuizStore, slugify
from quiz_maker.core.services.result_store import ResultStore


def test_slugify():
    assert slugify("Intro to C++") == "Intro_to_C__"
    assert slugify("v1.2-final") == "v1.2-final"
    assert re.fullmatch(r"unnamed_[0-9a-f]{12}", slugify("   "))


def test_quiz_store_round_trip(tmp_path: Path, mixed_quiz):
    store = QuizStore(tmp_path)
    assert store.directory == tmp_path / "quizzes"
    assert store.save(mixed_quiz)
    assert store.exists("General Knowledge")
    assert store.list_all() == ["General_Knowledge"]

    loaded = store.load("General Knowledge")
    assert loaded == mixed_quiz
    assert loaded.title == "General Knowledge"
    assert loaded.created_by == "Ms. Rivera"
    assert loaded.total_marks() == 10
    assert loaded.questions[1].correct_answer == "True"
    assert loaded.questions[2].case_sensitive
    assert loaded.questions[0].options == ["Paris", "Rome", "Berlin"]
    assert loaded.date_created == mixed_quiz.date_created


def test_saving_same_title_overwrites(tmp_path: Path, arithmetic_quiz):
    store = QuizStore(tmp_path)
    store.save(arithmetic_quiz)
    arithmetic_quiz.set_description("second version")
    store.save(arithmetic_quiz)
    assert store.list_all() == ["Arithmetic"]
    assert store.load("Arithmetic").description == "second version"


def test_quiz_store_rejects_and_reports_failures(tmp_path: Path):
    store = QuizStore(tmp_path)
    assert not store.save(Quiz(title="Empty"))
    assert not store.save(None)
    assert store.load("missing") is None
    assert not store.delete("missing")

    (store.directory / "broken.quiz").write_text("{not json", encoding="utf-8")
    assert store.load("broken") is None
    assert store.load_all() == []


def test_quiz_store_delete_and_clear(tmp_path: Path, arithmetic_quiz, mixed_quiz):
    store = QuizStore(tmp_path)
    store.save(arithmetic_quiz)
    store.save(mixed_quiz)
    assert len(store.load_all()) == 2

    assert store.delete("Arithmetic")
    assert store.list_all() == ["General_Knowledge"]
    assert store.clear_all() == 1
    assert store.list_all() == []


def test_quiz_export_and_import(tmp_path: Path, arithmetic_quiz):
    store = QuizStore(tmp_path / "data")
    target = tmp_path / "shared" / "arithmetic.quiz"
    assert store.export_quiz(arithmetic_quiz, target)
    assert target.is_file()
    assert store.list_all() == []

    imported = store.import_quiz(target)
    assert imported.id == arithmetic_quiz.id
    assert not store.export_quiz(Quiz(), tmp_path / "nope.quiz")


def _graded_result(quiz, name: str, answers: dict[int, str]) -> Result:
    result = Result.for_quiz(quiz, name, "S-1")
    for index, answer in answers.items():
        result.record_answer(index, answer)
    result.calculate_result(quiz.passing_percentage)
    return result


def test_result_store_round_trip(tmp_path: Path, mixed_quiz):
    store = ResultStore(tmp_path)
    result = _graded_result(mixed_quiz, "Ada Lovelace", {0: "Paris", 1: "False", 3: "jupiter"})

    identifier = store.save(result)
    assert identifier == f"Ada_Lovelace_{result.id}.result"
    assert store.list_all() == [identifier]

    loaded = store.load(identifier)
    assert loaded == result
    assert loaded.student_answers == {0: "Paris", 1: "False", 3: "jupiter"}
    assert loaded.answer_correctness == {0: True, 1: False, 2: False, 3: True}
    assert loaded.marks_obtained == 6
    assert loaded.passed
    assert [q.text for q in loaded.questions] == [q.text for q in mixed_quiz.questions]


def test_result_store_filters(tmp_path: Path, mixed_quiz, arithmetic_quiz):
    store = ResultStore(tmp_path)
    store.save(_graded_result(mixed_quiz, "Ada", {0: "Paris"}))
    store.save(_graded_result(mixed_quiz, "Grace", {}))
    store.save(_graded_result(arithmetic_quiz, "ada", {0: "4"}))

    assert len(store.results_for_quiz(mixed_quiz.id)) == 2
    assert len(store.results_for_quiz("unknown")) == 0
    assert {r.quiz_title for r in store.results_for_student("ADA")} == {"General Knowledge", "Arithmetic"}


def test_result_store_missing_and_corrupt(tmp_path: Path, arithmetic_quiz):
    store = ResultStore(tmp_path)
    assert store.load("nobody_123.result") is None
    assert not store.delete("nobody_123.result")

    (store.directory / "broken.result").write_text("[]", encoding="utf-8")
    assert store.load("broken.result") is None

    store.save(_graded_result(arithmetic_quiz, "Ada", {0: "4"}))
    assert len(store.load_all()) == 1
    assert store.clear_all() == 2
    assert store.list_all() == []
