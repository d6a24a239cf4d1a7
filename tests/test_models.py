from quiz_maker.core.models import (
    Question,
    QuestionType,
    multiple_choice,
    normalize_true_false,
    short_answer,
    true_false,
)


def test_multiple_choice_accepts_correct_answer_in_any_case():
    question = multiple_choice("Capital of France?", ["Paris", "Rome", "Berlin"], "Paris")
    assert question.is_valid()
    assert question.check_answer("Paris")
    assert question.check_answer("PARIS")
    assert question.check_answer("  paris ")
    assert not question.check_answer("")
    assert not question.check_answer("Rome")
    assert not question.check_answer(None)


def test_multiple_choice_matches_correct_text_even_when_option_removed():
    question = multiple_choice("Pick one", ["Alpha", "Beta", "Gamma"], "Beta")
    question.remove_option("Beta")
    assert question.check_answer("beta")
    assert not question.is_valid()


def test_multiple_choice_validity_rules():
    assert not multiple_choice("Pick one", ["Only"], "Only").is_valid()
    assert not multiple_choice("Pick one", ["A", "a"], "A").is_valid()
    assert not multiple_choice("Pick one", ["A", " "], "A").is_valid()
    assert not multiple_choice("Pick one", ["A", "B"], "C").is_valid()
    assert not multiple_choice("Pick one", [str(n) for n in range(11)], "1").is_valid()
    assert multiple_choice("Pick one", ["A", "B"], "b").is_valid()
    assert not multiple_choice("", ["A", "B"], "A").is_valid()


def test_true_false_normalizes_correct_answer():
    for raw in ("true", "True", "T", "1", " TRUE "):
        question = true_false("Sky is blue.", raw)
        assert question.correct_answer == "True"
        assert question.check_answer("true")
        assert not question.check_answer("false")


def test_true_false_unknown_candidate_counts_as_false():
    question = true_false("Pigs fly.", "false")
    assert question.correct_answer == "False"
    assert question.check_answer("nonsense")
    assert question.check_answer("0")
    assert not question.check_answer("t")
    assert question.is_valid()
    assert question.answer_options() == ["True", "False"]


def test_normalize_true_false():
    assert normalize_true_false("t") == "True"
    assert normalize_true_false("yes") == "False"


def test_short_answer_case_modes():
    insensitive = short_answer("Largest planet?", "Jupiter")
    assert insensitive.check_answer("jupiter")
    assert insensitive.check_answer(" JUPITER ")
    assert not insensitive.check_answer("Saturn")

    sensitive = short_answer("Symbol for water?", "H2O", case_sensitive=True)
    assert sensitive.check_answer("H2O")
    assert sensitive.check_answer(" H2O ")
    assert not sensitive.check_answer("h2o")
    assert sensitive.answer_options() == []


def test_invalid_marks_are_coerced_to_one():
    assert short_answer("Largest planet?", "Jupiter", marks=0).marks == 1
    assert short_answer("Largest planet?", "Jupiter", marks=-5).marks == 1
    question = short_answer("Largest planet?", "Jupiter", marks=4)
    question.set_marks(-2)
    assert question.marks == 1
    question.set_marks(3)
    assert question.marks == 3


def test_question_type_labels():
    assert multiple_choice("Q?", ["a", "b"], "a").question_type() == "Multiple Choice"
    assert true_false("Q?", "t").question_type() == "True/False"
    assert short_answer("Q?", "x").question_type() == "Short Answer"
    assert str(short_answer("Q?", "x", marks=2)) == "[Short Answer] Q? (Marks: 2)"


def test_clone_is_independent():
    original = multiple_choice("Pick one", ["A", "B"], "A", marks=2)
    copy = original.clone()
    assert copy == original
    assert copy is not original
    copy.add_option("C")
    copy.set_text("Changed")
    assert original.options == ["A", "B"]
    assert original.text == "Pick one"


def test_set_correct_answer_normalizes_true_false():
    question = true_false("Water is wet.", "true")
    question.set_correct_answer("f")
    assert question.correct_answer == "False"


def test_option_for_choice_multiple_choice():
    question = multiple_choice("2+2=?", ["3", "4", "5"], "4")
    assert question.option_for_choice("b") == "4"
    assert question.option_for_choice("B") == "4"
    assert question.option_for_choice("3") == "5"
    assert question.option_for_choice("z") is None
    assert question.option_for_choice("9") is None
    assert question.option_for_choice("four") == "four"
    assert question.option_for_choice("   ") is None


def test_option_for_choice_true_false_and_short_answer():
    question = true_false("Sky is blue.", "true")
    assert question.option_for_choice("a") == "True"
    assert question.option_for_choice("B") == "False"
    assert question.option_for_choice("maybe") is None
    assert short_answer("Name?", "x").option_for_choice("  Ada ") == "Ada"


def test_variant_specific_fields_are_dropped_for_other_kinds():
    question = Question(kind=QuestionType.TRUE_FALSE, text="Q?", correct_answer="1", options=["x"], case_sensitive=True)
    assert question.options == []
    assert question.case_sensitive is False
    assert question.correct_answer == "True"
