from quiz_system.models.exam_tree import Question
from quiz_system.services.grading import ExactMatchStrategy
from quiz_system.services.question_factory import QuestionFactory


def test_multiple_choice_appends_hint_and_uses_exact_match():
    q = QuestionFactory.create_multiple_choice("2+2는?", "4")

    assert isinstance(q, Question)
    assert q.text == "2+2는? (A/B/C/D)"
    assert q.answer_key == "4"
    assert isinstance(q.grader, ExactMatchStrategy)


def test_true_false_appends_hint():
    q = QuestionFactory.create_true_false("지구는 둥글다.", "O")

    assert q.text == "지구는 둥글다. (O/X)"
    assert q.check_answer("O")
    assert not q.check_answer("X")


def test_each_call_returns_new_question():
    first = QuestionFactory.create_multiple_choice("문제", "A")
    second = QuestionFactory.create_multiple_choice("문제", "A")
    assert first is not second


def test_exact_match_is_case_and_whitespace_sensitive():
    grader = ExactMatchStrategy()
    assert grader.grade("Muitas formas", "Muitas formas")
    assert not grader.grade("muitas formas", "Muitas formas")
    assert not grader.grade("4 ", "4")
