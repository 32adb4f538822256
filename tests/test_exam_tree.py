import io

import pytest
from pydantic import ValidationError

from quiz_system.models.exam_tree import ExamSection, Question, UnsupportedOperationError
from quiz_system.services.grading import ExactMatchStrategy
from quiz_system.services.question_factory import QuestionFactory


def _question(text="문제", key="A"):
    return Question(text=text, answer_key=key, grader=ExactMatchStrategy())


class TestQuestion:
    def test_add_on_leaf_raises_and_leaves_it_unchanged(self):
        q = _question()
        before = q.model_dump()

        with pytest.raises(UnsupportedOperationError):
            q.add(_question("다른 문제"))

        assert q.model_dump() == before

    def test_add_section_on_leaf_raises(self):
        with pytest.raises(UnsupportedOperationError):
            _question().add(ExamSection(title="섹션"))

    def test_check_answer_delegates_to_grader(self):
        q = _question(key="4")
        assert q.check_answer("4") is True
        assert q.check_answer("10") is False

    def test_is_immutable(self):
        q = _question()
        with pytest.raises(ValidationError):
            q.text = "변경"

    def test_rejects_empty_text(self):
        with pytest.raises(ValidationError):
            _question(text="")

    def test_iter_questions_yields_itself(self):
        q = _question()
        assert list(q.iter_questions()) == [q]


class TestSectionDisplay:
    def test_section_then_two_indented_questions_in_order(self, logic_section, capsys):
        logic_section.display()

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "--- 섹션: 논리 ---",
            "  문제: 2+2는? (A/B/C/D)",
            "  문제: 3*3은? (A/B/C/D)",
        ]

    def test_nested_display_is_preorder_with_growing_indent(self, nested_exam):
        out = io.StringIO()
        nested_exam.display(0, out)

        assert out.getvalue().splitlines() == [
            "--- 섹션: 기말고사 ---",
            "  --- 섹션: 논리 ---",
            "    문제: 2+2는? (A/B/C/D)",
            "    문제: 3*3은? (A/B/C/D)",
            "  --- 섹션: 객체지향 ---",
            "    문제: 다형성이란? (A/B/C/D)",
        ]

    def test_display_starts_at_given_depth(self, capsys):
        _question("깊은 문제").display(3)
        assert capsys.readouterr().out == "      문제: 깊은 문제\n"

    def test_empty_section_prints_only_title(self, capsys):
        ExamSection(title="빈 섹션").display()
        assert capsys.readouterr().out == "--- 섹션: 빈 섹션 ---\n"


class TestSectionStructure:
    def test_add_appends_in_insertion_order(self):
        section = ExamSection(title="섹션")
        first, second = _question("1"), _question("2")
        section.add(first)
        section.add(second)
        assert section.children == [first, second]

    def test_accepts_empty_title(self, capsys):
        section = ExamSection(title="")
        section.display()
        assert capsys.readouterr().out == "--- 섹션:  ---\n"

    def test_iter_questions_walks_whole_tree(self, nested_exam):
        texts = [q.text for q in nested_exam.iter_questions()]
        assert texts == [
            "2+2는? (A/B/C/D)",
            "3*3은? (A/B/C/D)",
            "다형성이란? (A/B/C/D)",
        ]
        assert nested_exam.question_count == 3


class TestCreateIterator:
    def test_yields_direct_children_only(self, nested_exam):
        titles = [child.title for child in nested_exam.create_iterator()]
        assert titles == ["논리", "객체지향"]

    def test_two_iterators_are_independent(self, nested_exam):
        first = nested_exam.create_iterator()
        second = nested_exam.create_iterator()

        head = next(first)
        assert list(second) == nested_exam.children
        assert [head, *first] == nested_exam.children

    def test_is_restartable(self, logic_section):
        assert list(logic_section.create_iterator()) == list(logic_section.create_iterator())

    def test_is_lazy(self):
        section = ExamSection(title="섹션")
        it = section.create_iterator()
        q = QuestionFactory.create_multiple_choice("늦게 추가", "A")
        section.add(q)
        assert list(it) == [q]
