import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from quiz_system.models.exam_tree import ExamSection
from quiz_system.services.question_factory import QuestionFactory


@pytest.fixture
def logic_section():
    section = ExamSection(title="논리")
    section.add(QuestionFactory.create_multiple_choice("2+2는?", "4"))
    section.add(QuestionFactory.create_multiple_choice("3*3은?", "9"))
    return section


@pytest.fixture
def nested_exam(logic_section):
    exam = ExamSection(title="기말고사")
    exam.add(logic_section)
    oop = ExamSection(title="객체지향")
    oop.add(QuestionFactory.create_multiple_choice("다형성이란?", "여러 형태"))
    exam.add(oop)
    return exam
