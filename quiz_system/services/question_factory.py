"""
services/question_factory.py

문제 유형별 Question 생성 (Factory Method).
유형에 맞는 보기 힌트를 문제 내용 뒤에 붙이고 채점 전략을 연결한다.
"""

from quiz_system.models.exam_tree import Question
from quiz_system.services.grading import EXACT_MATCH

MULTIPLE_CHOICE_HINT = " (A/B/C/D)"
TRUE_FALSE_HINT = " (O/X)"


class QuestionFactory:

    @staticmethod
    def create_multiple_choice(text: str, key: str) -> Question:
        """객관식 문제. 정답은 완전 일치로 채점."""
        return Question(text=text + MULTIPLE_CHOICE_HINT, answer_key=key, grader=EXACT_MATCH)

    @staticmethod
    def create_true_false(text: str, key: str) -> Question:
        """O/X 문제. 정답은 완전 일치로 채점."""
        return Question(text=text + TRUE_FALSE_HINT, answer_key=key, grader=EXACT_MATCH)
