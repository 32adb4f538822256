"""
services/exam_builder.py

시험지 트리 조립 도우미 (Builder).

현재 범위(current_scope)는 항상 ExamSection이므로
리프 노드에 add()를 호출하는 경로가 존재하지 않는다.

주의: add_section()은 새 섹션을 현재 범위 아래에 추가할 뿐,
현재 범위를 새 섹션으로 옮기지 않는다. 이후의 add_question()/add_section()은
계속 루트를 대상으로 한다 (평면 구조).
"""

import logging

from quiz_system.models.exam_tree import ExamSection
from quiz_system.services.question_factory import QuestionFactory

logger = logging.getLogger(__name__)


class ExamBuilder:
    def __init__(self, title: str):
        self._root = ExamSection(title=title)
        self.current_scope: ExamSection = self._root

    def add_section(self, name: str) -> "ExamBuilder":
        self.current_scope.add(ExamSection(title=name))
        logger.debug(f"섹션 추가: {name} → {self.current_scope.title}")
        return self

    def add_question(self, text: str, key: str) -> "ExamBuilder":
        self.current_scope.add(QuestionFactory.create_multiple_choice(text, key))
        logger.debug(f"문제 추가: {text} → {self.current_scope.title}")
        return self

    def build(self) -> ExamSection:
        logger.info(f"시험지 조립 완료: {self._root.title} (문제 {self._root.question_count}개)")
        return self._root
