"""
models/exam_tree.py

시험지 트리 모델 (Composite).
  - ExamSection : 하위 노드를 담는 복합 노드 (섹션)
  - Question    : 하위 노드를 가질 수 없는 리프 노드 (문제)

트리는 ExamBuilder가 한 번 조립한 뒤 읽기 전용으로 사용한다.
Pydantic BaseModel 기반. UI 코드 없음.
"""

from abc import abstractmethod
from typing import Iterator, List, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from quiz_system import config
from quiz_system.services.grading import GradingStrategy


class UnsupportedOperationError(Exception):
    """리프 노드에 자식을 추가하려 할 때 발생."""


class ExamComponent(BaseModel):
    """시험지 트리 노드의 공통 인터페이스."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @abstractmethod
    def display(self, depth: int = 0, out: Optional[TextIO] = None) -> None:
        """depth 단계만큼 들여써서 노드를 출력한다."""

    @abstractmethod
    def iter_questions(self) -> Iterator["Question"]:
        """하위 트리의 모든 문제를 전위 순회 순서로 반환한다."""

    def add(self, child: "ExamComponent") -> None:
        raise UnsupportedOperationError(
            f"{type(self).__name__}에는 하위 노드를 추가할 수 없습니다."
        )


class Question(ExamComponent):
    """
    문제 (리프 노드).

    Attributes:
        text:       화면에 표시되는 문제 내용 (팩토리가 보기 힌트를 덧붙임).
        answer_key: 정답 키.
        grader:     채점 전략. 여러 문제가 같은 인스턴스를 공유할 수 있다.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        min_length=1,
        description="문제 내용"
    )
    answer_key: str = Field(
        ...,
        description="정답 키"
    )
    grader: GradingStrategy = Field(
        ...,
        description="채점 전략 (Strategy)"
    )

    def display(self, depth: int = 0, out: Optional[TextIO] = None) -> None:
        print(f"{config.INDENT * depth}문제: {self.text}", file=out)

    def iter_questions(self) -> Iterator["Question"]:
        yield self

    def check_answer(self, answer: str) -> bool:
        """채점 전략에 정답 판정을 위임한다."""
        return self.grader.grade(answer, self.answer_key)


class ExamSection(ExamComponent):
    """
    섹션 (복합 노드).

    children은 추가된 순서를 유지하며, 각 노드는 하나의 섹션에만 속한다.
    """

    title: str = Field(
        ...,
        description="섹션 제목"
    )
    children: List[ExamComponent] = Field(
        default_factory=list,
        description="하위 노드 (추가 순서 유지)"
    )

    def add(self, child: ExamComponent) -> None:
        self.children.append(child)

    def display(self, depth: int = 0, out: Optional[TextIO] = None) -> None:
        print(f"{config.INDENT * depth}--- 섹션: {self.title} ---", file=out)
        for child in self.children:
            child.display(depth + 1, out)

    def create_iterator(self) -> Iterator[ExamComponent]:
        """
        직속 하위 노드만 순회하는 이터레이터 (재귀하지 않음).

        호출할 때마다 새로운 순회를 시작한다.
        순회 중 children을 변경하는 경우는 보호하지 않는다.
        """
        for child in self.children:
            yield child

    def iter_questions(self) -> Iterator[Question]:
        for child in self.children:
            yield from child.iter_questions()

    @property
    def question_count(self) -> int:
        return sum(1 for _ in self.iter_questions())
