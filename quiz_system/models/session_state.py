"""
models/session_state.py

시험 진행 상태(ExamSession)와 그 스냅샷(ExamMemento) 모델.
Pydantic BaseModel 기반 — 타입 안전성 확보.
UI 코드 없음.

세션은 시험지 트리 구조와 분리되어 있다. 답안은 문제 위치(0-based)로만 관리된다.
"""

import logging
import time
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quiz_system import config

logger = logging.getLogger(__name__)


def _check_index(current_index: int, answer_count: int) -> None:
    if current_index > answer_count:
        raise ValueError(
            f"인덱스({current_index})가 답안 개수({answer_count})를 넘을 수 없습니다."
        )


class ExamMemento(BaseModel):
    """
    세션 상태의 불변 스냅샷 (Memento).

    생성 이후 세션이 어떻게 변경되어도 저장된 값은 바뀌지 않는다.

    Attributes:
        current_index: 스냅샷 시점의 문제 인덱스.
        answers:       스냅샷 시점의 답안 복사본 (tuple).
        created_at:    스냅샷 생성 시각 (Unix timestamp).
    """

    model_config = ConfigDict(frozen=True)

    current_index: int = Field(
        ...,
        ge=0,
        description="스냅샷 시점의 문제 인덱스 (0-based)"
    )
    answers: Tuple[str, ...] = Field(
        default=(),
        description="스냅샷 시점의 답안 복사본"
    )
    created_at: float = Field(
        default_factory=time.time,
        description="스냅샷 생성 시각 (Unix timestamp)"
    )

    @model_validator(mode='after')
    def validate_index_within_answers(self) -> 'ExamMemento':
        """
        검증 로직: 인덱스는 답안 개수를 넘을 수 없다.
        """
        _check_index(self.current_index, len(self.answers))
        return self


class ExamSession(BaseModel):
    """
    사용자의 시험 세션 상태.

    Attributes:
        current_index: 다음에 답할 문제의 인덱스 (0-based).
        answers:       문제 위치 순서의 답안 리스트.
        start_time:    시험 시작 시각 (time.time() 기준 Unix timestamp).
                       ExamTimer가 남은 시간을 계산할 때 사용한다.
    """

    current_index: int = Field(
        default=0,
        ge=0,
        description="현재 풀고 있는 문제 인덱스 (0-based)"
    )
    answers: List[str] = Field(
        default_factory=list,
        description="사용자 답안지. index: 문제 위치, value: 제출한 답"
    )
    start_time: float = Field(
        default_factory=time.time,
        description="시험 시작 시각 (Unix timestamp, time.time() 기준)"
    )

    @model_validator(mode='after')
    def validate_index_within_answers(self) -> 'ExamSession':
        """
        검증 로직: 인덱스는 답안 개수를 넘을 수 없다.
        답안은 한 번에 하나씩만 기록되므로, 다음 문제 인덱스는 최대 len(answers)이다.
        """
        _check_index(self.current_index, len(self.answers))
        return self

    def answer_question(self, answer: str) -> None:
        """
        현재 인덱스에 답을 기록하고 다음 문제로 이동한다.

        이미 답한 위치면 덮어쓰고, 아니면 뒤에 추가한다.
        """
        if self.current_index >= len(self.answers):
            self.answers.append(answer)
        else:
            self.answers[self.current_index] = answer
        self.current_index += 1

    def get_answer(self, index: int) -> str:
        """index 위치의 답. 범위를 벗어나면 미응답 표시 문자열."""
        if 0 <= index < len(self.answers):
            return self.answers[index]
        return config.NO_ANSWER_PLACEHOLDER

    def save(self) -> ExamMemento:
        memento = ExamMemento(
            current_index=self.current_index,
            answers=tuple(self.answers),
        )
        logger.info(f"체크포인트 저장: 인덱스 {memento.current_index}, 답안 {len(memento.answers)}개")
        return memento

    def restore(self, memento: ExamMemento) -> None:
        """
        스냅샷으로 세션 상태를 통째로 되돌린다.

        스냅샷 이후의 진행 내용은 모두 버려진다 (병합하지 않음).
        """
        self.current_index = memento.current_index
        self.answers = list(memento.answers)
        logger.info(f"체크포인트 복원: 인덱스 {self.current_index}")
