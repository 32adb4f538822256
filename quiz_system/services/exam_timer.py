"""
services/exam_timer.py

남은 시험 시간을 계산하는 타이머.
전역 인스턴스 없이 필요한 곳에서 생성하여 전달한다.
시험 제한 시간: 기본 config.EXAM_DURATION_SECONDS (1시간).
"""

import time
from typing import Callable, Optional

from quiz_system import config
from quiz_system.models.session_state import ExamSession


class ExamTimer:
    """
    시작 시각과 제한 시간으로 남은 시간을 계산한다.

    Args:
        start_time: 시험 시작 시각 (Unix timestamp). None이면 현재 시각.
        duration:   시험 제한 시간 (초).
        clock:      현재 시각 함수 (테스트에서 교체 가능).
    """

    def __init__(
        self,
        start_time: Optional[float] = None,
        duration: int = config.EXAM_DURATION_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        if duration <= 0:
            raise ValueError(f"시험 제한 시간은 양수여야 합니다: {duration}")
        self._clock = clock
        self.start_time = clock() if start_time is None else start_time
        self.duration = duration

    @classmethod
    def for_session(cls, session: ExamSession, **kwargs) -> "ExamTimer":
        return cls(start_time=session.start_time, **kwargs)

    def remaining(self) -> float:
        elapsed = self._clock() - self.start_time
        return max(0.0, self.duration - elapsed)

    def format_remaining(self) -> str:
        remaining = self.remaining()
        minutes = int(remaining // 60)
        seconds = int(remaining % 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def is_warning(self) -> bool:
        return self.remaining() < config.WARNING_THRESHOLD_SECONDS

    @property
    def is_expired(self) -> bool:
        return self.remaining() == 0
