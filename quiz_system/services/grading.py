"""
services/grading.py

채점 전략(Strategy) 정의.
Question은 전략 인스턴스를 참조만 하고, 정답 판정은 전략에 위임한다.
전략은 상태를 갖지 않으므로 여러 문제가 하나의 인스턴스를 공유해도 된다.
"""

from abc import ABC, abstractmethod


class GradingStrategy(ABC):
    """정답 판정 규칙의 공통 인터페이스."""

    @abstractmethod
    def grade(self, answer: str, key: str) -> bool:
        """
        제출 답안이 정답 키와 일치하는지 판정한다.

        Args:
            answer: 사용자가 제출한 답안 문자열.
            key:    문제의 정답 키.

        Returns:
            정답이면 True.
        """


class ExactMatchStrategy(GradingStrategy):
    """문자열 완전 일치 채점 (대소문자·공백 구분)."""

    def grade(self, answer: str, key: str) -> bool:
        return answer == key

    def __repr__(self) -> str:
        return "ExactMatchStrategy()"


# 기본 공유 인스턴스
EXACT_MATCH = ExactMatchStrategy()
