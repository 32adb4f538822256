"""
services/exam_service.py

시험 채점 및 결과 분석 비즈니스 로직.
순수 Python 함수로 구성 — UI 코드, 전역 상태 변경 없음.

답안은 ExamSession.answers 와 같은 위치 기반 리스트이며,
i번째 답안은 시험지 전위 순회(iter_questions) 순서의 i번째 문제에 대응한다.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from quiz_system import config
from quiz_system.models.exam_tree import ExamSection, Question

logger = logging.getLogger(__name__)


def _answer_at(answers: List[str], index: int) -> Optional[str]:
    return answers[index] if index < len(answers) else None


def calculate_score(
    questions: Iterable[Question],
    answers: List[str],
) -> float:
    """
    사용자 답안을 채점하여 100점 만점 환산 점수를 반환한다.

    정답 판정은 각 문제의 채점 전략(question.check_answer)에 위임한다.
    응답하지 않은 문제(답안 리스트 범위 밖)는 오답으로 처리.

    Args:
        questions: 채점 대상 Question (전위 순회 순서).
        answers:   위치 기반 답안 리스트.

    Returns:
        0.0 ~ 100.0 범위의 점수 (소수점 둘째 자리 반올림).
        questions가 비어 있으면 0.0 반환.
    """
    questions = list(questions)
    if not questions:
        return 0.0

    correct_count = 0
    for i, q in enumerate(questions):
        user_ans = _answer_at(answers, i)
        if user_ans is not None and q.check_answer(user_ans):
            correct_count += 1

    score = round(correct_count / len(questions) * 100, 2)
    logger.info(f"calculate_score: {correct_count}/{len(questions)} 정답 → {score}점")
    return score


def get_incorrect_questions(
    questions: Iterable[Question],
    answers: List[str],
) -> List[Question]:
    """
    오답 문제 리스트를 반환한다 (오답 노트용).

    미응답 문제도 오답에 포함한다. 원본 순서 유지.
    """
    incorrect: List[Question] = []

    for i, q in enumerate(questions):
        user_ans = _answer_at(answers, i)
        if user_ans is None or not q.check_answer(user_ans):
            incorrect.append(q)

    return incorrect


def calculate_section_scores(
    exam: ExamSection,
    answers: List[str],
) -> List[Dict[str, object]]:
    """
    루트 직속 섹션별 점수를 계산하여 반환한다.

    루트 바로 아래에 있는 문제는 config.OTHER_SECTION_NAME 으로 묶는다.
    섹션은 제목이 아니라 위치로 구분하므로, 같은 제목의 섹션도 따로 집계된다.

    Returns:
        [{"section": str, "total": int, "correct": int,
          "incorrect": int, "unanswered": int, "score": float}, ...]
        시험지에 나타난 순서대로 정렬.
    """
    buckets: Dict[Optional[int], Dict[str, int]] = defaultdict(
        lambda: {"total": 0, "correct": 0, "incorrect": 0, "unanswered": 0}
    )
    labels: Dict[Optional[int], str] = {}

    position = 0
    for child_index, child in enumerate(exam.create_iterator()):
        # None: 루트 직속 문제 묶음
        key = child_index if isinstance(child, ExamSection) else None
        labels[key] = child.title if key is not None else config.OTHER_SECTION_NAME
        bucket = buckets[key]
        for q in child.iter_questions():
            bucket["total"] += 1
            user_ans = _answer_at(answers, position)
            if user_ans is None:
                bucket["unanswered"] += 1
            elif q.check_answer(user_ans):
                bucket["correct"] += 1
            else:
                bucket["incorrect"] += 1
            position += 1

    result = []
    for key, b in buckets.items():
        score = round(b["correct"] / b["total"] * 100, 1) if b["total"] else 0.0
        result.append({"section": labels[key], **b, "score": score})
    return result


def is_passed(score: float, pass_score: float = config.PASS_SCORE) -> bool:
    """
    합격 여부를 반환한다.

    Args:
        score:      calculate_score()가 반환한 점수 (0.0 ~ 100.0).
        pass_score: 합격 기준 점수 (기본값 config.PASS_SCORE).

    Returns:
        score >= pass_score 이면 True, 아니면 False.
    """
    return score >= pass_score
