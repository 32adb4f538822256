"""
main.py — 퀴즈 시스템 시연 진입점

시험지 조립(Builder) → 출력(Composite) → 순회(Iterator)
→ 답안 기록과 체크포인트 복원(Memento) → 채점(Strategy) → 남은 시간(Timer)
"""

import os
import sys
import logging
from typing import Optional, TextIO

# ── 패키지 경로 설정 (반드시 최상단) ──────────────────────────────────────────
_BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if _BASE_DIR not in sys.path:
    sys.path.insert(0, _BASE_DIR)

from quiz_system.config import LOG_FILE
from quiz_system.models.exam_tree import ExamSection
from quiz_system.models.session_state import ExamSession
from quiz_system.services.exam_builder import ExamBuilder
from quiz_system.services.exam_service import calculate_score, is_passed
from quiz_system.services.exam_timer import ExamTimer

logger = logging.getLogger(__name__)


# ── 로깅 설정 ────────────────────────────────────────────────────────────────

def _setup_logging() -> None:
    try:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s [%(levelname)s] %(message)s',
            handlers=[
                logging.FileHandler(LOG_FILE, encoding='utf-8'),
                logging.StreamHandler(sys.stderr)
            ]
        )
    except PermissionError:
        # 로그 파일 점유 시 콘솔 출력만 사용
        logging.basicConfig(level=logging.INFO)


# ── 시연 ─────────────────────────────────────────────────────────────────────

def build_demo_exam() -> ExamSection:
    # add_section()은 현재 범위를 옮기지 않으므로 문제는 모두 루트에 붙는다.
    return (
        ExamBuilder("자바 기말고사")
        .add_section("논리")
        .add_question("2+2는?", "4")
        .add_question("3*3은?", "9")
        .add_section("객체지향")
        .add_question("다형성이란?", "여러 형태")
        .build()
    )


def run_demo(out: Optional[TextIO] = None, timer: Optional[ExamTimer] = None) -> ExamSession:
    """시연 시퀀스를 out(기본 표준 출력)에 출력하고 마지막 세션을 반환."""
    exam = build_demo_exam()
    session = ExamSession()
    timer = timer or ExamTimer.for_session(session)

    print(f"남은 시간: {timer.format_remaining()}", file=out)

    exam.display(0, out)

    print("\n이터레이터로 순회:", file=out)
    for component in exam.create_iterator():
        component.display(0, out)

    session.answer_question("4")
    session.answer_question("10")  # 의도적인 오답

    print("\n[상태 저장 중...]", file=out)
    checkpoint = session.save()

    print("[시스템 장애... 복원 중...]", file=out)
    session.restore(checkpoint)
    print(f"복원된 인덱스: {session.current_index}", file=out)

    print("복원된 답안:", file=out)
    for i in range(session.current_index):
        print(session.get_answer(i), file=out)

    score = calculate_score(exam.iter_questions(), session.answers)
    result = "합격" if is_passed(score) else "불합격"
    print(f"\n점수: {score}점 ({result})", file=out)
    return session


def main() -> int:
    _setup_logging()
    logger.info("=== Quiz System Demo Started ===")
    run_demo()
    logger.info("=== Quiz System Demo Finished ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
