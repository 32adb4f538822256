import os

# 기본 디렉토리 설정
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# 경로 설정
LOG_FILE = os.getenv("QUIZ_LOG_FILE", os.path.join(BASE_DIR, "launch.log"))

# 시험 설정
EXAM_DURATION_SECONDS = int(os.getenv("EXAM_DURATION_SECONDS", "3600"))  # 1시간
WARNING_THRESHOLD_SECONDS = 600   # 10분 미만이면 경고
PASS_SCORE = float(os.getenv("EXAM_PASS_SCORE", "60.0"))

# 출력 설정
INDENT = "  "                     # display() 깊이 1단계당 들여쓰기
NO_ANSWER_PLACEHOLDER = "(응답 없음)"
OTHER_SECTION_NAME = "기타"        # 섹션 밖(루트 직속) 문제의 집계 이름
