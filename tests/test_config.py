from quiz_system import config
from quiz_system.models import exam_tree, session_state


def test_defaults():
    assert config.EXAM_DURATION_SECONDS == 3600
    assert config.INDENT == "  "
    assert config.NO_ANSWER_PLACEHOLDER == "(응답 없음)"


def test_models_read_package_config():
    assert exam_tree.config is config
    assert session_state.config is config
