"""로깅 설정 테스트.

Logging configuration tests — one-shot root logger setup.
"""

import logging
from pathlib import Path

import pytest

from app.utils.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    """루트 로거를 제공하고 테스트 후 핸들러와 레벨을 복원합니다."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    """setup_logging 테스트."""

    def test_console_and_file(self, bare_root_logger, tmp_path: Path):
        """콘솔과 파일 핸들러를 추가하고 레벨을 설정."""
        bare_root_logger.handlers = []
        logfile = tmp_path / "logs" / "app.log"
        setup_logging("debug", str(logfile))

        assert bare_root_logger.level == logging.DEBUG
        assert len(bare_root_logger.handlers) == 2
        logging.getLogger("app.test").info("hello")
        for handler in bare_root_logger.handlers:
            handler.flush()
        assert "[INFO] app.test: hello" in logfile.read_text(encoding="utf-8")

    def test_configures_once(self, bare_root_logger):
        """두 번째 호출은 아무것도 하지 않음."""
        bare_root_logger.handlers = []
        setup_logging("INFO", "")
        setup_logging("DEBUG", "")
        assert len(bare_root_logger.handlers) == 1
        assert bare_root_logger.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self, bare_root_logger):
        """알 수 없는 레벨은 INFO."""
        bare_root_logger.handlers = []
        setup_logging("chatty", "")
        assert bare_root_logger.level == logging.INFO
