"""로깅 설정 모듈.

Logging configuration for the application.
``setup_logging`` attaches a console handler (and optionally a file handler)
to the root logger exactly once. Modules log through
``logging.getLogger(__name__)``.

Nothing in the package calls ``setup_logging``; the process that hosts the
services calls it once at startup.
"""

import logging
from pathlib import Path

from app.config import settings

_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None, logfile: str | None = None) -> None:
    """루트 로거를 설정합니다.

    Configure the root logger. Does nothing when handlers are already attached.

    Args:
        level: 로그 레벨 이름, None이면 settings.LOG_LEVEL
               (Level name such as "DEBUG"; defaults to settings.LOG_LEVEL)
        logfile: 로그 파일 경로, None이면 settings.LOG_FILE
                 (Optional log file path; defaults to settings.LOG_FILE)
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name: str = (level or settings.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    logfile = logfile if logfile is not None else settings.LOG_FILE
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
