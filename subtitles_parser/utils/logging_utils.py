"""
로깅 유틸리티 모듈
패키지 로거(subtitles_parser) 설정을 한 곳에서 관리합니다.
"""

from __future__ import annotations

import logging
from typing import Optional

from subtitles_parser.config import get_settings

PACKAGE_LOGGER = "subtitles_parser"

_CONFIGURED = False

# 라이브러리는 import 시점에 루트 로거를 건드리지 않음
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: Optional[str] = None) -> None:
    """
    패키지 로거를 한 번만 설정합니다.

    Args:
        level: 로그 레벨 이름 (예: "INFO", "DEBUG").
               생략 시 SUBTITLES_LOG_LEVEL 설정값, 없으면 INFO
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_level_name = (level or get_settings().LOG_LEVEL or "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.addHandler(handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """모듈 로거 반환"""
    return logging.getLogger(name)
