"""
자막 파서 설정 모듈
환경 변수(SUBTITLES_ 접두사) 및 파서 기본값을 관리합니다.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    파서 설정 클래스
    환경 변수에서 값을 로드하며, 기본값을 제공합니다.
    """

    # ----------------
    # SubRip 설정
    # ----------------
    # 마지막 블록 뒤에 빈 줄이 없어도 큐로 인정 (False: 기존 동작, 마지막 큐 유실)
    SUBRIP_FLUSH_TRAILING_BLOCK: bool = True

    # ----------------
    # 공통 파싱 정책
    # ----------------
    # True: 시작/종료 타임코드가 모두 유효해야 큐로 인정
    # False: 둘 중 하나만 유효해도 큐 유지 (기존 동작)
    REQUIRE_BOTH_TIMECODES: bool = False

    # 스트림 디코딩 인코딩 (utf-8-sig: BOM 제거)
    STREAM_ENCODING: str = "utf-8-sig"

    # 비동기 파싱용 워커 스레드 수
    ASYNC_MAX_WORKERS: int = 2

    LOG_LEVEL: str = "INFO"

    class Config:
        env_prefix = "SUBTITLES_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다.
    lru_cache를 사용하여 한 번만 로드합니다.
    """
    return Settings()
