"""
자막 읽기 공통 모듈

- 바이트 스트림 → 텍스트 디코딩 (Text Acquisition)
- 비동기 진입점용 워커 스레드 실행
- 포맷별 파이프라인의 공통 흐름 (블록 분할 → 큐 생성 → 컬렉션)
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, TypeVar

from subtitles_parser.config import get_settings
from subtitles_parser.models.subtitle import (
    Cue,
    ParseStats,
    SubtitleFormat,
    Subtitles,
)
from subtitles_parser.utils.logging_utils import get_logger

log = get_logger(__name__)

T = TypeVar("T")

# 비동기 파싱 전용 워커
_executor = ThreadPoolExecutor(max_workers=get_settings().ASYNC_MAX_WORKERS)


class SubtitleDecodeError(ValueError):
    """자막 스트림을 텍스트로 디코딩하지 못했을 때 발생하는 예외"""
    pass


def read_stream(stream: Any, encoding: Optional[str] = None) -> str:
    """
    스트림 전체를 읽어 텍스트로 디코딩합니다.

    기본 인코딩은 utf-8-sig 이며 UTF-8 BOM 은 제거됩니다.
    read()가 이미 str 을 반환하면 그대로 사용합니다.

    Args:
        stream: read() 를 가진 바이너리(또는 텍스트) 스트림
        encoding: 디코딩 인코딩 (기본값: 설정의 STREAM_ENCODING)

    Returns:
        디코딩된 문서 텍스트

    Raises:
        SubtitleDecodeError: 유효하지 않은 바이트 시퀀스
    """
    encoding = encoding or get_settings().STREAM_ENCODING
    data = stream.read()

    if isinstance(data, str):
        return data

    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as e:
        raise SubtitleDecodeError(f"자막 스트림 디코딩 실패 ({encoding}): {e}") from e


async def run_in_worker(func: Callable[..., T], *args: Any) -> T:
    """동기 함수를 워커 스레드에서 실행 (이벤트 루프 블로킹 방지)"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor, func, *args)


class SubtitleParser:
    """
    포맷별 자막 파서의 기본 클래스

    하위 클래스는 split_blocks / build_cue 만 구현합니다.
    인스턴스는 설정값만 가지며 파싱 간 공유 상태가 없습니다.
    """

    format: SubtitleFormat

    def __init__(
        self,
        require_both_timecodes: Optional[bool] = None,
        encoding: Optional[str] = None
    ):
        """
        Args:
            require_both_timecodes: 시작/종료 모두 유효해야 큐로 인정할지 여부
                                    (기본값: 설정의 REQUIRE_BOTH_TIMECODES)
            encoding: 스트림 디코딩 인코딩 (기본값: 설정의 STREAM_ENCODING)
        """
        settings = get_settings()
        if require_both_timecodes is None:
            require_both_timecodes = settings.REQUIRE_BOTH_TIMECODES
        self.require_both_timecodes = require_both_timecodes
        self.encoding = encoding or settings.STREAM_ENCODING

    def split_blocks(self, text: str) -> list[str]:
        raise NotImplementedError

    def build_cue(self, block: str) -> Optional[Cue]:
        raise NotImplementedError

    def parse(self, text: str) -> Subtitles:
        """
        문서 텍스트를 파싱하여 큐 컬렉션을 반환합니다.
        깨진 블록은 건너뛰며 예외를 던지지 않습니다.
        """
        # 빈 블록은 후보가 아님
        blocks = [block for block in self.split_blocks(text) if block]

        cues: list[Cue] = []
        for block in blocks:
            cue = self.build_cue(block)
            if cue is not None:
                cues.append(cue)

        stats = ParseStats(blocks=len(blocks), skipped=len(blocks) - len(cues))
        log.debug(
            "%s 파싱: blocks=%d, cues=%d, skipped=%d",
            self.format.value, stats.blocks, len(cues), stats.skipped
        )

        return Subtitles(format=self.format, cues=cues, stats=stats)

    def parse_stream(self, stream: Any) -> Subtitles:
        """스트림을 디코딩한 뒤 parse() 에 위임"""
        return self.parse(read_stream(stream, self.encoding))

    async def parse_async(self, text: str) -> Subtitles:
        """비동기 버전 (결과는 parse() 와 동일)"""
        return await run_in_worker(self.parse, text)

    async def parse_stream_async(self, stream: Any) -> Subtitles:
        """비동기 버전 (결과는 parse_stream() 과 동일)"""
        return await run_in_worker(self.parse_stream, stream)
