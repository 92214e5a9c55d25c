"""
SubRip(.srt) 파싱 모듈

블록 구조:
    1                               ← 순번
    00:00:01,000 --> 00:00:02,000   ← 타임코드 줄 (항상 두 번째 줄)
    Hello world                     ← 텍스트 (1줄 이상)
"""

import re
from typing import Any, Optional

from subtitles_parser.config import get_settings
from subtitles_parser.models.subtitle import Cue, SubtitleFormat, Subtitles
from subtitles_parser.modules.reader import SubtitleParser
from subtitles_parser.utils.segmenter import split_subrip_blocks
from subtitles_parser.utils.timecodes import accept_timecodes, parse_subrip_timecode


# 타임코드 줄: START --> END (뒤쪽 ", " 잡음 허용)
SUBRIP_TIMECODE_LINE = re.compile(r"^([0-9,:]+)\s+-->\s+([0-9,:]+)(?:\s,*)?$")

# 종결자 "\n" 때문에 마지막 빈 조각이 하나 더 생김 → 4조각 = 순번 + 타임코드 + 텍스트 1줄
_MIN_BLOCK_PIECES = 4


def build_subrip_cue(block: str, require_both_timecodes: bool = False) -> Optional[Cue]:
    """
    SubRip 블록 하나를 큐로 변환합니다.

    Args:
        block: 줄마다 "\\n" 종결자가 붙은 블록 텍스트
        require_both_timecodes: 시작/종료 모두 유효해야 하는지 여부

    Returns:
        Cue 또는 None (블록 모양이 맞지 않거나 타임코드가 유효하지 않은 경우)
    """
    lines = block.split("\n")
    if len(lines) < _MIN_BLOCK_PIECES:
        return None

    match = SUBRIP_TIMECODE_LINE.match(lines[1])
    if not match:
        return None

    start = parse_subrip_timecode(match.group(1))
    end = parse_subrip_timecode(match.group(2))
    if not accept_timecodes(start, end, require_both_timecodes):
        return None

    text = "\n".join(line for line in lines[2:] if line)
    return Cue(start=start, end=end, text=text)


class SubRipParser(SubtitleParser):
    """SubRip 문서 파서"""

    format = SubtitleFormat.SUBRIP

    def __init__(
        self,
        flush_trailing_block: Optional[bool] = None,
        require_both_timecodes: Optional[bool] = None,
        encoding: Optional[str] = None
    ):
        """
        Args:
            flush_trailing_block: 빈 줄로 끝나지 않는 마지막 블록 포함 여부
                                  (기본값: 설정의 SUBRIP_FLUSH_TRAILING_BLOCK)
            require_both_timecodes: 시작/종료 모두 유효해야 큐로 인정할지 여부
            encoding: 스트림 디코딩 인코딩
        """
        super().__init__(require_both_timecodes=require_both_timecodes, encoding=encoding)
        if flush_trailing_block is None:
            flush_trailing_block = get_settings().SUBRIP_FLUSH_TRAILING_BLOCK
        self.flush_trailing_block = flush_trailing_block

    def split_blocks(self, text: str) -> list[str]:
        return split_subrip_blocks(text, flush_trailing=self.flush_trailing_block)

    def build_cue(self, block: str) -> Optional[Cue]:
        return build_subrip_cue(block, self.require_both_timecodes)


# 편의 함수

def parse_srt(text: str, **options) -> Subtitles:
    return SubRipParser(**options).parse(text)


def parse_srt_stream(stream: Any, **options) -> Subtitles:
    return SubRipParser(**options).parse_stream(stream)


async def parse_srt_async(text: str, **options) -> Subtitles:
    return await SubRipParser(**options).parse_async(text)


async def parse_srt_stream_async(stream: Any, **options) -> Subtitles:
    return await SubRipParser(**options).parse_stream_async(stream)
