"""
WebVTT(.vtt) 파싱 모듈

블록 구조:
    intro                               ← 큐 식별자 (선택)
    00:01.000 --> 00:04.000 align:start ← 타임코드 줄 (시 생략 가능, 큐 설정 무시)
    Hello world                         ← 텍스트

"WEBVTT" 헤더 블록, NOTE / STYLE 블록은 큐를 만들지 않습니다.
"""

import re
from typing import Any, Optional

from subtitles_parser.models.subtitle import Cue, SubtitleFormat, Subtitles
from subtitles_parser.modules.reader import SubtitleParser
from subtitles_parser.utils.segmenter import split_webvtt_blocks
from subtitles_parser.utils.timecodes import accept_timecodes, parse_webvtt_timecode


# 타임코드 줄: START --> END [큐 설정...]
WEBVTT_TIMECODE_LINE = re.compile(r"^([0-9.:]+)\s+-->\s+([0-9.:]+)(?:\s.*)?$")

WEBVTT_HEADER = "WEBVTT"


def build_webvtt_cue(block: str, require_both_timecodes: bool = False) -> Optional[Cue]:
    """
    WebVTT 블록 하나를 큐로 변환합니다.

    타임코드 줄 위치는 고정되지 않으며, 처음 매칭되는 줄을 사용합니다.

    Args:
        block: 줄마다 "\\n" 종결자가 붙은 블록 텍스트
        require_both_timecodes: 시작/종료 모두 유효해야 하는지 여부

    Returns:
        Cue 또는 None (헤더 블록, 타임코드 줄 없음, 타임코드가 유효하지 않은 경우)
    """
    # 헤더 블록 (대소문자 무시)
    if WEBVTT_HEADER in block.upper():
        return None

    lines = block.split("\n")

    for index, line in enumerate(lines):
        match = WEBVTT_TIMECODE_LINE.match(line)
        if match:
            break
    else:
        return None

    start = parse_webvtt_timecode(match.group(1))
    end = parse_webvtt_timecode(match.group(2))
    if not accept_timecodes(start, end, require_both_timecodes):
        return None

    text = "\n".join(line for line in lines[index + 1:] if line)
    return Cue(start=start, end=end, text=text)


class WebVttParser(SubtitleParser):
    """WebVTT 문서 파서"""

    format = SubtitleFormat.WEBVTT

    def split_blocks(self, text: str) -> list[str]:
        return split_webvtt_blocks(text)

    def build_cue(self, block: str) -> Optional[Cue]:
        return build_webvtt_cue(block, self.require_both_timecodes)


# 편의 함수

def parse_vtt(text: str, **options) -> Subtitles:
    return WebVttParser(**options).parse(text)


def parse_vtt_stream(stream: Any, **options) -> Subtitles:
    return WebVttParser(**options).parse_stream(stream)


async def parse_vtt_async(text: str, **options) -> Subtitles:
    return await WebVttParser(**options).parse_async(text)


async def parse_vtt_stream_async(stream: Any, **options) -> Subtitles:
    return await WebVttParser(**options).parse_stream_async(stream)
