"""
subtitles_parser - SubRip / WebVTT 자막 파서
자막 문서를 (시작, 종료, 텍스트) 큐 목록으로 변환합니다.
깨진 큐는 건너뛰며, 자막 내용 때문에 파싱이 실패하지 않습니다.
"""

from .models import (
    SubtitleFormat,
    Cue,
    ParseStats,
    Subtitles,
)
from .modules import (
    SubtitleDecodeError,
    SubRipParser,
    WebVttParser,
    parse,
    parse_stream,
    detect_format,
    parse_srt,
    parse_srt_stream,
    parse_srt_async,
    parse_srt_stream_async,
    parse_vtt,
    parse_vtt_stream,
    parse_vtt_async,
    parse_vtt_stream_async,
)
from .utils import (
    parse_subrip_timecode,
    parse_webvtt_timecode,
    setup_logging,
)

__version__ = "0.1.0"

__all__ = [
    "SubtitleFormat",
    "Cue",
    "ParseStats",
    "Subtitles",
    "SubtitleDecodeError",
    "SubRipParser",
    "WebVttParser",
    "parse",
    "parse_stream",
    "detect_format",
    "parse_srt",
    "parse_srt_stream",
    "parse_srt_async",
    "parse_srt_stream_async",
    "parse_vtt",
    "parse_vtt_stream",
    "parse_vtt_async",
    "parse_vtt_stream_async",
    "parse_subrip_timecode",
    "parse_webvtt_timecode",
    "setup_logging",
]
