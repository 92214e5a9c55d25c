"""
자막 파서 모듈 패키지
포맷별 파이프라인과 공통 읽기 로직을 포함합니다.
"""

from .reader import (
    SubtitleParser,
    SubtitleDecodeError,
    read_stream,
    run_in_worker,
)

from .subrip import (
    SubRipParser,
    build_subrip_cue,
    parse_srt,
    parse_srt_stream,
    parse_srt_async,
    parse_srt_stream_async,
)

from .webvtt import (
    WebVttParser,
    build_webvtt_cue,
    parse_vtt,
    parse_vtt_stream,
    parse_vtt_async,
    parse_vtt_stream_async,
)

from .dispatch import (
    resolve_format,
    detect_format,
    get_parser,
    parse,
    parse_stream,
)

__all__ = [
    "SubtitleParser",
    "SubtitleDecodeError",
    "read_stream",
    "run_in_worker",
    "SubRipParser",
    "build_subrip_cue",
    "parse_srt",
    "parse_srt_stream",
    "parse_srt_async",
    "parse_srt_stream_async",
    "WebVttParser",
    "build_webvtt_cue",
    "parse_vtt",
    "parse_vtt_stream",
    "parse_vtt_async",
    "parse_vtt_stream_async",
    "resolve_format",
    "detect_format",
    "get_parser",
    "parse",
    "parse_stream",
]
