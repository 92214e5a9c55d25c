"""
포맷 선택 모듈
포맷 이름(또는 자동 감지)에 따라 알맞은 파서로 위임합니다.
"""

import inspect
import re
from typing import Any, Optional, Union

from subtitles_parser.models.subtitle import SubtitleFormat, Subtitles
from subtitles_parser.modules.reader import SubtitleParser, read_stream
from subtitles_parser.modules.subrip import SubRipParser
from subtitles_parser.modules.webvtt import WebVttParser


_PARSERS: dict[SubtitleFormat, type[SubtitleParser]] = {
    SubtitleFormat.SUBRIP: SubRipParser,
    SubtitleFormat.WEBVTT: WebVttParser,
}

# SubRip 타임코드 줄 (콤마 소수점)
_SUBRIP_ARROW = re.compile(r"^\s*[0-9]+:[0-9]+:[0-9]+,[0-9]+\s+-->", re.MULTILINE)


def resolve_format(fmt: Union[SubtitleFormat, str]) -> SubtitleFormat:
    """
    포맷 값을 SubtitleFormat 으로 변환합니다.
    "srt", ".vtt", "SRT" 등을 허용합니다.

    Raises:
        ValueError: 지원하지 않는 포맷
    """
    if isinstance(fmt, SubtitleFormat):
        return fmt
    try:
        return SubtitleFormat(str(fmt).strip().lower().lstrip("."))
    except ValueError:
        allowed = ", ".join(f.value for f in SubtitleFormat)
        raise ValueError(f"지원하지 않는 자막 포맷 '{fmt}'. 허용: {allowed}")


def detect_format(text: str) -> Optional[SubtitleFormat]:
    """
    문서 내용으로 포맷을 추정합니다.

    - 첫 번째 비어있지 않은 줄이 "WEBVTT"로 시작 → WEBVTT
    - 콤마 소수점 타임코드 줄이 있음 → SUBRIP
    - 그 외 → None
    """
    for line in text.splitlines():
        line = line.lstrip("\ufeff").strip()
        if not line:
            continue
        if line.upper().startswith("WEBVTT"):
            return SubtitleFormat.WEBVTT
        break

    if _SUBRIP_ARROW.search(text):
        return SubtitleFormat.SUBRIP

    return None


def get_parser(fmt: Union[SubtitleFormat, str], **options) -> SubtitleParser:
    """
    포맷에 맞는 파서 인스턴스 생성

    자동 감지 시 호출자는 포맷을 미리 알 수 없으므로,
    다른 포맷 전용 옵션(예: WebVTT 의 flush_trailing_block)은 무시합니다.
    어느 파서도 받지 않는 옵션은 그대로 넘겨 TypeError 로 알립니다.
    """
    parser_cls = _PARSERS[resolve_format(fmt)]
    accepted = _init_options(parser_cls)
    foreign = set().union(*(_init_options(cls) for cls in _PARSERS.values())) - accepted
    return parser_cls(**{key: value for key, value in options.items() if key not in foreign})


def _init_options(parser_cls: type[SubtitleParser]) -> set[str]:
    return set(inspect.signature(parser_cls.__init__).parameters) - {"self"}


def parse(text: str, fmt: Union[SubtitleFormat, str, None] = None, **options) -> Subtitles:
    """
    자막 문서를 파싱합니다.

    Args:
        text: 문서 전체 내용
        fmt: 자막 포맷 (None 이면 자동 감지, 감지 실패 시 SubRip)
        **options: 파서 옵션 (require_both_timecodes 등)

    Returns:
        Subtitles 큐 컬렉션
    """
    if fmt is None:
        fmt = detect_format(text) or SubtitleFormat.SUBRIP
    return get_parser(fmt, **options).parse(text)


def parse_stream(
    stream: Any,
    fmt: Union[SubtitleFormat, str, None] = None,
    encoding: Optional[str] = None,
    **options
) -> Subtitles:
    """스트림을 디코딩한 뒤 parse() 에 위임"""
    return parse(read_stream(stream, encoding), fmt, encoding=encoding, **options)
