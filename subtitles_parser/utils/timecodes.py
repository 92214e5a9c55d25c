"""
타임코드 파싱 모듈
SubRip / WebVTT 타임코드를 밀리초 단위로 변환합니다.

두 단계로 검증합니다:
1. 포맷별 정규식으로 모양 확인
2. 범용 duration 파서로 숫자 변환 (범위 검사 포함)

변환 실패는 예외 대신 None 으로 알립니다.
"""

import re
from typing import Optional


# [d.]hh:mm:ss[.fffffff] 또는 d:hh:mm:ss[.fffffff] (ASCII 숫자만)
_DURATION_PATTERN = re.compile(
    r"^\s*(?:([0-9]+)[.:])?([0-9]+):([0-9]+):([0-9]+)(?:\.([0-9]{1,7}))?\s*$"
)

# SubRip: HH:MM:SS,mmm (숫자 자리수는 검사하지 않음)
_SUBRIP_SHAPE = re.compile(r"[0-9]+:[0-9]+:[0-9]+,[0-9]+")

# WebVTT 시간 생략형: MM:SS.mmm
_WEBVTT_SHORT_SHAPE = re.compile(r"^\s*[0-9]+:[0-9]+(?:\.[0-9]+)?\s*$")

# 소수부는 최대 7자리 (100ns 단위 tick)
_TICKS_PER_MILLISECOND = 10_000
_FRACTION_DIGITS = 7


def parse_duration(value: str) -> Optional[float]:
    """
    범용 duration 문자열을 밀리초로 변환합니다.

    형식: [d.]hh:mm:ss[.fffffff] 또는 d:hh:mm:ss[.fffffff]
    - 시: 0-23, 분: 0-59, 초: 0-59
    - 소수부: 1-7자리

    Args:
        value: duration 문자열

    Returns:
        밀리초 (float) 또는 None (파싱 실패 시)
    """
    match = _DURATION_PATTERN.match(value)
    if not match:
        return None

    days, hours, minutes, seconds, fraction = match.groups()
    days = int(days) if days else 0
    hours = int(hours)
    minutes = int(minutes)
    seconds = int(seconds)

    if hours > 23 or minutes > 59 or seconds > 59:
        return None

    ticks = int(fraction.ljust(_FRACTION_DIGITS, "0")) if fraction else 0
    whole_seconds = ((days * 24 + hours) * 60 + minutes) * 60 + seconds

    return whole_seconds * 1000 + ticks / _TICKS_PER_MILLISECOND


def parse_subrip_timecode(timecode: str) -> Optional[float]:
    """
    SubRip 타임코드를 밀리초로 변환합니다.

    형식: HH:MM:SS,mmm

    Args:
        timecode: SubRip 타임코드 문자열

    Returns:
        밀리초 (float) 또는 None (모양/변환 실패 시)
    """
    if not _SUBRIP_SHAPE.search(timecode):
        return None

    return parse_duration(timecode.replace(",", "."))


def parse_webvtt_timecode(timecode: str) -> Optional[float]:
    """
    WebVTT 타임코드를 밀리초로 변환합니다.

    형식: HH:MM:SS.mmm 또는 MM:SS.mmm (시 생략 가능)

    Args:
        timecode: WebVTT 타임코드 문자열

    Returns:
        밀리초 (float) 또는 None (변환 실패 시)
    """
    # 시 생략형은 "00:"을 붙여 항상 시 필드가 있도록 정규화
    if _WEBVTT_SHORT_SHAPE.match(timecode):
        timecode = f"00:{timecode.strip()}"

    return parse_duration(timecode)


def accept_timecodes(
    start: Optional[float],
    end: Optional[float],
    require_both: bool = False
) -> bool:
    """
    블록 유지 여부를 결정합니다.

    기본값(require_both=False)은 둘 중 하나만 유효해도 유지하는 관대한 정책입니다.
    """
    if require_both:
        return start is not None and end is not None
    return start is not None or end is not None
