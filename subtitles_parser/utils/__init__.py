"""
자막 파서 유틸리티 패키지
"""

from .timecodes import (
    parse_duration,
    parse_subrip_timecode,
    parse_webvtt_timecode,
    accept_timecodes,
)
from .segmenter import (
    split_subrip_blocks,
    split_webvtt_blocks,
)
from .logging_utils import (
    setup_logging,
    get_logger,
)

__all__ = [
    "parse_duration",
    "parse_subrip_timecode",
    "parse_webvtt_timecode",
    "accept_timecodes",
    "split_subrip_blocks",
    "split_webvtt_blocks",
    "setup_logging",
    "get_logger",
]
