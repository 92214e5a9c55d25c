"""
자막 데이터 모델 패키지
"""

from .subtitle import (
    SubtitleFormat,
    Cue,
    ParseStats,
    Subtitles,
)

__all__ = [
    "SubtitleFormat",
    "Cue",
    "ParseStats",
    "Subtitles",
]
