"""
자막 큐 데이터 모델
Pydantic을 사용하여 파싱 결과(큐, 큐 컬렉션) 구조를 정의합니다.
"""

from pydantic import BaseModel, Field
from typing import Iterator, Optional
from enum import Enum


class SubtitleFormat(str, Enum):
    """지원하는 자막 포맷 열거형"""
    SUBRIP = "srt"   # SubRip (.srt)
    WEBVTT = "vtt"   # WebVTT (.vtt)


class Cue(BaseModel):
    """
    개별 자막 큐 모델
    시간은 문서 시작 기준 밀리초 단위입니다.

    start/end 중 하나만 파싱에 실패한 블록은 관대한 정책에서 유지되며,
    이때 실패한 쪽은 None 입니다. 시작/종료 순서는 검사하지 않습니다.
    """
    start: Optional[float] = Field(default=None, ge=0, description="시작 시간 (ms)")
    end: Optional[float] = Field(default=None, ge=0, description="종료 시간 (ms)")
    text: str = Field(default="", description="자막 텍스트 (줄바꿈 '\\n' 으로 연결)")

    @property
    def start_seconds(self) -> Optional[float]:
        """시작 시간 (초)"""
        return None if self.start is None else self.start / 1000.0

    @property
    def end_seconds(self) -> Optional[float]:
        """종료 시간 (초)"""
        return None if self.end is None else self.end / 1000.0

    @property
    def duration(self) -> Optional[float]:
        """자막 표시 시간 (ms), 한쪽 시간이 없으면 None"""
        if self.start is None or self.end is None:
            return None
        return self.end - self.start

    @property
    def lines(self) -> list[str]:
        """텍스트 줄 목록"""
        return self.text.split("\n") if self.text else []


class ParseStats(BaseModel):
    """
    파싱 진단 정보
    "빈 파일"과 "전부 깨진 파일"을 구분할 수 있게 해줍니다.
    """
    blocks: int = Field(default=0, ge=0, description="분할된 블록 수")
    skipped: int = Field(default=0, ge=0, description="버려진 블록 수")

    @property
    def parsed(self) -> int:
        """큐로 변환된 블록 수"""
        return self.blocks - self.skipped


class Subtitles(BaseModel):
    """
    큐 컬렉션 모델
    문서 순서대로 큐를 담습니다. 중복/겹치는 큐도 그대로 유지합니다.
    """
    format: SubtitleFormat = Field(..., description="원본 자막 포맷")
    cues: list[Cue] = Field(default_factory=list, description="자막 큐 목록")
    stats: ParseStats = Field(default_factory=ParseStats, description="파싱 진단 정보")

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self) -> Iterator[Cue]:
        return iter(self.cues)

    def __getitem__(self, index):
        return self.cues[index]

    @property
    def full_text(self) -> str:
        """전체 자막 텍스트 (줄바꿈으로 연결)"""
        return "\n".join(cue.text for cue in self.cues)
