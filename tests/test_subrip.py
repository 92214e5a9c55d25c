"""
SubRip 파싱 테스트
subrip.py 모듈의 파이프라인을 테스트합니다.
"""

import pytest

from subtitles_parser.models.subtitle import SubtitleFormat
from subtitles_parser.modules.subrip import (
    SubRipParser,
    build_subrip_cue,
    parse_srt,
)


SAMPLE_SRT = """1
00:00:01,000 --> 00:00:04,000
Hello, world!

2
00:00:05,000 --> 00:00:08,000
This is a test.
Second line

"""


class TestBuildSubripCue:
    """build_subrip_cue 함수 테스트"""

    def test_valid_block(self):
        """정상 블록 테스트"""
        cue = build_subrip_cue("1\n00:00:01,000 --> 00:00:02,000\nHello\n")

        assert cue is not None
        assert cue.start == 1000.0
        assert cue.end == 2000.0
        assert cue.text == "Hello"

    def test_block_without_text_dropped(self):
        """순번 + 타임코드만 있는 블록은 버림"""
        assert build_subrip_cue("1\n00:00:01,000 --> 00:00:02,000\n") is None

    def test_timecode_must_be_second_line(self):
        """타임코드 줄은 두 번째 줄이어야 함"""
        assert build_subrip_cue("00:00:01,000 --> 00:00:02,000\nHello\nWorld\n") is None

    def test_invalid_timecode_line(self):
        """타임코드 줄이 아닌 경우 버림"""
        assert build_subrip_cue("1\nnot a timecode\nHello\n") is None

    def test_trailing_comma_noise(self):
        """타임코드 줄 뒤의 ', ' 잡음 허용"""
        cue = build_subrip_cue("1\n00:00:01,000 --> 00:00:02,000 ,,\nHello\n")

        assert cue is not None
        assert cue.end == 2000.0

    def test_one_invalid_timecode_kept(self):
        """한쪽 타임코드만 유효해도 유지 (기본 정책)"""
        cue = build_subrip_cue("1\n00:00:01,000 --> 99:99:99,999\nHello\n")

        assert cue is not None
        assert cue.start == 1000.0
        assert cue.end is None

    def test_one_invalid_timecode_strict(self):
        """엄격 정책에서는 버림"""
        block = "1\n00:00:01,000 --> 99:99:99,999\nHello\n"

        assert build_subrip_cue(block, require_both_timecodes=True) is None

    def test_both_invalid_timecodes(self):
        """두 타임코드 모두 실패하면 버림"""
        assert build_subrip_cue("1\n99:00:00,000 --> 99:00:00,000\nHello\n") is None


class TestSubRipParser:
    """SubRipParser 테스트"""

    def test_end_to_end(self):
        """기본 문서 파싱 테스트"""
        result = parse_srt("1\n00:00:01,000 --> 00:00:02,000\nHello world\n\n")

        assert result.format == SubtitleFormat.SUBRIP
        assert len(result) == 1
        assert result[0].start == 1000.0
        assert result[0].end == 2000.0
        assert result[0].text == "Hello world"

    def test_multiple_cues(self):
        """여러 큐 및 여러 줄 텍스트 테스트"""
        result = parse_srt(SAMPLE_SRT)

        assert len(result) == 2
        assert result[0].text == "Hello, world!"
        assert result[1].start == 5000.0
        assert result[1].end == 8000.0
        assert result[1].text == "This is a test.\nSecond line"

    def test_malformed_blocks_skipped(self):
        """깨진 블록은 건너뛰고 나머지는 유지"""
        text = (
            "1\n00:00:01,000 --> 00:00:02,000\nFirst\n\n"
            "garbage\n\n"
            "2\nno timecode here\nSecond\n\n"
            "3\n00:00:03,000 --> 00:00:04,000\nThird\n\n"
        )
        result = parse_srt(text)

        assert [cue.text for cue in result] == ["First", "Third"]
        assert result.stats.blocks == 4
        assert result.stats.skipped == 2
        assert result.stats.parsed == 2

    def test_duplicates_preserved(self):
        """중복/겹치는 큐도 그대로 유지"""
        block = "1\n00:00:01,000 --> 00:00:02,000\nSame\n\n"
        result = parse_srt(block * 2)

        assert len(result) == 2
        assert result[0] == result[1]

    def test_trailing_block_legacy(self):
        """기존 동작: 마지막 빈 줄 없으면 마지막 큐 유실"""
        text = "1\n00:00:01,000 --> 00:00:02,000\nHello"
        parser = SubRipParser(flush_trailing_block=False)

        assert len(parser.parse(text)) == 0

    def test_trailing_block_flushed(self):
        """flush 옵션: 마지막 큐 유지"""
        text = "1\n00:00:01,000 --> 00:00:02,000\nHello"
        parser = SubRipParser(flush_trailing_block=True)

        result = parser.parse(text)
        assert len(result) == 1
        assert result[0].text == "Hello"

    def test_require_both_timecodes(self):
        """엄격 정책 옵션 테스트"""
        text = "1\n00:00:01,000 --> 99:99:99,999\nHello\n\n"

        assert len(SubRipParser(require_both_timecodes=False).parse(text)) == 1
        assert len(SubRipParser(require_both_timecodes=True).parse(text)) == 0

    def test_crlf_document_not_segmented(self):
        """CRLF 문서는 블록이 나뉘지 않아 첫 큐만 남음"""
        text = (
            "1\r\n00:00:01,000 --> 00:00:02,000\r\nFirst\r\n\r\n"
            "2\r\n00:00:03,000 --> 00:00:04,000\r\nSecond\r\n\r\n"
        )
        result = parse_srt(text)

        assert len(result) == 1
        assert result[0].start == 1000.0

    def test_idempotent(self):
        """같은 문서를 두 번 파싱하면 같은 결과"""
        assert parse_srt(SAMPLE_SRT) == parse_srt(SAMPLE_SRT)

    def test_empty_document(self):
        """빈 문서 / 전부 깨진 문서 테스트"""
        empty = parse_srt("")
        broken = parse_srt("garbage\n\nmore garbage\n\n")

        assert len(empty) == 0
        assert empty.stats.blocks == 0
        assert len(broken) == 0
        assert broken.stats.skipped == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
