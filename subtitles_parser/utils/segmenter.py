"""
블록 분할 모듈
자막 문서를 빈 줄 기준으로 큐 후보 블록들로 나눕니다.
블록 내부 구조는 여기서 검사하지 않습니다.
"""

import re


# WebVTT는 CRLF / LF 모두 허용
_WEBVTT_LINE_BREAK = re.compile(r"\r\n|\n")


def split_subrip_blocks(text: str, flush_trailing: bool = False) -> list[str]:
    """
    SubRip 문서를 블록 리스트로 분할합니다.

    - 줄 구분은 "\\n" 만 인식합니다 (CRLF 문서는 "\\r"이 남아 분할되지 않을 수 있음)
    - 완전히 빈 줄마다 현재 버퍼를 블록으로 닫습니다 (빈 버퍼도 포함)
    - 각 줄은 "\\n" 종결자를 붙여 버퍼에 쌓습니다

    Args:
        text: SubRip 문서 전체 내용
        flush_trailing: 빈 줄로 닫히지 않은 마지막 블록 포함 여부
                        (False: 기존 동작, 마지막 큐 유실)

    Returns:
        블록 문자열 리스트 (문서 순서)
    """
    blocks: list[str] = []
    buffer: list[str] = []

    for line in text.split("\n"):
        if line == "":
            blocks.append("".join(buffer))
            buffer = []
        else:
            buffer.append(line + "\n")

    if flush_trailing and buffer:
        blocks.append("".join(buffer))

    return blocks


def split_webvtt_blocks(text: str) -> list[str]:
    """
    WebVTT 문서를 블록 리스트로 분할합니다.

    - 공백만 있는 줄도 빈 줄로 취급합니다
    - 마지막 버퍼는 항상 블록으로 포함합니다
    - 빈 블록은 결과에서 제거합니다

    Args:
        text: WebVTT 문서 전체 내용

    Returns:
        비어있지 않은 블록 문자열 리스트 (문서 순서)
    """
    blocks: list[str] = []
    buffer: list[str] = []

    for line in _WEBVTT_LINE_BREAK.split(text):
        if not line.strip():
            blocks.append("".join(buffer))
            buffer = []
        else:
            buffer.append(line + "\n")

    if buffer:
        blocks.append("".join(buffer))

    return [block for block in blocks if block]
