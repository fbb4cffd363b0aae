"""
콘솔 입출력 유틸리티 모듈

한 줄 단위의 블로킹 입출력과 잘못된 입력을 다시 묻는 프롬프트 루프를 제공합니다.
입력 소스와 출력 함수를 주입할 수 있어 실제 콘솔 없이도 테스트할 수 있습니다.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

import aiofiles

from ..localization.messages import get_message

logger = logging.getLogger(__name__)

T = TypeVar("T")

LineSource = Callable[[], str]
Writer = Callable[[str], None]

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# 32비트 부호 있는 정수 범위
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_int(text: Optional[str]) -> Optional[int]:
    """정수로 해석할 수 있으면 정수를, 아니면 None을 반환합니다."""
    if text is None or not _INTEGER_PATTERN.match(text):
        return None

    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def _write_stdout(text: str) -> None:
    print(text, end="", flush=True)


class Console:
    """한 줄 단위 콘솔 입출력 래퍼"""

    def __init__(self, line_source: LineSource = input, writer: Writer = None):
        """
        Args:
            line_source: 한 줄을 읽어 반환하는 함수 (기본값: input)
            writer: 문자열을 그대로 출력하는 함수 (기본값: 표준 출력)
        """
        self.line_source = line_source
        self.writer = writer or _write_stdout

    def write(self, text: str) -> None:
        self.writer(text)

    def write_line(self, text: str = "") -> None:
        self.writer(f"{text}\n")

    def read_line(self) -> str:
        return self.line_source()

    def prompt_until(
        self,
        prompt: str,
        parse: Callable[[str], Optional[T]],
        inline: bool = False,
    ) -> T:
        """
        parse가 None이 아닌 값을 돌려줄 때까지 반복해서 입력을 받습니다.

        Args:
            prompt: 매번 출력할 안내문
            parse: 입력 한 줄을 검증/변환하는 함수. 잘못된 입력이면 None
            inline: True이면 안내문 뒤에 줄바꿈을 하지 않습니다

        Returns:
            parse가 반환한 첫 번째 유효한 값
        """
        while True:
            if inline:
                self.write(prompt)
            else:
                self.write_line(prompt)

            line = self.read_line()
            value = parse(line)
            if value is not None:
                return value

            logger.debug(f"잘못된 입력, 다시 요청합니다: {line!r}")

    async def print_banner(self, banner_path: Union[str, Path]) -> None:
        """시작 메시지 파일이 있으면 그 내용을 그대로 출력합니다."""
        banner_path = Path(banner_path)
        if not banner_path.is_file():
            return

        async with aiofiles.open(banner_path, "r", encoding="utf-8-sig") as f:
            content = await f.read()

        lines = content.splitlines()
        self.write_line("\n".join(lines) + "\n")

    def wait_for_acknowledgment(self) -> None:
        """종료 전에 사용자가 ENTER를 누를 때까지 기다립니다."""
        self.write_line(get_message("app.press_enter"))
        try:
            self.read_line()
        except EOFError:
            # 입력 스트림이 닫혀 있으면 기다릴 대상이 없음
            logger.debug("입력 스트림이 닫혀 있어 확인 대기를 건너뜁니다")
