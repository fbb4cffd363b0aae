"""
모드 식별 모듈

명령줄 인자에서 모드 디렉토리를 찾고, 모드 이름과 패키지 인덱스를 결정합니다.
모드 디렉토리는 명령줄로만 받으며 대화형으로 묻지 않습니다.
"""

import logging
import os
from pathlib import PureWindowsPath
from typing import Optional, Sequence

from ..localization.messages import get_message
from ..utils.console import Console, parse_int
from .constants import FORCED_INDEX_FLAG, INDEX_ARGUMENT_PREFIX
from .errors import InvalidPathError, MissingInputError

logger = logging.getLogger(__name__)


def clean_path_argument(raw: str) -> str:
    """명령줄 토큰의 앞뒤 공백과 따옴표를 제거합니다."""
    return raw.strip().strip('"')


def derive_mod_name(mod_directory: str) -> str:
    """
    모드 디렉토리의 마지막 경로 요소를 모드 이름으로 반환합니다.

    끝에 붙은 구분자나 감싼 따옴표와 관계없이 같은 이름이 나옵니다.
    "/" 와 "\\" 모두 구분자로 취급합니다.
    """
    cleaned = clean_path_argument(mod_directory)
    name = PureWindowsPath(cleaned.rstrip("/\\")).name
    # 드라이브 루트처럼 마지막 요소가 없으면 경로 자체를 이름으로 사용
    return name or cleaned


def find_mod_directory_argument(args: Sequence[str]) -> Optional[str]:
    """플래그(-로 시작)가 아닌 첫 번째 인자를 반환합니다."""
    for argument in args:
        if not argument.startswith("-"):
            return argument
    return None


def resolve_mod_directory(args: Sequence[str]) -> str:
    """
    명령줄 인자에서 모드 디렉토리를 찾아 검증합니다.

    Raises:
        MissingInputError: 모드 디렉토리 인자가 없는 경우
        InvalidPathError: 디렉토리가 존재하지 않는 경우
    """
    argument = find_mod_directory_argument(args)
    if argument is None:
        raise MissingInputError()

    mod_directory = clean_path_argument(argument)
    if not mod_directory or not os.path.isdir(mod_directory):
        raise InvalidPathError(mod_directory)

    logger.debug(f"모드 디렉토리: {mod_directory}")
    return mod_directory


def find_forced_index(args: Sequence[str]) -> int:
    """
    -index=<N> 인자에서 인덱스를 찾습니다.

    해석 가능한 첫 번째 값을 사용하며, 없으면 0을 반환합니다.
    """
    for argument in args:
        if argument.startswith(INDEX_ARGUMENT_PREFIX):
            forced_index = parse_int(argument[len(INDEX_ARGUMENT_PREFIX) :])
            if forced_index is not None:
                return forced_index

    # 값이 없거나 잘못된 경우에도 실패하지 않고 0을 사용
    logger.warning(get_message("identity.index_fallback"))
    return 0


def derive_index(args: Sequence[str], console: Console) -> int:
    """
    모드 패키지 인덱스를 결정합니다.

    -forcedIndex 플래그가 있으면 -index=<N> 값을 사용하고,
    없으면 정수가 입력될 때까지 사용자에게 묻습니다.
    """
    if FORCED_INDEX_FLAG in args:
        return find_forced_index(args)

    return console.prompt_until(
        get_message("identity.index_prompt"), parse_int, inline=True
    )
