"""
패키징 과정에서 발생하는 오류 타입들

모든 종료 오류는 UnrealPakError를 상속하며, 메인 진입점에서 한 줄짜리
메시지로 출력된 뒤 사용자 확인을 기다립니다.
"""

from pathlib import Path
from typing import Union

from ..localization.messages import get_message


class UnrealPakError(Exception):
    """UnrealPak 패키징 오류의 기본 클래스"""


class MissingInputError(UnrealPakError):
    """명령줄 인자로 모드 디렉토리가 주어지지 않은 경우"""

    def __init__(self):
        super().__init__(get_message("error.missing_mod_directory"))


class InvalidPathError(UnrealPakError):
    """존재하지 않는 경로가 주어진 경우"""

    def __init__(self, path: Union[str, Path], message: str = None):
        self.path = path
        super().__init__(
            message or get_message("error.mod_directory_not_found", path=path)
        )


class PackagerNotFoundError(InvalidPathError):
    """엔진 디렉토리 아래에 UnrealPak.exe가 없는 경우"""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, get_message("error.packager_not_found", path=path))


class PackagerLaunchError(UnrealPakError):
    """UnrealPak.exe 프로세스를 시작할 수 없는 경우"""

    def __init__(self, path: Union[str, Path], error: Exception):
        self.path = path
        self.error = error
        super().__init__(get_message("error.packager_launch", error=error))
