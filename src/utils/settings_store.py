"""
설정 값 저장소 모듈

엔진 설치 경로, 출력 디렉토리, 패키징 인자를 작업 디렉토리의 작은 텍스트 파일에
저장하고 읽습니다. 처음 실행할 때는 사용자에게 값을 묻고 저장하며,
이후 실행에서는 저장된 값을 검증 없이 그대로 사용합니다.
"""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import aiofiles

from ..localization.messages import get_message
from ..pak_packaging.constants import (
    DEFAULT_PACKAGING_ARGUMENTS,
    ENGINE_DIRECTORY_FILE,
    OUTPUT_DIRECTORY_FILE,
    PACKAGING_ARGUMENTS_FILE,
)
from .console import Console

logger = logging.getLogger(__name__)

ENGINE_PATH = "engine_path"
OUTPUT_DIRECTORY = "output_directory"
PACKAGING_FLAGS = "packaging_flags"


def existing_directory(value: str) -> Optional[str]:
    """존재하는 디렉토리이면 입력값을 그대로, 아니면 None을 반환합니다."""
    if value and os.path.isdir(value):
        return value
    return None


def created_directory(value: str) -> Optional[str]:
    """디렉토리가 없으면 생성을 시도한 뒤 존재 여부로 검증합니다."""
    if value and not os.path.isdir(value):
        try:
            os.makedirs(value)
        except OSError as e:
            # 생성 실패는 다시 묻는 것으로 처리
            logger.debug(f"디렉토리 생성 실패 ({value}): {e}")
    return existing_directory(value)


@dataclass(frozen=True)
class SettingDefinition:
    """설정 하나의 저장 파일, 입력 방식, 기본값 정의"""

    file_name: str
    prompt_key: Optional[str] = None
    validator: Optional[Callable[[str], Optional[str]]] = None
    default: Optional[str] = None


SETTING_DEFINITIONS: Dict[str, SettingDefinition] = {
    ENGINE_PATH: SettingDefinition(
        file_name=ENGINE_DIRECTORY_FILE,
        prompt_key="settings.engine_prompt",
        validator=existing_directory,
    ),
    OUTPUT_DIRECTORY: SettingDefinition(
        file_name=OUTPUT_DIRECTORY_FILE,
        prompt_key="settings.output_prompt",
        validator=created_directory,
    ),
    PACKAGING_FLAGS: SettingDefinition(
        file_name=PACKAGING_ARGUMENTS_FILE,
        default=DEFAULT_PACKAGING_ARGUMENTS,
    ),
}


class SentinelBackend(ABC):
    """설정 파일 저장소 인터페이스"""

    @abstractmethod
    async def read(self, name: str) -> Optional[str]:
        """저장된 원본 문자열을 반환합니다. 없으면 None"""
        pass

    @abstractmethod
    async def write(self, name: str, value: str) -> None:
        pass


class FileSentinelBackend(SentinelBackend):
    """디렉토리 안의 텍스트 파일에 설정을 저장하는 백엔드"""

    def __init__(self, base_dir: Union[str, Path] = "."):
        self.base_dir = Path(base_dir)

    def _path(self, name: str) -> Path:
        return self.base_dir / name

    async def read(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.is_file():
            return None

        async with aiofiles.open(path, "r", encoding="utf-8-sig") as f:
            content = await f.read()

        logger.debug(f"설정 파일 로드: {path}")
        return content

    async def write(self, name: str, value: str) -> None:
        path = self._path(name)
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(value)

        logger.debug(f"설정 파일 저장: {path}")


class MemorySentinelBackend(SentinelBackend):
    """메모리에 설정을 보관하는 백엔드"""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values = dict(values or {})

    async def read(self, name: str) -> Optional[str]:
        return self.values.get(name)

    async def write(self, name: str, value: str) -> None:
        self.values[name] = value


class SettingsStore:
    """설정 값을 저장 파일, 사용자 입력, 기본값 순으로 결정하는 클래스"""

    def __init__(self, backend: SentinelBackend, console: Console):
        self.backend = backend
        self.console = console

    async def resolve(self, key: str) -> str:
        """
        설정 값 하나를 결정합니다.

        Args:
            key: ENGINE_PATH, OUTPUT_DIRECTORY, PACKAGING_FLAGS 중 하나

        Returns:
            저장된 값(앞뒤 공백 제거), 새로 입력받은 값 또는 기본값
        """
        definition = SETTING_DEFINITIONS[key]

        stored = await self.backend.read(definition.file_name)
        if stored is not None:
            return stored.strip()

        if definition.prompt_key is None:
            # 입력을 받지 않는 설정은 기본값만 사용하고 저장하지 않음
            return definition.default

        value = self.console.prompt_until(
            get_message(definition.prompt_key), definition.validator
        )

        await self.backend.write(definition.file_name, value)
        self.console.write_line(get_message("settings.stored", file=definition.file_name))
        logger.info(f"{key} 설정 저장 완료")

        return value

    async def get_engine_path(self) -> str:
        return await self.resolve(ENGINE_PATH)

    async def get_output_directory(self) -> str:
        return await self.resolve(OUTPUT_DIRECTORY)

    async def get_packaging_arguments(self) -> str:
        return await self.resolve(PACKAGING_FLAGS)
