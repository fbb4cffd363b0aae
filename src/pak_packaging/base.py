"""
패키징 기본 클래스들
"""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_OUTPUT_FOLDER, PAK_FILE_TEMPLATE, UNREAL_PAK_RELATIVE_PATH
from .identity import derive_mod_name

logger = logging.getLogger(__name__)


@dataclass
class PackagingResult:
    """패키징 결과를 담는 데이터 클래스"""

    success: bool
    output_path: Optional[str] = None
    exit_code: Optional[int] = None


@dataclass(frozen=True)
class PackagingConfiguration:
    """한 번의 실행 동안 사용되는 설정 값들"""

    engine_path: str
    output_directory: str
    packaging_flags: str


def build_pak_file_path(
    output_directory: Optional[str], mod_index: int, mod_name: str
) -> str:
    """
    출력 pak 파일 경로를 생성합니다.

    출력 디렉토리가 없으면 상대 폴더 "Packaged"를 사용합니다.
    같은 입력에 대해서는 항상 같은 문자열을 반환합니다.
    """
    file_name = PAK_FILE_TEMPLATE.format(index=mod_index, name=mod_name)
    return os.path.join(output_directory or DEFAULT_OUTPUT_FOLDER, file_name)


def get_unreal_pak_path(engine_path: str) -> str:
    """엔진 디렉토리 기준 UnrealPak.exe 경로를 반환합니다."""
    return os.path.join(engine_path, *UNREAL_PAK_RELATIVE_PATH)


@dataclass(frozen=True)
class ModPackageRequest:
    """
    모드 하나를 pak 파일로 묶기 위한 요청

    설정과 명령줄 입력으로부터 한 번 생성되며 이후 변경되지 않습니다.
    """

    engine_path: str
    unreal_pak_path: str
    mod_directory: str
    mod_index: int
    mod_name: str
    pak_file_path: str
    packaging_flags: str

    @classmethod
    def create(
        cls,
        config: PackagingConfiguration,
        mod_directory: str,
        mod_index: int,
    ) -> "ModPackageRequest":
        mod_name = derive_mod_name(mod_directory)
        return cls(
            engine_path=config.engine_path,
            unreal_pak_path=get_unreal_pak_path(config.engine_path),
            mod_directory=mod_directory,
            mod_index=mod_index,
            mod_name=mod_name,
            pak_file_path=build_pak_file_path(
                config.output_directory, mod_index, mod_name
            ),
            packaging_flags=config.packaging_flags,
        )


class BasePackager(ABC):
    """패키징 작업의 기본 클래스"""

    @abstractmethod
    async def package(
        self, request: ModPackageRequest, manifest_path: Path
    ) -> PackagingResult:
        """
        매니페스트에 나열된 파일들을 패키징합니다.

        Args:
            request: 패키징 요청
            manifest_path: 포함할 파일 목록이 기록된 매니페스트 경로

        Returns:
            PackagingResult: 패키징 결과
        """
        pass
