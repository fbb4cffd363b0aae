"""
매니페스트 생성 모듈

UnrealPak이 -create 인자로 읽는 파일 목록(filesList.txt)을 작성합니다.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

from .constants import GAME_ROOT_GLOB, MANIFEST_FILE_NAME, get_program_directory

logger = logging.getLogger(__name__)


def format_manifest(mod_directory: str) -> str:
    """모드 디렉토리와 게임 루트를 묶은 한 줄짜리 매니페스트를 반환합니다."""
    return f'"{mod_directory}\\*.*" "{GAME_ROOT_GLOB}"'


class ManifestBuilder:
    """프로그램 옆 고정 위치에 매니페스트를 만들고 지우는 클래스"""

    def __init__(self, manifest_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            manifest_dir: 매니페스트를 둘 디렉토리 (기본값: 실행 중인 프로그램 위치)
        """
        base_dir = Path(manifest_dir) if manifest_dir else get_program_directory()
        self.manifest_path = base_dir / MANIFEST_FILE_NAME

    async def build(self, mod_directory: str) -> Path:
        """매니페스트를 작성하고 경로를 반환합니다. 기존 파일은 덮어씁니다."""
        async with aiofiles.open(self.manifest_path, "w", encoding="utf-8") as f:
            await f.write(format_manifest(mod_directory))

        logger.debug(f"매니페스트 작성: {self.manifest_path}")
        return self.manifest_path

    async def cleanup(self) -> None:
        """매니페스트를 삭제합니다. 이미 없으면 무시합니다."""
        try:
            await aiofiles.os.remove(self.manifest_path)
            logger.debug(f"매니페스트 삭제: {self.manifest_path}")
        except FileNotFoundError:
            logger.debug(f"삭제할 매니페스트가 없습니다: {self.manifest_path}")
