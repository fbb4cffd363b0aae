"""
UnrealPak 실행 모듈

엔진 디렉토리의 UnrealPak.exe를 매니페스트와 패키징 인자로 실행하고
프로세스가 끝날 때까지 기다립니다.
"""

import asyncio
import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Callable, Optional

from ..localization.messages import get_message
from ..utils.console import Console
from .base import BasePackager, ModPackageRequest, PackagingResult
from .errors import PackagerLaunchError, PackagerNotFoundError

logger = logging.getLogger(__name__)

ProcessRunner = Callable[..., subprocess.CompletedProcess]


def build_command_line(request: ModPackageRequest, manifest_path: Path) -> str:
    """
    UnrealPak 명령줄을 만듭니다.

    패키징 인자는 해석하거나 이스케이프하지 않고 그대로 뒤에 붙입니다.
    """
    command_line = (
        f'"{request.unreal_pak_path}" "{request.pak_file_path}" '
        f'-create="{manifest_path}"'
    )
    if request.packaging_flags:
        command_line += f" {request.packaging_flags}"
    return command_line


class UnrealPakPackager(BasePackager):
    """UnrealPak.exe를 한 번 실행해 pak 파일을 만드는 클래스"""

    def __init__(
        self, console: Optional[Console] = None, runner: ProcessRunner = subprocess.run
    ):
        """
        Args:
            console: 진행 상황을 출력할 콘솔
            runner: 명령줄을 실행하는 함수 (기본값: subprocess.run)
        """
        self.console = console or Console()
        self.runner = runner

    async def package(
        self, request: ModPackageRequest, manifest_path: Path
    ) -> PackagingResult:
        """
        UnrealPak.exe를 실행해 pak 파일을 생성합니다.

        종료 코드는 결과에 기록만 하고 실패로 처리하지 않습니다.
        프로세스 시작 자체가 실패한 경우에만 예외가 발생합니다.

        Raises:
            PackagerNotFoundError: UnrealPak.exe가 없는 경우
            PackagerLaunchError: 프로세스를 시작할 수 없는 경우
        """
        self.console.write_line(
            get_message("pak.engine_directory", path=request.engine_path)
        )
        self.console.write_line(
            get_message("pak.unreal_pak", path=request.unreal_pak_path)
        )

        if not os.path.isfile(request.unreal_pak_path):
            raise PackagerNotFoundError(request.unreal_pak_path)

        command_line = build_command_line(request, manifest_path)
        # Windows에서는 문자열을 그대로 CreateProcess에 넘기고, 그 외에는 셸이 해석
        use_shell = platform.system() != "Windows"

        self.console.write_line(get_message("pak.starting"))
        logger.info(f"UnrealPak 실행: {command_line}")

        try:
            completed = await asyncio.to_thread(
                self.runner, command_line, shell=use_shell
            )
        except OSError as e:
            logger.error(f"UnrealPak 실행 실패: {e}")
            raise PackagerLaunchError(request.unreal_pak_path, e) from e

        if completed.returncode != 0:
            logger.warning(get_message("pak.exit_code", code=completed.returncode))

        return PackagingResult(
            success=True,
            output_path=request.pak_file_path,
            exit_code=completed.returncode,
        )
