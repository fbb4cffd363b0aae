"""
메인 애플리케이션 진입점

설정 결정 → 모드 식별 → 매니페스트 생성 → UnrealPak 실행 → 정리 순서로
모드 파일 디렉토리를 pak 파일로 패키징합니다.
"""

import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from src.localization.messages import get_message, set_language
from src.pak_packaging import (
    ModPackageRequest,
    PackageManager,
    PackagingConfiguration,
    PackagingResult,
    PipelineState,
    UnrealPakError,
)
from src.pak_packaging.constants import LANGUAGE_ARGUMENT_PREFIX, STARTUP_MESSAGE_FILE
from src.pak_packaging.identity import derive_index, resolve_mod_directory
from src.pak_packaging.manifest import ManifestBuilder
from src.pak_packaging.unreal_pak import UnrealPakPackager
from src.utils.console import Console
from src.utils.settings_store import FileSentinelBackend, SettingsStore

logger = logging.getLogger(__name__)


def apply_language_argument(args: Sequence[str]) -> None:
    """-language=<code> 인자가 있으면 메시지 언어를 설정합니다."""
    for argument in args:
        if argument.startswith(LANGUAGE_ARGUMENT_PREFIX):
            set_language(argument[len(LANGUAGE_ARGUMENT_PREFIX) :])


class UnrealPakApp:
    """메인 애플리케이션 클래스"""

    def __init__(
        self,
        args: Sequence[str],
        console: Optional[Console] = None,
        settings_store: Optional[SettingsStore] = None,
        package_manager: Optional[PackageManager] = None,
        banner_path: str = STARTUP_MESSAGE_FILE,
    ):
        self.args: List[str] = list(args)
        self.console = console or Console()
        self.settings_store = settings_store or SettingsStore(
            FileSentinelBackend(), self.console
        )
        self.package_manager = package_manager or PackageManager(
            ManifestBuilder(), UnrealPakPackager(self.console)
        )
        self.banner_path = banner_path
        self.state = PipelineState.START

    def _set_state(self, state: PipelineState) -> None:
        logger.debug(f"상태 변경: {self.state.value} → {state.value}")
        self.state = state

    async def load_configuration(self) -> PackagingConfiguration:
        """엔진 경로, 출력 디렉토리, 패키징 인자를 결정합니다."""
        return PackagingConfiguration(
            engine_path=await self.settings_store.get_engine_path(),
            output_directory=await self.settings_store.get_output_directory(),
            packaging_flags=await self.settings_store.get_packaging_arguments(),
        )

    async def run_pipeline(self) -> PackagingResult:
        """오류 처리 없이 패키징 파이프라인 전체를 실행합니다."""
        await self.console.print_banner(self.banner_path)

        self._set_state(PipelineState.CONFIGURE)
        config = await self.load_configuration()

        self._set_state(PipelineState.IDENTIFY_MOD)
        mod_directory = resolve_mod_directory(self.args)
        mod_index = derive_index(self.args, self.console)
        request = ModPackageRequest.create(config, mod_directory, mod_index)

        return await self.package_manager.package(request, on_stage=self._set_state)

    async def run(self) -> int:
        """
        파이프라인을 실행하고 종료 전 사용자 확인을 기다립니다.

        Returns:
            성공 시 0, 실패 시 1
        """
        try:
            result = await self.run_pipeline()
        except UnrealPakError as e:
            return self._fail(str(e))
        except Exception as e:
            logger.error(f"예상치 못한 오류 발생: {e!r}")
            return self._fail(str(e) or type(e).__name__)

        self._set_state(PipelineState.DONE)
        self.console.write_line(get_message("pak.finished", path=result.output_path))
        self.console.wait_for_acknowledgment()
        return 0

    def _fail(self, message: str) -> int:
        self._set_state(PipelineState.FAILED)
        logger.error(message)
        self.console.write_line(get_message("app.error", message=message))
        self.console.wait_for_acknowledgment()
        return 1


def run(argv: Optional[Sequence[str]] = None) -> int:
    """명령줄 진입점"""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    args = sys.argv[1:] if argv is None else list(argv)
    apply_language_argument(args)

    app = UnrealPakApp(args)
    return asyncio.run(app.run())


if __name__ == "__main__":
    sys.exit(run())
