"""
패키징 관리자 모듈

매니페스트 생성, UnrealPak 실행, 임시 파일 정리를 순서대로 수행합니다.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .base import BasePackager, ModPackageRequest, PackagingResult
from .manifest import ManifestBuilder
from .unreal_pak import UnrealPakPackager

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """패키징 파이프라인 상태"""

    START = "start"
    CONFIGURE = "configure"
    IDENTIFY_MOD = "identify_mod"
    BUILD_MANIFEST = "build_manifest"
    INVOKE = "invoke"
    CLEANUP = "cleanup"
    DONE = "done"
    FAILED = "failed"


StageCallback = Callable[[PipelineState], None]


class PackageManager:
    """모드 하나의 패키징 작업을 관리하는 클래스"""

    def __init__(
        self,
        manifest_builder: Optional[ManifestBuilder] = None,
        packager: Optional[BasePackager] = None,
    ):
        self.manifest_builder = manifest_builder or ManifestBuilder()
        self.packager = packager or UnrealPakPackager()

    async def package(
        self, request: ModPackageRequest, on_stage: Optional[StageCallback] = None
    ) -> PackagingResult:
        """
        모드 디렉토리를 pak 파일로 패키징합니다.

        매니페스트는 패키징 결과와 관계없이 마지막에 항상 삭제됩니다.
        패키저에서 발생한 예외는 정리 후 그대로 전파됩니다.

        Args:
            request: 패키징 요청
            on_stage: 단계가 바뀔 때마다 호출되는 함수

        Returns:
            PackagingResult: 패키징 결과
        """
        notify = on_stage or (lambda state: None)
        logger.info(
            f"모드 패키징 시작: {request.mod_name} (인덱스 {request.mod_index})"
        )

        notify(PipelineState.BUILD_MANIFEST)
        manifest_path = await self.manifest_builder.build(request.mod_directory)
        try:
            notify(PipelineState.INVOKE)
            result = await self.packager.package(request, manifest_path)
        finally:
            notify(PipelineState.CLEANUP)
            await self.manifest_builder.cleanup()

        self._log_packaging_summary(request, result)
        return result

    def _log_packaging_summary(
        self, request: ModPackageRequest, result: PackagingResult
    ) -> None:
        logger.info(
            f"✅ {request.mod_name}: {result.output_path} (종료 코드 {result.exit_code})"
        )
