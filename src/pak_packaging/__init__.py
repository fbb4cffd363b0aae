"""
UnrealPak 모드 패키징 모듈

모드 파일 디렉토리를 언리얼 엔진의 UnrealPak.exe로 하나의 pak 파일로 묶습니다.
- 모드 식별: 명령줄 인자에서 모드 디렉토리, 이름, 인덱스 결정
- 매니페스트: UnrealPak이 읽을 임시 파일 목록 생성
- 실행: UnrealPak.exe 실행 후 임시 파일 정리
"""

from .base import (
    BasePackager,
    ModPackageRequest,
    PackagingConfiguration,
    PackagingResult,
)
from .errors import (
    InvalidPathError,
    MissingInputError,
    PackagerLaunchError,
    PackagerNotFoundError,
    UnrealPakError,
)
from .manager import PackageManager, PipelineState
from .manifest import ManifestBuilder
from .unreal_pak import UnrealPakPackager

__all__ = [
    "BasePackager",
    "ModPackageRequest",
    "PackagingConfiguration",
    "PackagingResult",
    "InvalidPathError",
    "MissingInputError",
    "PackagerLaunchError",
    "PackagerNotFoundError",
    "UnrealPakError",
    "PackageManager",
    "PipelineState",
    "ManifestBuilder",
    "UnrealPakPackager",
]
