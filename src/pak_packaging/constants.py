"""
UnrealPak 패키징에 사용되는 고정 값들
"""

import os
import sys
from pathlib import Path

# 작업 디렉토리에 저장되는 설정 파일들
ENGINE_DIRECTORY_FILE = "EngineDirectory.txt"
OUTPUT_DIRECTORY_FILE = "OutputDirectory.txt"
PACKAGING_ARGUMENTS_FILE = "PackagingArguments.txt"
STARTUP_MESSAGE_FILE = "StartupMessage.txt"

DEFAULT_PACKAGING_ARGUMENTS = "-compress"

# 출력 디렉토리가 없을 때 사용하는 상대 폴더
DEFAULT_OUTPUT_FOLDER = "Packaged"

# 엔진 디렉토리 기준 UnrealPak 실행 파일 위치 (Win64 전용)
UNREAL_PAK_RELATIVE_PATH = ("Engine", "Binaries", "Win64", "UnrealPak.exe")

# 매니페스트에 두 번째로 포함되는 게임 루트 (작업 디렉토리 기준 세 단계 위)
GAME_ROOT_GLOB = "..\\..\\..\\*.*"

MANIFEST_FILE_NAME = "filesList.txt"

FORCED_INDEX_FLAG = "-forcedIndex"
INDEX_ARGUMENT_PREFIX = "-index="
LANGUAGE_ARGUMENT_PREFIX = "-language="

PAK_FILE_TEMPLATE = "pakchunk{index}({name})-WindowsNoEditor.pak"


def get_program_directory() -> Path:
    """실행 중인 프로그램(엔트리 스크립트)이 위치한 디렉토리를 반환합니다."""
    entry = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if entry:
        return Path(os.path.abspath(entry)).parent
    return Path.cwd()
