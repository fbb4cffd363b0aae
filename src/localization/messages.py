"""
애플리케이션 전체의 지역화를 위한 메시지 카탈로그입니다.

모든 사용자 대상 문자열(콘솔 안내문, 오류 메시지 등)은
런타임에 번역하거나 대체할 수 있도록 안정적인 키로 여기에 정의됩니다.
형식화된 텍스트를 검색하려면 `get_message(key, **kwargs)`를 사용하세요.
"""

from __future__ import annotations

from typing import Any, Dict

# ---------------------------------------------------------------------------
# 1. 언어별 메시지 카탈로그
# ---------------------------------------------------------------------------

_CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        # Settings acquisition
        "settings.engine_prompt": "\n[Engine Directory] Specify your Unreal Engine installation directory:",
        "settings.output_prompt": "\n[Output Directory] Specify destination folder for your mods:",
        "settings.stored": "[{file}] Path has been stored.",
        # Mod identity
        "identity.index_prompt": "\n[UnrealPak] Specify index for your mod package: ",
        "identity.index_fallback": "-forcedIndex was given without a valid -index=<N> argument, using index 0",
        # Packaging
        "pak.engine_directory": "[UnrealPak] Unreal Engine Directory: {path}",
        "pak.unreal_pak": "[UnrealPak] Unreal Pak: {path}",
        "pak.starting": "\nStarting packaging process...",
        "pak.finished": "[UnrealPak] Mod package: {path}",
        "pak.exit_code": "UnrealPak.exe exited with code {code}",
        # Errors
        "error.missing_mod_directory": 'Directory with the mod files wasn\'t specified through command line arguments! Example: UnrealPak.exe "C:\\ModFiles\\CookieHat"',
        "error.mod_directory_not_found": 'Directory with the mod files doesn\'t exist! "{path}"',
        "error.packager_not_found": "UnrealPak.exe not found at: {path}",
        "error.packager_launch": "UnrealPak.exe could not be started: {error}",
        # Application lifecycle
        "app.error": "[ERROR] {message}",
        "app.press_enter": "Press ENTER to exit application...",
    },
    "ko": {
        # 설정 입력
        "settings.engine_prompt": "\n[엔진 디렉토리] 언리얼 엔진 설치 경로를 입력하세요:",
        "settings.output_prompt": "\n[출력 디렉토리] 모드 파일을 저장할 폴더를 입력하세요:",
        "settings.stored": "[{file}] 경로가 저장되었습니다.",
        # 모드 식별
        "identity.index_prompt": "\n[UnrealPak] 모드 패키지 인덱스를 입력하세요: ",
        "identity.index_fallback": "-forcedIndex가 지정되었지만 올바른 -index=<N> 인자가 없어 인덱스 0을 사용합니다",
        # 패키징
        "pak.engine_directory": "[UnrealPak] 언리얼 엔진 디렉토리: {path}",
        "pak.unreal_pak": "[UnrealPak] Unreal Pak: {path}",
        "pak.starting": "\n패키징을 시작합니다...",
        "pak.finished": "[UnrealPak] 모드 패키지: {path}",
        "pak.exit_code": "UnrealPak.exe 종료 코드: {code}",
        # 오류
        "error.missing_mod_directory": '명령줄 인자로 모드 파일 디렉토리가 지정되지 않았습니다! 예: UnrealPak.exe "C:\\ModFiles\\CookieHat"',
        "error.mod_directory_not_found": '모드 파일 디렉토리가 존재하지 않습니다! "{path}"',
        "error.packager_not_found": "UnrealPak.exe를 찾을 수 없습니다: {path}",
        "error.packager_launch": "UnrealPak.exe를 실행할 수 없습니다: {error}",
        # 애플리케이션 수명 주기
        "app.error": "[오류] {message}",
        "app.press_enter": "종료하려면 ENTER 키를 누르세요...",
    },
}

# 현재 선택된 언어 (기본값: 영어).
_LANG: str = "en"


# ---------------------------------------------------------------------------
# 2. API 헬퍼
# ---------------------------------------------------------------------------


def set_language(lang: str) -> None:  # noqa: D401
    """지역화를 위한 전역 언어를 설정합니다 (예: "en", "ko")."""
    global _LANG
    if lang in _CATALOGS:
        _LANG = lang
    else:
        _LANG = "en"


def get_message(key: str, **kwargs: Any) -> str:  # noqa: D401
    """지정된 키에 대한 지역화된 메시지를 반환합니다."""
    catalog = _CATALOGS.get(_LANG, _CATALOGS["en"])
    template = catalog.get(key, f"<{key}>")
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError):
        # 포맷팅 실패 시 템플릿을 그대로 반환
        return template
