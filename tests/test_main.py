"""
메인 애플리케이션(전체 파이프라인) 테스트
"""

import asyncio
import subprocess
import tempfile
from pathlib import Path

from src.localization.messages import get_message, set_language
from src.main import UnrealPakApp, apply_language_argument
from src.pak_packaging import ManifestBuilder, PackageManager, PipelineState, UnrealPakPackager
from src.pak_packaging.base import get_unreal_pak_path
from src.pak_packaging.constants import (
    ENGINE_DIRECTORY_FILE,
    MANIFEST_FILE_NAME,
    OUTPUT_DIRECTORY_FILE,
    PACKAGING_ARGUMENTS_FILE,
)
from src.utils.console import Console
from src.utils.settings_store import (
    FileSentinelBackend,
    MemorySentinelBackend,
    SettingsStore,
)


class RecordingRunner:
    def __init__(self):
        self.calls = []

    def __call__(self, command_line, shell):
        self.calls.append(command_line)
        return subprocess.CompletedProcess(command_line, 0)


def create_app(root: Path, args, lines, backend=None, runner=None):
    """임시 디렉토리 기준으로 동작하는 애플리케이션을 만듭니다."""
    output = []
    console = Console(line_source=iter(lines).__next__, writer=output.append)
    backend = backend or FileSentinelBackend(root)
    runner = runner or RecordingRunner()
    app = UnrealPakApp(
        args,
        console=console,
        settings_store=SettingsStore(backend, console),
        package_manager=PackageManager(
            ManifestBuilder(root), UnrealPakPackager(console, runner=runner)
        ),
        banner_path=str(root / "StartupMessage.txt"),
    )
    return app, output, runner


def create_engine(root: Path) -> Path:
    engine_dir = root / "UE_4.27"
    unreal_pak = Path(get_unreal_pak_path(str(engine_dir)))
    unreal_pak.parent.mkdir(parents=True)
    unreal_pak.write_bytes(b"")
    return engine_dir


def test_first_run_stores_answers_and_packages():
    """첫 실행에서 입력한 값들이 저장되고 패키징까지 진행되는지 테스트"""
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        engine_dir = create_engine(root)
        mod_dir = root / "CookieHat"
        mod_dir.mkdir()
        output_dir = root / "Paks"

        lines = [
            str(root / "NotAnEngine"),  # 존재하지 않는 경로는 다시 물음
            str(engine_dir),
            str(output_dir),
            "three",
            "3",
            "",  # 종료 확인
        ]
        app, output, runner = create_app(root, [f'"{mod_dir}"'], lines)

        assert asyncio.run(app.run()) == 0
        assert app.state == PipelineState.DONE

        assert (root / ENGINE_DIRECTORY_FILE).read_text(encoding="utf-8") == str(
            engine_dir
        )
        assert (root / OUTPUT_DIRECTORY_FILE).read_text(encoding="utf-8") == str(
            output_dir
        )
        assert not (root / PACKAGING_ARGUMENTS_FILE).exists()
        assert not (root / MANIFEST_FILE_NAME).exists()

        expected_pak = output_dir / "pakchunk3(CookieHat)-WindowsNoEditor.pak"
        assert len(runner.calls) == 1
        assert f'"{expected_pak}"' in runner.calls[0]
        assert runner.calls[0].endswith(" -compress")
        assert output[-1] == "Press ENTER to exit application...\n"


def test_second_run_uses_stored_settings_and_forced_index():
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        engine_dir = create_engine(root)
        mod_dir = root / "CookieHat"
        mod_dir.mkdir()

        (root / ENGINE_DIRECTORY_FILE).write_text(f"{engine_dir}\n", encoding="utf-8")
        (root / OUTPUT_DIRECTORY_FILE).write_text(f" {root} ", encoding="utf-8")
        (root / PACKAGING_ARGUMENTS_FILE).write_text("-compress -platform=Windows\n", encoding="utf-8")
        (root / "StartupMessage.txt").write_text("\ufeffCookie Mod Tools\nv1", encoding="utf-8")

        args = [str(mod_dir), "-forcedIndex", "-index=12"]
        app, output, runner = create_app(root, args, [""])

        assert asyncio.run(app.run()) == 0
        assert output[0] == "Cookie Mod Tools\nv1\n\n"
        assert "pakchunk12(CookieHat)-WindowsNoEditor.pak" in runner.calls[0]
        assert runner.calls[0].endswith(" -compress -platform=Windows")


def test_missing_mod_directory_argument_fails():
    """모드 디렉토리 인자가 없으면 오류를 출력하고 확인을 기다리는지 테스트"""
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        backend = MemorySentinelBackend(
            {ENGINE_DIRECTORY_FILE: str(root), OUTPUT_DIRECTORY_FILE: str(root)}
        )
        app, output, runner = create_app(root, [], [""], backend=backend)

        assert asyncio.run(app.run()) == 1
        assert app.state == PipelineState.FAILED
        assert output[0].startswith("[ERROR] Directory with the mod files wasn't specified")
        assert output[-1] == "Press ENTER to exit application...\n"
        assert runner.calls == []


def test_missing_unreal_pak_leaves_no_manifest():
    """UnrealPak.exe가 없으면 실패하고 매니페스트와 pak 파일이 남지 않는지 테스트"""
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        mod_dir = root / "CookieHat"
        mod_dir.mkdir()
        backend = MemorySentinelBackend(
            {ENGINE_DIRECTORY_FILE: str(root), OUTPUT_DIRECTORY_FILE: str(root)}
        )
        args = [str(mod_dir), "-forcedIndex", "-index=1"]
        app, output, runner = create_app(root, args, [""], backend=backend)

        assert asyncio.run(app.run()) == 1
        assert any(text.startswith("[ERROR] UnrealPak.exe not found at:") for text in output)
        assert runner.calls == []
        assert not (root / MANIFEST_FILE_NAME).exists()
        assert not (root / "pakchunk1(CookieHat)-WindowsNoEditor.pak").exists()


def test_language_argument():
    try:
        apply_language_argument(["/mods/CookieHat", "-language=ko"])
        assert get_message("app.press_enter") == "종료하려면 ENTER 키를 누르세요..."

        apply_language_argument(["-language=xx"])
        assert get_message("app.press_enter") == "Press ENTER to exit application..."
    finally:
        set_language("en")
