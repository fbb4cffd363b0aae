"""
모드 식별 기능 테스트
"""

import tempfile
from pathlib import Path

import pytest

from src.pak_packaging.errors import InvalidPathError, MissingInputError
from src.pak_packaging.identity import (
    derive_index,
    derive_mod_name,
    find_mod_directory_argument,
    resolve_mod_directory,
)
from src.utils.console import Console, parse_int


def create_console(lines):
    """주어진 입력 줄을 차례로 돌려주는 콘솔과 출력 목록을 만듭니다."""
    output = []
    console = Console(line_source=iter(lines).__next__, writer=output.append)
    return console, output


@pytest.mark.parametrize(
    "raw",
    [
        "/mods/CookieHat",
        "/mods/CookieHat/",
        '"/mods/CookieHat"',
        '  "/mods/CookieHat/"  ',
        "C:\\ModFiles\\CookieHat",
        "C:\\ModFiles\\CookieHat\\",
    ],
)
def test_derive_mod_name_uses_last_component(raw):
    """따옴표나 끝 구분자와 관계없이 마지막 경로 요소를 사용하는지 테스트"""
    assert derive_mod_name(raw) == "CookieHat"


def test_parse_int():
    assert parse_int("3") == 3
    assert parse_int(" -12 ") == -12
    assert parse_int("+7") == 7
    assert parse_int("1_0") is None
    assert parse_int("abc") is None
    assert parse_int("") is None


def test_parse_int_rejects_non_ascii_digits_and_out_of_range():
    """ASCII 숫자와 32비트 정수 범위만 허용하는지 테스트"""
    assert parse_int("\u0663") is None
    assert parse_int("\uff17") is None
    assert parse_int("99999999999") is None
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648
    assert parse_int("2147483648") is None


def test_find_mod_directory_skips_flags():
    args = ["-forcedIndex", "-index=4", "/mods/CookieHat"]
    assert find_mod_directory_argument(args) == "/mods/CookieHat"
    assert find_mod_directory_argument(["-forcedIndex"]) is None


def test_resolve_mod_directory_missing_argument():
    """모드 디렉토리 인자가 없으면 MissingInputError가 발생하는지 테스트"""
    with pytest.raises(MissingInputError):
        resolve_mod_directory([])


def test_resolve_mod_directory_nonexistent():
    with tempfile.TemporaryDirectory() as temp_dir:
        missing = str(Path(temp_dir) / "NoSuchMod")

        with pytest.raises(InvalidPathError) as exc_info:
            resolve_mod_directory([missing])

        assert missing in str(exc_info.value)


def test_resolve_mod_directory_strips_quotes():
    with tempfile.TemporaryDirectory() as temp_dir:
        mod_dir = Path(temp_dir) / "CookieHat"
        mod_dir.mkdir()

        assert resolve_mod_directory([f'"{mod_dir}"']) == str(mod_dir)


@pytest.mark.parametrize("index", [0, 3, 42, -5])
def test_forced_index(index):
    """-forcedIndex와 -index=<N>이 주어지면 N을 그대로 사용하는지 테스트"""
    console, output = create_console([])
    args = ["/mods/CookieHat", "-forcedIndex", f"-index={index}"]

    assert derive_index(args, console) == index
    assert output == []


def test_forced_index_without_value_falls_back_to_zero():
    console, output = create_console([])

    assert derive_index(["/mods/CookieHat", "-forcedIndex"], console) == 0
    assert derive_index(["-forcedIndex", "-index=abc"], console) == 0
    assert derive_index(["-forcedIndex", "-index=99999999999"], console) == 0
    assert derive_index(["-forcedIndex", "-index=\u0663"], console) == 0
    assert output == []


def test_forced_index_uses_first_parseable_value():
    console, _ = create_console([])
    args = ["-index=x", "-index=8", "-forcedIndex", "-index=9"]

    assert derive_index(args, console) == 8


def test_index_prompt_repeats_until_integer():
    """정수가 입력될 때까지 다시 묻는지 테스트"""
    console, output = create_console(["", "abc", "2.5", " 7 "])

    assert derive_index(["/mods/CookieHat", "-index=3"], console) == 7
    assert len(output) == 4
    assert all(text.endswith(": ") for text in output)


@pytest.mark.parametrize("raw", ["C:\\", '"C:\\"', "/"])
def test_derive_mod_name_for_root_keeps_path(raw):
    """드라이브 루트는 빈 이름 대신 경로 자체를 이름으로 사용하는지 테스트"""
    assert derive_mod_name(raw) == raw.strip('"')
