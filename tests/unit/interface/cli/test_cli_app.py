from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Drives main() in-process with in-memory streams.
"""

import io
from pathlib import Path
from typing import Iterator, List

import pytest

from treeshell.infra.logging import shutdown_logging
from treeshell.interface.cli.app import EXIT_BAD_ROOT, EXIT_INTERRUPTED, EXIT_OK, main
from treeshell.utils.i18n import DEFAULT_LOCALE, i18n


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture(autouse=True)
def reset_locale() -> Iterator[None]:
    yield
    i18n.load_locale(DEFAULT_LOCALE)


def run_shell(root: Path, commands: List[str], *extra: str) -> tuple[int, List[str]]:
    """Feed commands to the shell and return (exit code, output lines)."""
    stdin = io.StringIO("".join(f"{c}\n" for c in commands))
    stdout = io.StringIO()
    code = main(["--root", str(root), "--no-prompt", *extra], stdin=stdin, stdout=stdout)
    return code, stdout.getvalue().splitlines()


def test_empty_directory_scenario(tmp_path: Path, workdir: Path) -> None:
    """TC-01: dir, mkdir x, dir, cd x, dir in a fresh directory."""
    area = tmp_path / "area"
    area.mkdir()

    code, lines = run_shell(area, ["dir", "mkdir x", "dir", "cd x", "dir", "exit"])

    assert code == EXIT_OK
    assert lines == ["Directory: x was created", "Directory: x 0"]


def test_invalid_command_and_cd_messages(sample_tree: Path, workdir: Path) -> None:
    code, lines = run_shell(sample_tree, ["ls", "cd nowhere", "exit"])

    assert code == EXIT_OK
    assert lines == ["Invalid command. Please try again.", "Invalid directory or not a directory."]


def test_end_of_input_exits_cleanly(sample_tree: Path, workdir: Path) -> None:
    """TC-02: Running out of input behaves like exit."""
    code, lines = run_shell(sample_tree, ["sortname"])

    assert code == EXIT_OK
    assert lines[0] == "File: Apple.txt 10"


def test_commands_after_exit_are_ignored(sample_tree: Path, workdir: Path) -> None:
    code, lines = run_shell(sample_tree, ["exit", "mkdir never"])

    assert code == EXIT_OK
    assert lines == []
    assert not (sample_tree / "never").exists()


def test_seeded_sizes_are_reproducible(tmp_path: Path, workdir: Path) -> None:
    """TC-03: --seed and size bounds drive mkfile sizes."""
    area = tmp_path / "area"
    area.mkdir()
    script = ["mkfile a", "mkfile b", "dir", "exit"]

    _, first = run_shell(area, script, "--seed", "3", "--min-size", "5", "--max-size", "6")
    _, second = run_shell(area, script, "--seed", "3", "--min-size", "5", "--max-size", "6")

    assert first == second
    sizes = [int(line.rsplit(" ", 1)[1]) for line in first if line.startswith("File: ") and "created" not in line]
    assert len(sizes) == 2
    assert all(5 <= s <= 6 for s in sizes)


def test_prompt_is_printed(sample_tree: Path, workdir: Path) -> None:
    stdout = io.StringIO()
    main(["--root", str(sample_tree)], stdin=io.StringIO("exit\n"), stdout=stdout)
    assert stdout.getvalue().startswith("Enter a command")


def test_invalid_root(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-04: A missing starting directory exits with code 2."""
    code = main(["--root", str(tmp_path / "missing"), "--no-prompt"], stdin=io.StringIO(""), stdout=io.StringIO())

    assert code == EXIT_BAD_ROOT
    assert "Cannot open starting directory" in capsys.readouterr().err


def test_keyboard_interrupt(sample_tree: Path) -> None:
    """TC-05: Ctrl-C exits with code 130."""

    class InterruptingInput(io.StringIO):
        def readline(self, *args) -> str:  # type: ignore[override]
            raise KeyboardInterrupt

    code = main(["--root", str(sample_tree), "--no-prompt"], stdin=InterruptingInput(), stdout=io.StringIO())
    assert code == EXIT_INTERRUPTED


def test_session_survives_nul_byte_in_mkdir(tmp_path: Path, workdir: Path) -> None:
    """A name the OS rejects outright is reported and the loop keeps reading."""
    area = tmp_path / "area"
    area.mkdir()

    code, lines = run_shell(area, ["mkdir a\x00b", "mkdir ok", "dir", "exit"])

    assert code == EXIT_OK
    assert lines == [
        "Directory: a\x00b could not be created",
        "Directory: ok was created",
        "Directory: ok 0",
    ]


def test_lang_flag_selects_spanish_messages(tmp_path: Path, workdir: Path) -> None:
    area = tmp_path / "area"
    area.mkdir()

    code, lines = run_shell(area, ["ls", "mkdir x", "mkdir x", "cd nowhere", "exit"], "--lang", "es")

    assert code == EXIT_OK
    assert lines == [
        "Comando no válido. Inténtalo de nuevo.",
        "Directorio: x creado",
        "Directorio: x ya existe",
        "Directorio no válido o no es un directorio.",
    ]


def test_unknown_lang_falls_back_to_english(sample_tree: Path, workdir: Path) -> None:
    code, lines = run_shell(sample_tree, ["ls", "exit"], "--lang", "fr")

    assert code == EXIT_OK
    assert lines == ["Invalid command. Please try again."]
