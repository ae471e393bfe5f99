from __future__ import annotations

from pathlib import Path

import pytest

from cppscaffold.cli import build_parser, main


def test_parser_leaves_unset_flags_as_none():
    args = build_parser().parse_args(["create", "Foo"])
    assert args.use_ifndef is None
    assert args.use_pragma_once is None
    assert args.use_hpp_ending is None
    assert args.naming_scheme is None


def test_cli_create_writes_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["create", "Player", "--workspace", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "Player.h").exists()
    assert (tmp_path / "Player.cpp").exists()
    assert "Your class Player has been created!" in capsys.readouterr().out


def test_cli_flags_override_settings_file(tmp_path: Path):
    (tmp_path / ".cppscaffold.toml").write_text("useHPPEnding = true\n", encoding="utf-8")
    exit_code = main(
        [
            "create",
            "MyHttpClient",
            "-w",
            str(tmp_path),
            "--no-hpp",
            "--no-ifndef",
            "--pragma-once",
            "--naming-scheme",
            "KebabCase",
        ]
    )

    assert exit_code == 0
    header = (tmp_path / "my-http-client.h").read_text(encoding="utf-8")
    assert header.startswith("#pragma once")
    assert "#ifndef" not in header


def test_cli_prompts_for_missing_name(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "Enemy")
    assert main(["create", "-w", str(tmp_path)]) == 0
    assert (tmp_path / "Enemy.cpp").exists()


def test_cli_aborts_on_eof(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys):
    def raise_eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert main(["create", "-w", str(tmp_path)]) == 1
    assert "Aborted" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_reports_invalid_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["create", "Bad Name", "-w", str(tmp_path)]) == 1
    assert "should not contain spaces" in capsys.readouterr().err


def test_cli_reports_partial_write(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "Foo.cpp").mkdir()
    assert main(["create", "Foo", "-w", str(tmp_path)]) == 1

    err = capsys.readouterr().err
    assert "header written, source failed" in err
    assert str(tmp_path / "Foo.h") in err


def test_cli_directory_must_be_a_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    exit_code = main(
        ["create", "Foo", "-w", str(tmp_path), "--set-path", str(blocker)]
    )
    assert exit_code == 1
    assert "is not a directory" in capsys.readouterr().err


def test_cli_preview_prints_without_writing(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["preview", "Foo", "-w", str(tmp_path), "--hpp"]) == 0

    out = capsys.readouterr().out
    assert "#ifndef FOO_H" in out
    assert '#include "Foo.hpp"' in out
    assert list(tmp_path.iterdir()) == []


def test_cli_reports_unwritable_class_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["create", "A\x00B", "-w", str(tmp_path)]) == 1
    assert "header failed, source failed" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_reports_unknown_home_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(
        ["create", "Foo", "-w", str(tmp_path), "--set-path", "~cppscaffold-no-such-user/dir"]
    )
    assert exit_code == 1
    assert "Your class could not be created" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "value, expected",
    [("false", False), ("FALSE", False), ("true", True), ("ask", "ask"), ("src", "src")],
)
def test_parser_set_path_literals(value, expected):
    args = build_parser().parse_args(["create", "Foo", "--set-path", value])
    assert args.set_path == expected


def test_cli_set_path_false_overrides_settings_file(tmp_path: Path):
    (tmp_path / ".cppscaffold.toml").write_text('setPath = "classes"\n', encoding="utf-8")
    assert main(["create", "Foo", "-w", str(tmp_path), "--set-path", "false"]) == 0
    assert (tmp_path / "Foo.h").exists()
    assert not (tmp_path / "classes").exists()
